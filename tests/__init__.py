"""Tests for doclineage."""
