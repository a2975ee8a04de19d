"""Audit sink adapters."""
