"""Document lifecycle status."""

from enum import StrEnum


class DocumentStatus(StrEnum):
    """Status of a document record within its lineage."""

    ACTIVE = "active"
    SUPERSEDED = "superseded"
    ARCHIVED = "archived"
