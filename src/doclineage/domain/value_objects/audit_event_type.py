"""Audit event types emitted by document mutations."""

from enum import StrEnum


class AuditEventType(StrEnum):
    """Kinds of audited document mutations."""

    CREATE = "create"
    AMEND = "amend"
    DELETE = "delete"
    ARCHIVE = "archive"
