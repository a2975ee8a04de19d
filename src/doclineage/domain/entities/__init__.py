"""Domain entities."""

from doclineage.domain.entities.audit_event import AuditEvent
from doclineage.domain.entities.document import (
    ALLOWED_TRANSITIONS,
    MUTABLE_FIELDS,
    Document,
    check_new_record,
    check_status_change,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "AuditEvent",
    "Document",
    "MUTABLE_FIELDS",
    "check_new_record",
    "check_status_change",
]
