"""Domain value objects."""

from doclineage.domain.value_objects.audit_event_type import AuditEventType
from doclineage.domain.value_objects.document_status import DocumentStatus
from doclineage.domain.value_objects.document_type import DocumentType
from doclineage.domain.value_objects.file_hash import FileHash

__all__ = [
    "AuditEventType",
    "DocumentStatus",
    "DocumentType",
    "FileHash",
]
