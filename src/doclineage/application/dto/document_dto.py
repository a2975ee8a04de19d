"""Document DTOs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from doclineage.domain.entities import Document
from doclineage.domain.value_objects import DocumentStatus, DocumentType


@dataclass
class DocumentContentInput:
    """Content of a new document or of a new version."""

    title: str
    document_type: DocumentType
    description: str | None = None
    file_reference: str | None = None
    file_size: int | None = None
    file_hash: str | None = None
    mime_type: str | None = None
    household_id: UUID | None = None
    account_id: UUID | None = None
    retention_date: date | None = None


@dataclass
class DocumentOutput:
    """Output DTO for document."""

    id: UUID
    root_id: UUID | None
    version: int
    status: DocumentStatus
    title: str
    description: str | None
    document_type: DocumentType
    file_reference: str | None
    file_size: int | None
    file_hash: str | None
    mime_type: str | None
    household_id: UUID | None
    account_id: UUID | None
    created_by: str
    created_at: datetime
    retention_date: date | None
    supersession_reason: str | None
    deleted_at: datetime | None
    deleted_by: str | None
    deletion_reason: str | None


def to_output(document: Document) -> DocumentOutput:
    """Map a Document entity to its output DTO."""
    return DocumentOutput(
        id=document.id,
        root_id=document.root_id,
        version=document.version,
        status=document.status,
        title=document.title,
        description=document.description,
        document_type=document.document_type,
        file_reference=document.file_reference,
        file_size=document.file_size,
        file_hash=str(document.file_hash) if document.file_hash else None,
        mime_type=document.mime_type,
        household_id=document.household_id,
        account_id=document.account_id,
        created_by=document.created_by,
        created_at=document.created_at,
        retention_date=document.retention_date,
        supersession_reason=document.supersession_reason,
        deleted_at=document.deleted_at,
        deleted_by=document.deleted_by,
        deletion_reason=document.deletion_reason,
    )
