"""Helpers shared by document use cases."""

from datetime import date, datetime
from uuid import UUID

from doclineage.application.dto.document_dto import DocumentContentInput
from doclineage.application.ports import UnitOfWork
from doclineage.domain.entities import Document
from doclineage.domain.exceptions import NotFound
from doclineage.domain.value_objects import DocumentStatus


async def load_document(
    uow: UnitOfWork, document_id: UUID, include_deleted: bool = False
) -> Document:
    """Get document by id or raise NotFound.

    Without include_deleted a tombstoned record is reported exactly like a
    missing one.
    """
    document = await uow.documents.get_by_id(document_id, include_deleted=include_deleted)
    if document is None or (document.is_deleted and not include_deleted):
        raise NotFound("Document", str(document_id))
    return document


def build_document(
    content: DocumentContentInput,
    *,
    document_id: UUID,
    created_by: str,
    created_at: datetime,
    retention_date: date,
    version: int = 1,
    root_id: UUID | None = None,
    supersession_reason: str | None = None,
) -> Document:
    """Build a new active record from content. Raises ValidationError."""
    return Document(
        id=document_id,
        root_id=root_id,
        version=version,
        status=DocumentStatus.ACTIVE,
        title=content.title,
        description=content.description,
        document_type=content.document_type,
        file_reference=content.file_reference,
        file_size=content.file_size,
        file_hash=content.file_hash,
        mime_type=content.mime_type,
        household_id=content.household_id,
        account_id=content.account_id,
        created_by=created_by,
        created_at=created_at,
        retention_date=retention_date,
        supersession_reason=supersession_reason,
    )
