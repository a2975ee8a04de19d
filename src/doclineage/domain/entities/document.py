"""Document entity."""

from dataclasses import dataclass, fields
from datetime import date, datetime
from uuid import UUID

from doclineage.domain.exceptions import Conflict, Forbidden, ValidationError
from doclineage.domain.value_objects import DocumentStatus, DocumentType, FileHash

# Fields that may change after a record is persisted. Everything else is write-once.
MUTABLE_FIELDS = frozenset({"status", "deleted_at", "deleted_by", "deletion_reason"})

# Column widths of the document table.
MAX_LENGTHS = {"title": 300, "mime_type": 100, "created_by": 255, "deleted_by": 255}


@dataclass(frozen=True)
class Document:
    """Write-once document metadata record, one version within a lineage."""

    id: UUID
    version: int
    status: DocumentStatus
    title: str
    document_type: DocumentType
    created_by: str
    created_at: datetime
    root_id: UUID | None = None
    description: str | None = None
    file_reference: str | None = None
    file_size: int | None = None
    file_hash: FileHash | None = None
    mime_type: str | None = None
    household_id: UUID | None = None
    account_id: UUID | None = None
    retention_date: date | None = None
    supersession_reason: str | None = None
    deleted_at: datetime | None = None
    deleted_by: str | None = None
    deletion_reason: str | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValidationError("title is required")
        if not self.created_by or not self.created_by.strip():
            raise ValidationError("created_by is required")
        for name, limit in MAX_LENGTHS.items():
            value = getattr(self, name)
            if value is not None and len(value) > limit:
                raise ValidationError(f"{name} must be at most {limit} characters")
        if self.version < 1:
            raise ValidationError("version must be a positive integer")
        if self.file_size is not None and self.file_size < 0:
            raise ValidationError("file_size must not be negative")
        if self.root_id is None and self.version != 1:
            raise ValidationError("a root document must be version 1")
        if self.root_id is not None:
            if self.root_id == self.id:
                raise ValidationError("root_id must reference another document")
            if self.version < 2:
                raise ValidationError("an amendment must have version 2 or higher")
            if not self.supersession_reason or not self.supersession_reason.strip():
                raise ValidationError("supersession_reason is required on amendments")
        if self.deleted_at is not None and not self.deleted_by:
            raise ValidationError("deleted_by is required on a deleted document")
        try:
            object.__setattr__(self, "document_type", DocumentType(self.document_type))
            object.__setattr__(self, "status", DocumentStatus(self.status))
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if isinstance(self.file_hash, str):
            object.__setattr__(self, "file_hash", FileHash(self.file_hash))

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_current(self) -> bool:
        """True for the one record of a lineage that has not been superseded."""
        return self.status != DocumentStatus.SUPERSEDED


# Status moves an existing record may make. Superseded is terminal.
ALLOWED_TRANSITIONS: dict[DocumentStatus, frozenset[DocumentStatus]] = {
    DocumentStatus.ACTIVE: frozenset({DocumentStatus.SUPERSEDED, DocumentStatus.ARCHIVED}),
    DocumentStatus.ARCHIVED: frozenset({DocumentStatus.SUPERSEDED}),
    DocumentStatus.SUPERSEDED: frozenset(),
}


def check_status_change(stored: Document, changed: Document) -> None:
    """Validate a change to an already persisted record against its stored row.

    Raises Forbidden when any write-once field differs and Conflict when the
    stored row is no longer in a state the change was computed from.
    """
    for f in fields(Document):
        if f.name in MUTABLE_FIELDS:
            continue
        if getattr(stored, f.name) != getattr(changed, f.name):
            raise Forbidden(
                f"Document {stored.id}: field '{f.name}' is immutable once persisted"
            )
    # a change computed from a copy loaded before a concurrent soft delete
    if stored.is_deleted:
        raise Conflict(f"Document {stored.id} was deleted")
    if (changed.deleted_at, changed.deleted_by, changed.deletion_reason) != (
        stored.deleted_at,
        stored.deleted_by,
        stored.deletion_reason,
    ):
        raise Forbidden(f"Document {stored.id}: tombstones are set by soft delete only")
    if changed.status not in ALLOWED_TRANSITIONS[stored.status]:
        raise Conflict(
            f"Document {stored.id} is {stored.status}; cannot move to {changed.status}"
        )


def check_new_record(document: Document) -> None:
    """A record enters storage live and active; history is never back-filled."""
    if document.status != DocumentStatus.ACTIVE or document.is_deleted:
        raise Forbidden(f"Document {document.id}: new records must be stored active")
