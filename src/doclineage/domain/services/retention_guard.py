"""Retention guard - gatekeeping for irreversible-looking operations."""

from datetime import date, datetime
from typing import NoReturn
from uuid import UUID

from doclineage.domain.entities import Document
from doclineage.domain.exceptions import Conflict, Forbidden, ValidationError
from doclineage.domain.value_objects import DocumentStatus

UPDATE_FORBIDDEN_MESSAGE = (
    "Documents cannot be modified after creation under the write-once "
    "recordkeeping policy. Amend the document to create a new version "
    "that supersedes the original."
)


def _add_years(d: date, years: int) -> date:
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        # Feb 29 into a non-leap year
        return d.replace(year=d.year + years, day=28)


class RetentionGuard:
    """Policy checks run before any deletion, amendment, archive or update.

    Every method either returns or raises; none of them touch storage.
    """

    def __init__(
        self,
        min_deletion_reason_length: int = 10,
        min_supersession_reason_length: int = 10,
        retention_years: int = 6,
    ) -> None:
        self._min_deletion_reason_length = min_deletion_reason_length
        self._min_supersession_reason_length = min_supersession_reason_length
        self._retention_years = retention_years

    def validate_deletion_reason(self, reason: str | None) -> None:
        """Raise ValidationError unless the reason is detailed enough."""
        self._validate_reason("deletion", reason, self._min_deletion_reason_length)

    def validate_supersession_reason(self, reason: str | None) -> None:
        """Raise ValidationError unless the reason is detailed enough."""
        self._validate_reason(
            "supersession", reason, self._min_supersession_reason_length
        )

    def reject_update(self, document_id: UUID) -> NoReturn:
        """Direct updates are never allowed."""
        raise Forbidden(f"Document {document_id}: {UPDATE_FORBIDDEN_MESSAGE}")

    def retention_date_for(self, created_at: datetime, requested: date | None) -> date:
        """Requested retention date, or the policy default counted from creation."""
        if requested is not None:
            return requested
        return _add_years(created_at.date(), self._retention_years)

    def check_archivable(self, document: Document, today: date) -> None:
        """Only a live, active document past its retention date may be archived."""
        if document.status != DocumentStatus.ACTIVE:
            raise Conflict(
                f"Document {document.id} is {document.status}; only the active version can be archived"
            )
        if document.retention_date is None or document.retention_date > today:
            raise Forbidden(
                f"Document {document.id} is still within its retention period"
            )

    @staticmethod
    def _validate_reason(kind: str, reason: str | None, min_length: int) -> None:
        if not reason or not reason.strip():
            raise ValidationError(f"A {kind} reason is required")
        if len(reason.strip()) < min_length:
            raise ValidationError(
                f"A detailed {kind} reason (minimum {min_length} characters) is required"
            )
