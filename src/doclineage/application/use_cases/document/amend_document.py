"""Amend document use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from doclineage.application.dto.document_dto import (
    DocumentContentInput,
    DocumentOutput,
    to_output,
)
from doclineage.application.ports import AuditLogger
from doclineage.application.use_cases.document.common import (
    build_document,
    load_document,
)
from doclineage.domain.entities import AuditEvent
from doclineage.domain.exceptions import Conflict
from doclineage.domain.services import RetentionGuard, resolve_root
from doclineage.domain.value_objects import AuditEventType, DocumentStatus

logger = logging.getLogger(__name__)


class AmendDocumentUseCase:
    """Supersede a document with a new version of its lineage.

    The only sanctioned way to change a document's content. The original is
    flipped to superseded and the amendment is inserted in one save_atomic
    call; the audit event is emitted inside the same unit of work, so a
    failing audit sink rolls both changes back.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        audit_logger: AuditLogger,
        retention_guard: RetentionGuard,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit_logger = audit_logger
        self._retention_guard = retention_guard

    async def execute(
        self,
        user_id: str,
        original_id: UUID,
        input_data: DocumentContentInput,
        supersession_reason: str,
    ) -> DocumentOutput:
        """Create the next version of original_id and return it."""
        async with self._uow_factory() as uow:
            original = await load_document(uow, original_id)
            self._retention_guard.validate_supersession_reason(supersession_reason)
            if not original.is_current:
                logger.warning(
                    "Amendment of %s rejected: already superseded", original_id
                )
                raise Conflict(
                    f"Document {original_id} has already been superseded; "
                    "reload the current version and retry"
                )

            now = datetime.now(UTC)
            amendment = build_document(
                input_data,
                document_id=uuid4(),
                created_by=user_id,
                created_at=now,
                retention_date=self._retention_guard.retention_date_for(
                    now, input_data.retention_date
                ),
                version=original.version + 1,
                root_id=resolve_root(original),
                supersession_reason=supersession_reason,
            )
            superseded = replace(original, status=DocumentStatus.SUPERSEDED)

            await uow.documents.save_atomic([superseded, amendment])
            await self._audit_logger.log_event(
                AuditEvent(
                    actor_id=user_id,
                    event_type=AuditEventType.AMEND,
                    entity_id=amendment.id,
                    action="Created document amendment",
                    changes={
                        "title": amendment.title,
                        "original_document_id": str(original.id),
                        "root_document_id": str(amendment.root_id),
                        "version": amendment.version,
                        "supersession_reason": supersession_reason,
                    },
                )
            )

        logger.info(
            "Document %s superseded by %s (version %d)",
            original.id,
            amendment.id,
            amendment.version,
        )
        return to_output(amendment)
