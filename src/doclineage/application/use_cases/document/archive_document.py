"""Archive document use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from doclineage.application.dto.document_dto import DocumentOutput, to_output
from doclineage.application.ports import AuditLogger
from doclineage.application.use_cases.document.common import load_document
from doclineage.domain.entities import AuditEvent
from doclineage.domain.services import RetentionGuard
from doclineage.domain.value_objects import AuditEventType, DocumentStatus

logger = logging.getLogger(__name__)


class ArchiveDocumentUseCase:
    """Move the current version to archived once its retention date has passed."""

    def __init__(
        self,
        unit_of_work_factory: type,
        audit_logger: AuditLogger,
        retention_guard: RetentionGuard,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit_logger = audit_logger
        self._retention_guard = retention_guard

    async def execute(self, user_id: str, document_id: UUID) -> DocumentOutput:
        """Archive document_id. Raises Forbidden inside the retention period."""
        async with self._uow_factory() as uow:
            document = await load_document(uow, document_id)
            self._retention_guard.check_archivable(document, datetime.now(UTC).date())
            archived = replace(document, status=DocumentStatus.ARCHIVED)
            await uow.documents.save_atomic([archived])
            await self._audit_logger.log_event(
                AuditEvent(
                    actor_id=user_id,
                    event_type=AuditEventType.ARCHIVE,
                    entity_id=document.id,
                    action="Archived document",
                    changes={
                        "title": archived.title,
                        "version": archived.version,
                        "retention_date": archived.retention_date.isoformat(),
                    },
                )
            )

        logger.info("Document %s archived by %s", document_id, user_id)
        return to_output(archived)
