"""Delete document use case (soft delete only)."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from doclineage.application.ports import AuditLogger
from doclineage.application.use_cases.document.common import load_document
from doclineage.domain.entities import AuditEvent
from doclineage.domain.services import RetentionGuard
from doclineage.domain.value_objects import AuditEventType

logger = logging.getLogger(__name__)


class DeleteDocumentUseCase:
    """Retire a document with a justified tombstone. Rows are never erased."""

    def __init__(
        self,
        unit_of_work_factory: type,
        audit_logger: AuditLogger,
        retention_guard: RetentionGuard,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit_logger = audit_logger
        self._retention_guard = retention_guard

    async def execute(self, user_id: str, document_id: UUID, deletion_reason: str) -> None:
        """Soft delete document_id after validating the reason."""
        self._retention_guard.validate_deletion_reason(deletion_reason)

        async with self._uow_factory() as uow:
            document = await load_document(uow, document_id)
            deleted = await uow.documents.soft_delete(
                document.id,
                deleted_by=user_id,
                reason=deletion_reason,
                deleted_at=datetime.now(UTC),
            )
            await self._audit_logger.log_event(
                AuditEvent(
                    actor_id=user_id,
                    event_type=AuditEventType.DELETE,
                    entity_id=document.id,
                    action="Soft deleted document",
                    changes={
                        "title": deleted.title,
                        "version": deleted.version,
                        "deletion_reason": deletion_reason,
                    },
                )
            )

        logger.info("Document %s soft deleted by %s", document_id, user_id)
