"""Create document use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from doclineage.application.dto.document_dto import (
    DocumentContentInput,
    DocumentOutput,
    to_output,
)
from doclineage.application.ports import AuditLogger
from doclineage.application.use_cases.document.common import build_document
from doclineage.domain.entities import AuditEvent
from doclineage.domain.services import RetentionGuard
from doclineage.domain.value_objects import AuditEventType

logger = logging.getLogger(__name__)


class CreateDocumentUseCase:
    """Create the root record (version 1) of a new lineage."""

    def __init__(
        self,
        unit_of_work_factory: type,
        audit_logger: AuditLogger,
        retention_guard: RetentionGuard,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit_logger = audit_logger
        self._retention_guard = retention_guard

    async def execute(self, user_id: str, input_data: DocumentContentInput) -> DocumentOutput:
        """Persist a new document and audit its creation."""
        now = datetime.now(UTC)
        document = build_document(
            input_data,
            document_id=uuid4(),
            created_by=user_id,
            created_at=now,
            retention_date=self._retention_guard.retention_date_for(
                now, input_data.retention_date
            ),
        )

        async with self._uow_factory() as uow:
            await uow.documents.create(document)
            await self._audit_logger.log_event(
                AuditEvent(
                    actor_id=user_id,
                    event_type=AuditEventType.CREATE,
                    entity_id=document.id,
                    action="Created document",
                    changes={
                        "title": document.title,
                        "document_type": str(document.document_type),
                        "version": document.version,
                    },
                )
            )

        logger.info("Document %s created by %s", document.id, user_id)
        return to_output(document)
