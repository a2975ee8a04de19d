"""Update document use case - always rejected."""

import logging
from typing import NoReturn
from uuid import UUID

from doclineage.application.dto.document_dto import DocumentContentInput
from doclineage.domain.services import RetentionGuard

logger = logging.getLogger(__name__)


class UpdateDocumentUseCase:
    """In-place update of a document. Raises Forbidden without touching storage."""

    def __init__(self, retention_guard: RetentionGuard) -> None:
        self._retention_guard = retention_guard

    async def execute(
        self, document_id: UUID, input_data: DocumentContentInput | None = None
    ) -> NoReturn:
        logger.warning("Direct update of document %s rejected", document_id)
        self._retention_guard.reject_update(document_id)
