"""Get document use case."""

from uuid import UUID

from doclineage.application.dto.document_dto import DocumentOutput, to_output
from doclineage.application.use_cases.document.common import load_document


class GetDocumentUseCase:
    """Get a live document by id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> DocumentOutput:
        """Get document by id. Tombstoned documents raise NotFound."""
        async with self._uow_factory() as uow:
            document = await load_document(uow, document_id)
        return to_output(document)
