"""List active documents use case."""

from doclineage.application.dto.document_dto import DocumentOutput, to_output


class ListActiveDocumentsUseCase:
    """Active, non-deleted documents, newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[DocumentOutput]:
        async with self._uow_factory() as uow:
            documents = await uow.documents.list_active()
        return [to_output(d) for d in documents]
