"""Get document history use case."""

from uuid import UUID

from doclineage.application.dto.document_dto import DocumentOutput, to_output
from doclineage.application.use_cases.document.common import load_document
from doclineage.domain.services import resolve_root, verify_chain


class GetDocumentHistoryUseCase:
    """Full version chain of a document, tombstoned versions included.

    Any version of the lineage may be queried, deleted ones too. The chain is
    verified before it is returned; a broken chain raises LineageBroken rather
    than coming back partial.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> list[DocumentOutput]:
        """Return the lineage of document_id ordered by version."""
        async with self._uow_factory() as uow:
            document = await load_document(uow, document_id, include_deleted=True)
            root_id = resolve_root(document)
            chain = await uow.documents.find_lineage(root_id, include_deleted=True)

        return [to_output(d) for d in verify_chain(root_id, chain)]
