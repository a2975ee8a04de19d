"""Document repository port."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol
from uuid import UUID

from doclineage.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document persistence. There is no update or hard delete."""

    async def get_by_id(
        self, document_id: UUID, include_deleted: bool = False
    ) -> Document | None: ...

    async def list_active(self) -> list[Document]: ...

    async def create(self, document: Document) -> Document: ...

    async def save_atomic(self, changes: Sequence[Document]) -> None: ...

    async def soft_delete(
        self,
        document_id: UUID,
        *,
        deleted_by: str,
        reason: str,
        deleted_at: datetime,
    ) -> Document: ...

    async def find_lineage(
        self, root_id: UUID, include_deleted: bool = False
    ) -> list[Document]: ...
