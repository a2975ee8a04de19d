"""PostgreSQL document repository implementation."""

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import InsufficientPrivilege, LockNotAvailable, UniqueViolation

from doclineage.domain.entities import Document, check_new_record, check_status_change
from doclineage.domain.exceptions import Conflict, Forbidden, NotFound
from doclineage.domain.value_objects import DocumentStatus

_COLUMNS = (
    "id, root_id, version, status, title, description, document_type, "
    "file_reference, file_size, file_hash, mime_type, household_id, account_id, "
    "created_by, created_at, retention_date, supersession_reason, "
    "deleted_at, deleted_by, deletion_reason"
)


def _to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        root_id=r[1],
        version=r[2],
        status=r[3],
        title=r[4],
        description=r[5],
        document_type=r[6],
        file_reference=r[7],
        file_size=r[8],
        file_hash=r[9],
        mime_type=r[10],
        household_id=r[11],
        account_id=r[12],
        created_by=r[13],
        created_at=r[14],
        retention_date=r[15],
        supersession_reason=r[16],
        deleted_at=r[17],
        deleted_by=r[18],
        deletion_reason=r[19],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID, include_deleted: bool = False) -> Document | None:
        """Get document by id."""
        q = f"SELECT {_COLUMNS} FROM document WHERE id = %s"
        if not include_deleted:
            q += " AND deleted_at IS NULL"
        cur = await self._conn.execute(q, (document_id,))
        r = await cur.fetchone()
        return _to_document(r) if r else None

    async def list_active(self) -> list[Document]:
        """List active, non-deleted documents, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document "
            "WHERE status = %s AND deleted_at IS NULL ORDER BY created_at DESC, id",
            (DocumentStatus.ACTIVE.value,),
        )
        return [_to_document(r) for r in await cur.fetchall()]

    async def create(self, document: Document) -> Document:
        """Insert a new document."""
        check_new_record(document)
        try:
            async with self._conn.transaction():
                await self._insert(document)
        except UniqueViolation as e:
            raise Conflict(f"Document {document.id} conflicts with an existing record") from e
        return document

    async def save_atomic(self, changes: Sequence[Document]) -> None:
        """Persist a batch of changes in one transaction block.

        Each existing row is locked and checked against the change before it is
        written; a concurrent writer that got there first surfaces as Conflict
        and the whole batch rolls back.
        """
        try:
            async with self._conn.transaction():
                for document in changes:
                    cur = await self._conn.execute(
                        f"SELECT {_COLUMNS} FROM document WHERE id = %s FOR UPDATE",
                        (document.id,),
                    )
                    r = await cur.fetchone()
                    if r is None:
                        check_new_record(document)
                        await self._insert(document)
                        continue
                    check_status_change(_to_document(r), document)
                    await self._conn.execute(
                        "UPDATE document SET status = %s WHERE id = %s",
                        (document.status.value, document.id),
                    )
        except UniqueViolation as e:
            raise Conflict(
                "Version already taken in this lineage; reload the current version and retry"
            ) from e
        except LockNotAvailable as e:
            raise Conflict(
                "Document is locked by a concurrent change; reload and retry"
            ) from e
        except InsufficientPrivilege as e:
            # raised by the write-once triggers
            raise Forbidden(str(e)) from e

    async def soft_delete(
        self,
        document_id: UUID,
        *,
        deleted_by: str,
        reason: str,
        deleted_at: datetime,
    ) -> Document:
        """Set tombstone fields on a live document."""
        cur = await self._conn.execute(
            "UPDATE document SET deleted_at = %s, deleted_by = %s, deletion_reason = %s "
            f"WHERE id = %s AND deleted_at IS NULL RETURNING {_COLUMNS}",
            (deleted_at, deleted_by, reason, document_id),
        )
        r = await cur.fetchone()
        if not r:
            raise NotFound("Document", str(document_id))
        return _to_document(r)

    async def find_lineage(self, root_id: UUID, include_deleted: bool = False) -> list[Document]:
        """All versions of a lineage ordered by version."""
        q = f"SELECT {_COLUMNS} FROM document WHERE (id = %s OR root_id = %s)"
        if not include_deleted:
            q += " AND deleted_at IS NULL"
        q += " ORDER BY version"
        cur = await self._conn.execute(q, (root_id, root_id))
        return [_to_document(r) for r in await cur.fetchall()]

    async def _insert(self, d: Document) -> None:
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) VALUES "
            "(%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                d.id,
                d.root_id,
                d.version,
                d.status.value,
                d.title,
                d.description,
                d.document_type.value,
                d.file_reference,
                d.file_size,
                str(d.file_hash) if d.file_hash else None,
                d.mime_type,
                d.household_id,
                d.account_id,
                d.created_by,
                d.created_at,
                d.retention_date,
                d.supersession_reason,
                d.deleted_at,
                d.deleted_by,
                d.deletion_reason,
            ),
        )
