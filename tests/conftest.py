"""Pytest fixtures for doclineage tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from doclineage.application.dto.document_dto import DocumentContentInput
from doclineage.domain.entities import (
    AuditEvent,
    Document,
    check_new_record,
    check_status_change,
)
from doclineage.domain.exceptions import Conflict, NotFound
from doclineage.domain.services import RetentionGuard, resolve_root
from doclineage.domain.value_objects import DocumentStatus, DocumentType

SAMPLE_HASH = "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"


# --- Fake repository ---


class FakeDocumentRepository:
    """In-memory document repository over a row dict shared between units of work.

    Writes are journaled so the owning FakeUnitOfWork can undo them on
    rollback. get_by_id yields to the event loop after reading, so concurrent
    use cases can act on the same stale snapshot.
    """

    def __init__(self, rows: dict[UUID, Document]) -> None:
        self._rows = rows
        self._journal: list[tuple[UUID, Document | None]] = []
        self.writes = 0

    async def get_by_id(
        self, document_id: UUID, include_deleted: bool = False
    ) -> Document | None:
        doc = self._rows.get(document_id)
        await asyncio.sleep(0)
        if not doc or (not include_deleted and doc.deleted_at):
            return None
        return doc

    async def list_active(self) -> list[Document]:
        items = [
            d
            for d in self._rows.values()
            if d.status == DocumentStatus.ACTIVE and d.deleted_at is None
        ]
        items.sort(key=lambda d: d.created_at, reverse=True)
        return items

    async def create(self, document: Document) -> Document:
        check_new_record(document)
        if document.id in self._rows:
            raise Conflict(f"Document {document.id} already exists")
        self._write(document)
        return document

    async def save_atomic(self, changes: Sequence[Document]) -> None:
        # validate the whole batch before applying any of it
        taken = {(resolve_root(d), d.version) for d in self._rows.values()}
        for document in changes:
            stored = self._rows.get(document.id)
            if stored is None:
                check_new_record(document)
                key = (resolve_root(document), document.version)
                if key in taken:
                    raise Conflict("Version already taken in this lineage")
                taken.add(key)
            else:
                check_status_change(stored, document)
        for document in changes:
            self._write(document)

    async def soft_delete(
        self,
        document_id: UUID,
        *,
        deleted_by: str,
        reason: str,
        deleted_at: datetime,
    ) -> Document:
        doc = self._rows.get(document_id)
        if doc is None or doc.deleted_at is not None:
            raise NotFound("Document", str(document_id))
        deleted = replace(
            doc, deleted_at=deleted_at, deleted_by=deleted_by, deletion_reason=reason
        )
        self._write(deleted)
        return deleted

    async def find_lineage(
        self, root_id: UUID, include_deleted: bool = False
    ) -> list[Document]:
        items = [
            d
            for d in self._rows.values()
            if (d.id == root_id or d.root_id == root_id)
            and (include_deleted or d.deleted_at is None)
        ]
        return sorted(items, key=lambda d: d.version)

    def _write(self, document: Document) -> None:
        self._journal.append((document.id, self._rows.get(document.id)))
        self._rows[document.id] = document
        self.writes += 1

    def forget(self) -> None:
        self._journal.clear()

    def undo(self) -> None:
        for document_id, previous in reversed(self._journal):
            if previous is None:
                self._rows.pop(document_id, None)
            else:
                self._rows[document_id] = previous
        self._journal.clear()


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with commit/rollback over shared rows."""

    def __init__(self, rows: dict[UUID, Document] | None = None) -> None:
        self.documents = FakeDocumentRepository(rows if rows is not None else {})

    async def commit(self) -> None:
        self.documents.forget()

    async def rollback(self) -> None:
        self.documents.undo()


def make_uow_factory(rows: dict[UUID, Document], uow_class: type = FakeUnitOfWork):
    """UoW factory over shared rows: commit on success, rollback on error."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        uow = uow_class(rows)
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return factory


# --- Fake audit sink ---


class RecordingAuditLogger:
    """Audit sink that records events, or fails every call when fail=True."""

    def __init__(self, fail: bool = False) -> None:
        self.events: list[AuditEvent] = []
        self.fail = fail

    async def log_event(self, event: AuditEvent) -> None:
        if self.fail:
            raise RuntimeError("audit sink unavailable")
        self.events.append(event)


# --- Builders ---


def make_content(**overrides) -> DocumentContentInput:
    """Document content with sensible defaults."""
    values = {
        "title": "Client Agreement 2024",
        "document_type": DocumentType.AGREEMENT,
        "description": "Signed advisory agreement",
        "file_reference": "s3://records/agreement-2024.pdf",
        "file_size": 1024,
        "file_hash": SAMPLE_HASH,
        "mime_type": "application/pdf",
    }
    values.update(overrides)
    return DocumentContentInput(**values)


def seed_document(rows: dict[UUID, Document], **overrides) -> Document:
    """Put a document straight into the fake store, bypassing use cases."""
    values = {
        "id": uuid4(),
        "version": 1,
        "status": DocumentStatus.ACTIVE,
        "title": "Seeded Document",
        "document_type": DocumentType.STATEMENT,
        "created_by": "seed-user",
        "created_at": datetime.now(UTC),
    }
    values.update(overrides)
    doc = Document(**values)
    rows[doc.id] = doc
    return doc


# --- Fixtures ---


@pytest.fixture
def rows() -> dict[UUID, Document]:
    """Backing rows of the fake store, shared by every unit of work in a test."""
    return {}


@pytest.fixture
def uow_factory(rows):
    """Factory returning async context manager with FakeUnitOfWork over rows."""
    return make_uow_factory(rows)


@pytest.fixture
def audit_logger() -> RecordingAuditLogger:
    return RecordingAuditLogger()


@pytest.fixture
def retention_guard() -> RetentionGuard:
    """Guard with the default policy: 10-character reasons, 6-year retention."""
    return RetentionGuard()
