"""Unit tests for lineage resolution and chain verification."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from doclineage.domain.entities import Document
from doclineage.domain.exceptions import LineageBroken
from doclineage.domain.services import resolve_root, verify_chain
from doclineage.domain.value_objects import DocumentStatus, DocumentType


def _chain(length: int) -> list[Document]:
    """Well-formed lineage: every version superseded except the last."""
    created = datetime(2024, 1, 1, tzinfo=UTC)
    root = Document(
        id=uuid4(),
        version=1,
        status=DocumentStatus.ACTIVE,
        title="Quarterly statement",
        document_type=DocumentType.STATEMENT,
        created_by="advisor-1",
        created_at=created,
    )
    chain = [root]
    for version in range(2, length + 1):
        chain.append(
            Document(
                id=uuid4(),
                root_id=root.id,
                version=version,
                status=DocumentStatus.ACTIVE,
                title=f"Quarterly statement v{version}",
                document_type=DocumentType.STATEMENT,
                created_by="advisor-1",
                created_at=created,
                supersession_reason="Corrected the closing balance",
            )
        )
    return [replace(d, status=DocumentStatus.SUPERSEDED) for d in chain[:-1]] + chain[-1:]


def test_resolve_root_of_root_is_itself() -> None:
    root = _chain(1)[0]
    assert resolve_root(root) == root.id


def test_resolve_root_of_amendment_is_version_one() -> None:
    chain = _chain(3)
    assert resolve_root(chain[2]) == chain[0].id


@pytest.mark.parametrize("length", [1, 2, 5])
def test_verify_chain_accepts_well_formed_lineage(length: int) -> None:
    chain = _chain(length)
    assert verify_chain(chain[0].id, tuple(chain)) == chain


def test_verify_chain_accepts_tombstoned_and_archived_versions() -> None:
    chain = _chain(3)
    chain[0] = replace(
        chain[0],
        deleted_at=datetime(2024, 6, 1, tzinfo=UTC),
        deleted_by="officer-1",
        deletion_reason="Superseded copy removed from view",
    )
    chain[2] = replace(chain[2], status=DocumentStatus.ARCHIVED)
    assert len(verify_chain(chain[0].id, chain)) == 3


def test_verify_chain_rejects_empty() -> None:
    with pytest.raises(LineageBroken, match="no records"):
        verify_chain(uuid4(), [])


def test_verify_chain_rejects_wrong_head() -> None:
    chain = _chain(3)
    with pytest.raises(LineageBroken, match="root"):
        verify_chain(chain[0].id, chain[1:])


def test_verify_chain_rejects_version_gap() -> None:
    chain = _chain(4)
    with pytest.raises(LineageBroken, match="expected version 3"):
        verify_chain(chain[0].id, [chain[0], chain[1], chain[3]])


def test_verify_chain_rejects_foreign_member() -> None:
    chain = _chain(2)
    other = _chain(2)
    with pytest.raises(LineageBroken, match="does not belong"):
        verify_chain(chain[0].id, [chain[0], other[1]])


@pytest.mark.parametrize("status", [DocumentStatus.ACTIVE, DocumentStatus.SUPERSEDED])
def test_verify_chain_requires_exactly_one_current(status) -> None:
    chain = _chain(3)
    chain[1] = replace(chain[1], status=status)
    chain[2] = replace(chain[2], status=status)
    with pytest.raises(LineageBroken, match="current versions"):
        verify_chain(chain[0].id, chain)
