"""Lineage rules: root resolution and chain verification."""

from collections.abc import Sequence
from uuid import UUID

from doclineage.domain.entities import Document
from doclineage.domain.exceptions import LineageBroken


def resolve_root(document: Document) -> UUID:
    """Return the id of version 1 of the document's lineage."""
    return document.root_id if document.root_id is not None else document.id


def verify_chain(root_id: UUID, chain: Sequence[Document]) -> list[Document]:
    """Check a version-ordered lineage and return it as a list.

    The chain must start at the root, carry versions 1..N without gaps or
    duplicates, reference the same root throughout and have exactly one
    record that is not superseded. Tombstoned records count like any other.
    """
    if not chain:
        raise LineageBroken(f"Lineage {root_id} has no records")
    head = chain[0]
    if head.id != root_id or head.root_id is not None:
        raise LineageBroken(f"Lineage {root_id} does not start at its root")
    for expected, doc in enumerate(chain, start=1):
        if doc.version != expected:
            raise LineageBroken(
                f"Lineage {root_id} expected version {expected}, found {doc.version}"
            )
        if doc is not head and doc.root_id != root_id:
            raise LineageBroken(f"Document {doc.id} does not belong to lineage {root_id}")
    current = [d for d in chain if d.is_current]
    if len(current) != 1:
        raise LineageBroken(
            f"Lineage {root_id} has {len(current)} current versions, expected 1"
        )
    return list(chain)
