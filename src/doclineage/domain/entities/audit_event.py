"""Audit event entity."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from doclineage.domain.value_objects import AuditEventType


@dataclass(frozen=True)
class AuditEvent:
    """One audited mutation, handed to the audit sink."""

    actor_id: str
    event_type: AuditEventType
    entity_id: UUID
    action: str
    changes: dict[str, Any] = field(default_factory=dict)
    entity_type: str = "Document"
