"""Audit logger port - the write contract of the external audit sink."""

from typing import Protocol

from doclineage.domain.entities import AuditEvent


class AuditLogger(Protocol):
    """Records one audit event per successful mutation.

    Implementations raise on failure; callers treat that as a failed operation.
    """

    async def log_event(self, event: AuditEvent) -> None: ...
