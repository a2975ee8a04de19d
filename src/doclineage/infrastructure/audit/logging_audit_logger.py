"""Audit logger that writes events to a dedicated log channel."""

import json
import logging

from doclineage.domain.entities import AuditEvent

audit_log = logging.getLogger("doclineage.audit")


class LoggingAuditLogger:
    """Default audit sink: one JSON line per event on the doclineage.audit logger.

    Deployments that ship events to a durable audit store plug in their own
    AuditLogger; this one exists so the service records every mutation
    out of the box.
    """

    async def log_event(self, event: AuditEvent) -> None:
        """Serialize and emit the event. Serialization errors propagate."""
        payload = {
            "actor_id": event.actor_id,
            "event_type": str(event.event_type),
            "entity_type": event.entity_type,
            "entity_id": str(event.entity_id),
            "action": event.action,
            "changes": event.changes,
        }
        audit_log.info(json.dumps(payload, sort_keys=True))
