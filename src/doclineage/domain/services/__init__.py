"""Domain services."""

from doclineage.domain.services.lineage import resolve_root, verify_chain
from doclineage.domain.services.retention_guard import RetentionGuard

__all__ = [
    "RetentionGuard",
    "resolve_root",
    "verify_chain",
]
