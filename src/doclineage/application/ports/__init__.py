"""Application ports - interfaces for external adapters."""

from doclineage.application.ports.audit_logger import AuditLogger
from doclineage.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuditLogger",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
