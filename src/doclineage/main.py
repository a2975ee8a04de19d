"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from doclineage import __version__
from doclineage.application.use_cases.document.amend_document import AmendDocumentUseCase
from doclineage.application.use_cases.document.archive_document import (
    ArchiveDocumentUseCase,
)
from doclineage.application.use_cases.document.create_document import (
    CreateDocumentUseCase,
)
from doclineage.application.use_cases.document.delete_document import (
    DeleteDocumentUseCase,
)
from doclineage.application.use_cases.document.get_document import GetDocumentUseCase
from doclineage.application.use_cases.document.get_document_history import (
    GetDocumentHistoryUseCase,
)
from doclineage.application.use_cases.document.list_documents import (
    ListActiveDocumentsUseCase,
)
from doclineage.application.use_cases.document.update_document import (
    UpdateDocumentUseCase,
)
from doclineage.config import Settings, get_settings
from doclineage.domain.services import RetentionGuard
from doclineage.infrastructure.audit.logging_audit_logger import LoggingAuditLogger
from doclineage.infrastructure.persistence.postgres.connection import create_pool
from doclineage.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from doclineage.interfaces.api.app import create_app
from doclineage.interfaces.api.middleware.auth import AuthMiddleware
from doclineage.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from doclineage.interfaces.api.resources.documents import (
    DocumentAmendResource,
    DocumentArchiveResource,
    DocumentHistoryResource,
    DocumentResource,
    DocumentsResource,
)
from doclineage.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    print(f"doclineage v{__version__}")


def create_doclineage_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool, lock_timeout_ms=settings.lock_timeout_ms)
    audit_logger = LoggingAuditLogger()
    retention_guard = RetentionGuard(
        min_deletion_reason_length=settings.min_deletion_reason_length,
        min_supersession_reason_length=settings.min_supersession_reason_length,
        retention_years=settings.default_retention_years,
    )

    create_document = CreateDocumentUseCase(
        unit_of_work_factory=uow_factory,
        audit_logger=audit_logger,
        retention_guard=retention_guard,
    )
    amend_document = AmendDocumentUseCase(
        unit_of_work_factory=uow_factory,
        audit_logger=audit_logger,
        retention_guard=retention_guard,
    )
    delete_document = DeleteDocumentUseCase(
        unit_of_work_factory=uow_factory,
        audit_logger=audit_logger,
        retention_guard=retention_guard,
    )
    archive_document = ArchiveDocumentUseCase(
        unit_of_work_factory=uow_factory,
        audit_logger=audit_logger,
        retention_guard=retention_guard,
    )
    update_document = UpdateDocumentUseCase(retention_guard=retention_guard)
    get_document = GetDocumentUseCase(unit_of_work_factory=uow_factory)
    list_documents = ListActiveDocumentsUseCase(unit_of_work_factory=uow_factory)
    get_history = GetDocumentHistoryUseCase(unit_of_work_factory=uow_factory)

    app = create_app(
        documents_resource=DocumentsResource(create_document, list_documents),
        document_resource=DocumentResource(get_document, update_document, delete_document),
        amend_resource=DocumentAmendResource(amend_document),
        history_resource=DocumentHistoryResource(get_history),
        archive_resource=DocumentArchiveResource(archive_document),
        health_resource=HealthResource(pool),
        middleware=[
            PoolLifespanMiddleware(pool),
            AuthMiddleware(),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    logger.info("doclineage v%s configured (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_doclineage_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
