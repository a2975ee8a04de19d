"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from doclineage.interfaces.api.resources.documents import (
    DocumentAmendResource,
    DocumentArchiveResource,
    DocumentHistoryResource,
    DocumentResource,
    DocumentsResource,
)
from doclineage.interfaces.api.resources.health import HealthResource


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    amend_resource: DocumentAmendResource,
    history_resource: DocumentHistoryResource,
    archive_resource: DocumentArchiveResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/documents/{document_id}", document_resource)
    app.add_route("/v1/documents/{document_id}/amend", amend_resource)
    app.add_route("/v1/documents/{document_id}/history", history_resource)
    app.add_route("/v1/documents/{document_id}/archive", archive_resource)
    return app
