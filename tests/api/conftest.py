"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from doclineage.application.use_cases.document.amend_document import (
    AmendDocumentUseCase,
)
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
from doclineage.interfaces.api.app import create_app
from doclineage.interfaces.api.middleware.auth import USER_HEADER, AuthMiddleware
from doclineage.interfaces.api.resources.documents import (
    DocumentAmendResource,
    DocumentArchiveResource,
    DocumentHistoryResource,
    DocumentResource,
    DocumentsResource,
)
from doclineage.interfaces.api.resources.health import HealthResource

TEST_USER = "test-user-1"


@pytest.fixture
def app(uow_factory, audit_logger, retention_guard):
    """Falcon ASGI app wired to the in-memory store."""
    deps = {
        "unit_of_work_factory": uow_factory,
        "audit_logger": audit_logger,
        "retention_guard": retention_guard,
    }
    return create_app(
        documents_resource=DocumentsResource(
            CreateDocumentUseCase(**deps),
            ListActiveDocumentsUseCase(unit_of_work_factory=uow_factory),
        ),
        document_resource=DocumentResource(
            GetDocumentUseCase(unit_of_work_factory=uow_factory),
            UpdateDocumentUseCase(retention_guard=retention_guard),
            DeleteDocumentUseCase(**deps),
        ),
        amend_resource=DocumentAmendResource(AmendDocumentUseCase(**deps)),
        history_resource=DocumentHistoryResource(
            GetDocumentHistoryUseCase(unit_of_work_factory=uow_factory)
        ),
        archive_resource=DocumentArchiveResource(ArchiveDocumentUseCase(**deps)),
        health_resource=HealthResource(),
        middleware=[AuthMiddleware()],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client sending the gateway user header."""
    return TestClient(app, headers={USER_HEADER: TEST_USER})


@pytest.fixture
def anonymous_client(app) -> TestClient:
    """Test client without the user header."""
    return TestClient(app)
