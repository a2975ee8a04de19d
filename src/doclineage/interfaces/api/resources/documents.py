"""Document API resources."""

from datetime import date
from uuid import UUID

import falcon.asgi

from doclineage.application.dto.document_dto import DocumentContentInput, DocumentOutput
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
from doclineage.domain.exceptions import (
    Conflict,
    Forbidden,
    LineageBroken,
    NotFound,
    ValidationError,
)
from doclineage.domain.value_objects import DocumentType


def _optional_uuid(value: str | None) -> UUID | None:
    return UUID(value) if value else None


def _require_object(body: object) -> dict:
    if not isinstance(body, dict):
        raise TypeError("request body must be a JSON object")
    return body


def _parse_reason(body: dict, key: str) -> str:
    """String reason from the body; missing or null reads as empty."""
    reason = body.get(key)
    if reason is None:
        return ""
    if not isinstance(reason, str):
        raise TypeError(f"{key} must be a string")
    return reason


def _parse_content(body: dict) -> DocumentContentInput:
    """Build content input from a JSON body. Raises KeyError / ValueError / TypeError."""
    body = _require_object(body)
    if not isinstance(body["title"], str):
        raise TypeError("title must be a string")
    file_size = body.get("file_size")
    retention_date = body.get("retention_date")
    return DocumentContentInput(
        title=body["title"],
        document_type=DocumentType(body["document_type"]),
        description=body.get("description"),
        file_reference=body.get("file_reference"),
        file_size=int(file_size) if file_size is not None else None,
        file_hash=body.get("file_hash"),
        mime_type=body.get("mime_type"),
        household_id=_optional_uuid(body.get("household_id")),
        account_id=_optional_uuid(body.get("account_id")),
        retention_date=date.fromisoformat(retention_date) if retention_date else None,
    )


def _parse_id(document_id: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(document_id)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid UUID"}
        return None


def _require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Return the request user, or set 401 and return None."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user


class DocumentsResource:
    """GET/POST /v1/documents - list active and create documents."""

    def __init__(
        self,
        create_document: CreateDocumentUseCase,
        list_documents: ListActiveDocumentsUseCase,
    ) -> None:
        self._create_document = create_document
        self._list_documents = list_documents

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List active documents, newest first."""
        result = await self._list_documents.execute()
        resp.media = {"items": [_document_to_dict(d) for d in result]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create the first version of a document."""
        user = _require_user(req, resp)
        if not user:
            return

        try:
            body = await req.get_media()
            content = _parse_content(body)
        except (KeyError, ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid document: {e}"}
            return

        try:
            result = await self._create_document.execute(user.user_id, content)
            resp.media = _document_to_dict(result)
            resp.status = falcon.HTTP_201
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}


class DocumentResource:
    """GET/PATCH/PUT/DELETE /v1/documents/{id}."""

    def __init__(
        self,
        get_document: GetDocumentUseCase,
        update_document: UpdateDocumentUseCase,
        delete_document: DeleteDocumentUseCase,
    ) -> None:
        self._get_document = get_document
        self._update_document = update_document
        self._delete_document = delete_document

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Get a live document by id."""
        doc_id = _parse_id(document_id, resp)
        if doc_id is None:
            return
        try:
            result = await self._get_document.execute(doc_id)
            resp.media = _document_to_dict(result)
            resp.status = falcon.HTTP_200
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Direct updates are forbidden; documents change only by amendment."""
        doc_id = _parse_id(document_id, resp)
        if doc_id is None:
            return
        try:
            await self._update_document.execute(doc_id)
        except Forbidden as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}

    on_put = on_patch

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Soft delete with a mandatory deletion_reason in the JSON body."""
        user = _require_user(req, resp)
        if not user:
            return
        doc_id = _parse_id(document_id, resp)
        if doc_id is None:
            return

        try:
            body = await req.get_media(default_when_empty={})
            reason = _parse_reason(_require_object(body), "deletion_reason")
        except TypeError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid deletion request: {e}"}
            return

        try:
            await self._delete_document.execute(user.user_id, doc_id, reason)
            resp.status = falcon.HTTP_204
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}


class DocumentAmendResource:
    """POST /v1/documents/{id}/amend - create a superseding version."""

    def __init__(self, amend_document: AmendDocumentUseCase) -> None:
        self._amend_document = amend_document

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Body: {"document": {...content...}, "supersession_reason": "..."}."""
        user = _require_user(req, resp)
        if not user:
            return
        doc_id = _parse_id(document_id, resp)
        if doc_id is None:
            return

        try:
            body = _require_object(await req.get_media())
            content = _parse_content(body["document"])
            reason = _parse_reason(body, "supersession_reason")
        except (KeyError, ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid amendment: {e}"}
            return

        try:
            result = await self._amend_document.execute(user.user_id, doc_id, content, reason)
            resp.media = _document_to_dict(result)
            resp.status = falcon.HTTP_201
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except Conflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}


class DocumentHistoryResource:
    """GET /v1/documents/{id}/history - full version chain for examiners."""

    def __init__(self, get_history: GetDocumentHistoryUseCase) -> None:
        self._get_history = get_history

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        doc_id = _parse_id(document_id, resp)
        if doc_id is None:
            return
        try:
            result = await self._get_history.execute(doc_id)
            resp.media = {"items": [_document_to_dict(d) for d in result]}
            resp.status = falcon.HTTP_200
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
        except LineageBroken as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": f"Lineage integrity check failed: {e}"}


class DocumentArchiveResource:
    """POST /v1/documents/{id}/archive - archive past retention."""

    def __init__(self, archive_document: ArchiveDocumentUseCase) -> None:
        self._archive_document = archive_document

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        user = _require_user(req, resp)
        if not user:
            return
        doc_id = _parse_id(document_id, resp)
        if doc_id is None:
            return
        try:
            result = await self._archive_document.execute(user.user_id, doc_id)
            resp.media = _document_to_dict(result)
            resp.status = falcon.HTTP_200
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
        except Forbidden as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
        except Conflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}


def _document_to_dict(d: DocumentOutput) -> dict:
    return {
        "id": str(d.id),
        "root_id": str(d.root_id) if d.root_id else None,
        "version": d.version,
        "status": str(d.status),
        "title": d.title,
        "description": d.description,
        "document_type": str(d.document_type),
        "file_reference": d.file_reference,
        "file_size": d.file_size,
        "file_hash": d.file_hash,
        "mime_type": d.mime_type,
        "household_id": str(d.household_id) if d.household_id else None,
        "account_id": str(d.account_id) if d.account_id else None,
        "created_by": d.created_by,
        "created_at": d.created_at.isoformat(),
        "retention_date": d.retention_date.isoformat() if d.retention_date else None,
        "supersession_reason": d.supersession_reason,
        "deleted_at": d.deleted_at.isoformat() if d.deleted_at else None,
        "deleted_by": d.deleted_by,
        "deletion_reason": d.deletion_reason,
    }
