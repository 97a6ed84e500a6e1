"""FastAPI application serving sectioned legal documents."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query

from legaldocs.config import DocumentEntry, get_entry, load_registry
from legaldocs.core import LegalDocument
from legaldocs.disclosure import DisclosureController
from legaldocs.exceptions import (
    DocumentFetchError,
    DocumentFormatError,
    DocumentNotFoundError,
    SectionIndexError,
    SessionNotFoundError,
)
from legaldocs.presentation import build_document_view
from legaldocs.sectioning import sectionize
from legaldocs.store import DocumentStoreClient
from legaldocs.web.models import (
    CreateSessionRequest,
    DocumentSummary,
    DocumentViewResponse,
    HealthResponse,
    RelatedLink,
    SessionResponse,
)
from legaldocs.web.sessions import Session, SessionRegistry

logger = logging.getLogger(__name__)

# Global references, created on startup
_registry: dict[str, DocumentEntry] | None = None
_client: DocumentStoreClient | None = None
_sessions: SessionRegistry | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    global _registry, _client, _sessions
    _registry = load_registry()
    _client = DocumentStoreClient()
    _sessions = SessionRegistry()
    yield
    if _client is not None:
        _client.close()
    _registry = None
    _client = None
    _sessions = None


app = FastAPI(
    title="Legal Documents API",
    description="Sectioned legal and policy documents with per-session disclosure state",
    version="0.1.0",
    lifespan=lifespan,
)


def get_registry() -> dict[str, DocumentEntry]:
    global _registry
    if _registry is None:
        _registry = load_registry()
    return _registry


def get_client() -> DocumentStoreClient:
    global _client
    if _client is None:
        _client = DocumentStoreClient()
    return _client


def get_sessions() -> SessionRegistry:
    global _sessions
    if _sessions is None:
        _sessions = SessionRegistry()
    return _sessions


def _lookup_entry(registry: dict[str, DocumentEntry], slug: str) -> DocumentEntry:
    try:
        return get_entry(registry, slug)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _fetch_document(client: DocumentStoreClient, entry: DocumentEntry) -> LegalDocument:
    try:
        return client.fetch(entry.endpoint, title=entry.title)
    except (DocumentFetchError, DocumentFormatError) as e:
        logger.warning(f"Could not load '{entry.slug}': {e}")
        raise HTTPException(status_code=502, detail=str(e))


def _session_response(session: Session) -> SessionResponse:
    view = build_document_view(
        session.document,
        session.controller,
        title=session.entry.title,
        description=session.entry.description,
        related_links=session.entry.related_links,
    )
    return SessionResponse(
        session_id=session.session_id,
        document=DocumentViewResponse.from_view(view),
    )


@app.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@app.get("/api/documents", response_model=list[DocumentSummary])
def list_documents(
    registry: dict[str, DocumentEntry] = Depends(get_registry),
) -> list[DocumentSummary]:
    """List the documents known to the registry."""
    return [
        DocumentSummary(
            slug=entry.slug,
            title=entry.title,
            description=entry.description,
            related_links=[RelatedLink(**link) for link in entry.related_links],
        )
        for entry in registry.values()
    ]


@app.get("/api/documents/{slug}", response_model=DocumentViewResponse)
def get_document(
    slug: str,
    expanded: list[int] = Query(default=[]),
    registry: dict[str, DocumentEntry] = Depends(get_registry),
    client: DocumentStoreClient = Depends(get_client),
) -> DocumentViewResponse:
    """Render a document with the given sections expanded.

    Stateless: the caller supplies the expanded section indices.
    """
    entry = _lookup_entry(registry, slug)
    document = _fetch_document(client, entry)

    controller = DisclosureController(sectionize(document.content))
    try:
        for index in sorted(set(expanded)):
            controller.toggle(index)
    except SectionIndexError as e:
        raise HTTPException(status_code=422, detail=str(e))

    view = build_document_view(
        document,
        controller,
        title=entry.title,
        description=entry.description,
        related_links=entry.related_links,
    )
    return DocumentViewResponse.from_view(view)


@app.post("/api/sessions", response_model=SessionResponse, status_code=201)
def create_session(
    request: CreateSessionRequest,
    registry: dict[str, DocumentEntry] = Depends(get_registry),
    client: DocumentStoreClient = Depends(get_client),
    sessions: SessionRegistry = Depends(get_sessions),
) -> SessionResponse:
    """Load a document and open a disclosure session for it."""
    entry = _lookup_entry(registry, request.slug)
    document = _fetch_document(client, entry)
    return _session_response(sessions.create(entry, document))


@app.get("/api/sessions/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: str,
    sessions: SessionRegistry = Depends(get_sessions),
) -> SessionResponse:
    """Current view of a session's document."""
    try:
        session = sessions.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _session_response(session)


@app.post("/api/sessions/{session_id}/toggle/{index}", response_model=SessionResponse)
def toggle_section(
    session_id: str,
    index: int,
    sessions: SessionRegistry = Depends(get_sessions),
) -> SessionResponse:
    """Expand or collapse one section of a session's document."""
    try:
        session = sessions.toggle(session_id, index)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SectionIndexError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _session_response(session)


@app.delete("/api/sessions/{session_id}", status_code=204)
def delete_session(
    session_id: str,
    sessions: SessionRegistry = Depends(get_sessions),
) -> None:
    """Discard a session and its disclosure state."""
    try:
        sessions.delete(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
