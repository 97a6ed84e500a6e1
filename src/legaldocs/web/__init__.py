"""Web API for sectioned legal documents."""

from legaldocs.web.app import app
from legaldocs.web.models import (
    CreateSessionRequest,
    DocumentSummary,
    DocumentViewResponse,
    HealthResponse,
    SectionResponse,
    SessionResponse,
)
from legaldocs.web.sessions import Session, SessionRegistry

__all__ = [
    "app",
    "CreateSessionRequest",
    "DocumentSummary",
    "DocumentViewResponse",
    "HealthResponse",
    "SectionResponse",
    "Session",
    "SessionRegistry",
    "SessionResponse",
]
