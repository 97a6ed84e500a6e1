"""In-memory disclosure sessions for the web API."""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from threading import Lock

from legaldocs.config import DocumentEntry, get_max_sessions
from legaldocs.core import LegalDocument
from legaldocs.disclosure import DisclosureController
from legaldocs.exceptions import SessionNotFoundError
from legaldocs.sectioning import sectionize

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """One rendering of one document, with its own disclosure state."""
    session_id: str
    entry: DocumentEntry
    document: LegalDocument
    controller: DisclosureController


class SessionRegistry:
    """Thread-safe, bounded registry of disclosure sessions.

    Sessions never share state; each owns a separate DisclosureController.
    Once max_sessions is reached, creating a session evicts the least
    recently used one.
    """

    def __init__(self, max_sessions: int | None = None):
        """Initialize the registry.

        Args:
            max_sessions: Maximum live sessions, defaults to LEGALDOCS_MAX_SESSIONS
        """
        self.max_sessions = max_sessions if max_sessions is not None else get_max_sessions()
        if self.max_sessions < 1:
            raise ValueError(f"max_sessions must be at least 1, got {self.max_sessions}")
        self._sessions: OrderedDict[str, Session] = OrderedDict()
        self._lock = Lock()

    def create(self, entry: DocumentEntry, document: LegalDocument) -> Session:
        """Start a session for a freshly loaded document."""
        session = Session(
            session_id=uuid.uuid4().hex,
            entry=entry,
            document=document,
            controller=DisclosureController(sectionize(document.content)),
        )
        evicted = []
        with self._lock:
            self._sessions[session.session_id] = session
            while len(self._sessions) > self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                evicted.append(evicted_id)
        for evicted_id in evicted:
            logger.info(f"Evicted idle session {evicted_id}")
        logger.info(
            f"Created session {session.session_id} for '{entry.slug}' "
            f"({len(session.controller.sections)} sections)"
        )
        return session

    def get(self, session_id: str) -> Session:
        """Look up a session and mark it as recently used.

        Raises:
            SessionNotFoundError: If no session exists under session_id
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
        if session is None:
            raise SessionNotFoundError(f"Unknown session: {session_id}")
        return session

    def toggle(self, session_id: str, index: int) -> Session:
        """Flip one section's expanded flag within a session.

        Toggles are applied one at a time under the registry lock.
        """
        session = self.get(session_id)
        with self._lock:
            session.controller.toggle(index)
        return session

    def delete(self, session_id: str) -> None:
        """Discard a session and its disclosure state."""
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(f"Unknown session: {session_id}")
        logger.info(f"Deleted session {session_id}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
