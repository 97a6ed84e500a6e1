"""Unit tests for in-memory disclosure sessions."""

from datetime import datetime

import pytest

from legaldocs.config import DocumentEntry
from legaldocs.core import LegalDocument
from legaldocs.exceptions import SectionIndexError, SessionNotFoundError
from legaldocs.web.sessions import SessionRegistry

ENTRY = DocumentEntry(slug="terms", title="Terms of Service", endpoint="/api/legal/terms")
DOCUMENT = LegalDocument(
    title="Terms of Service",
    content="# Terms\nIntro\n### Liability\nNot liable.\n",
    version="1.0",
    last_updated=datetime(2024, 1, 1),
)


class TestSessionRegistry:
    """Tests for SessionRegistry."""

    def test_create_sectionizes_document(self):
        registry = SessionRegistry()
        session = registry.create(ENTRY, DOCUMENT)
        assert len(registry) == 1
        assert [s.title for s in session.controller.sections] == ["Terms", "Liability"]
        assert dict(session.controller.state) == {}

    def test_get_unknown(self):
        with pytest.raises(SessionNotFoundError):
            SessionRegistry().get("missing")

    def test_toggle(self):
        registry = SessionRegistry()
        session = registry.create(ENTRY, DOCUMENT)
        registry.toggle(session.session_id, 1)
        assert registry.get(session.session_id).controller.is_visible(1) is True

    def test_toggle_bad_index(self):
        registry = SessionRegistry()
        session = registry.create(ENTRY, DOCUMENT)
        with pytest.raises(SectionIndexError):
            registry.toggle(session.session_id, 9)

    def test_sessions_do_not_share_state(self):
        registry = SessionRegistry()
        first = registry.create(ENTRY, DOCUMENT)
        second = registry.create(ENTRY, DOCUMENT)
        assert first.session_id != second.session_id
        registry.toggle(first.session_id, 1)
        assert second.controller.is_visible(1) is False

    def test_delete(self):
        registry = SessionRegistry()
        session = registry.create(ENTRY, DOCUMENT)
        registry.delete(session.session_id)
        assert len(registry) == 0
        with pytest.raises(SessionNotFoundError):
            registry.delete(session.session_id)

    def test_oldest_session_evicted_at_capacity(self):
        """Abandoned sessions are evicted once the cap is reached."""
        registry = SessionRegistry(max_sessions=2)
        first = registry.create(ENTRY, DOCUMENT)
        second = registry.create(ENTRY, DOCUMENT)
        third = registry.create(ENTRY, DOCUMENT)
        assert len(registry) == 2
        with pytest.raises(SessionNotFoundError):
            registry.get(first.session_id)
        assert registry.get(second.session_id) is second
        assert registry.get(third.session_id) is third

    def test_recently_used_session_survives_eviction(self):
        registry = SessionRegistry(max_sessions=2)
        first = registry.create(ENTRY, DOCUMENT)
        second = registry.create(ENTRY, DOCUMENT)
        registry.toggle(first.session_id, 1)
        registry.create(ENTRY, DOCUMENT)
        assert registry.get(first.session_id).controller.is_visible(1) is True
        with pytest.raises(SessionNotFoundError):
            registry.get(second.session_id)

    def test_cap_from_environment(self, monkeypatch):
        monkeypatch.setenv("LEGALDOCS_MAX_SESSIONS", "1")
        registry = SessionRegistry()
        registry.create(ENTRY, DOCUMENT)
        registry.create(ENTRY, DOCUMENT)
        assert len(registry) == 1

    def test_invalid_cap(self):
        with pytest.raises(ValueError):
            SessionRegistry(max_sessions=0)
