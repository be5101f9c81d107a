"""Tests for the in-memory session store."""

from datetime import UTC, datetime
from uuid import uuid4

from composition_fit.adapters.in_memory_session_store import InMemorySessionStore
from composition_fit.services.experiments import ExperimentSession


def _session() -> ExperimentSession:
    return ExperimentSession(id=uuid4(), created_at=datetime.now(tz=UTC))


def test_get_returns_stored_session() -> None:
    store = InMemorySessionStore(ttl_seconds=60)
    session = _session()

    store.add(session)

    assert store.get(session.id) is session
    assert store.get(uuid4()) is None


def test_expired_session_is_dropped() -> None:
    store = InMemorySessionStore(ttl_seconds=0)
    session = _session()

    store.add(session)

    assert store.get(session.id) is None
    assert len(store) == 0


def test_add_purges_expired_sessions() -> None:
    store = InMemorySessionStore(ttl_seconds=0)
    store.add(_session())
    store.add(_session())

    assert len(store) == 1


def test_delete_reports_existence() -> None:
    store = InMemorySessionStore()
    session = _session()
    store.add(session)

    assert store.delete(session.id) is True
    assert store.delete(session.id) is False
