"""In-memory session store with a sliding expiry."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from composition_fit.services.experiments import ExperimentSession, SessionStore

_logger = logging.getLogger(__name__)


@dataclass
class _StoreEntry:
    session: ExperimentSession
    expires_at: datetime


@dataclass
class InMemorySessionStore(SessionStore):
    """Keeps sessions in process memory; each access renews the TTL."""

    ttl_seconds: int
    _entries: dict[UUID, _StoreEntry]

    def __init__(self, ttl_seconds: int = 3600) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries = {}

    def add(self, session: ExperimentSession) -> None:
        """Store a session after dropping any expired ones."""
        self.purge_expired()
        self._entries[session.id] = _StoreEntry(
            session=session, expires_at=self._expiry()
        )

    def get(self, session_id: UUID) -> ExperimentSession | None:
        """Return a session if it hasn't expired."""
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(session_id, None)
            _logger.info("Experiment session expired: %s", session_id)
            return None
        entry.expires_at = self._expiry()
        return entry.session

    def delete(self, session_id: UUID) -> bool:
        """Remove a session."""
        return self._entries.pop(session_id, None) is not None

    def purge_expired(self) -> int:
        """Drop expired sessions and return how many were removed."""
        now = datetime.now(tz=UTC)
        expired = [
            key for key, entry in self._entries.items() if now >= entry.expires_at
        ]
        for key in expired:
            del self._entries[key]
        if expired:
            _logger.info("Purged %s expired experiment sessions", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    def _expiry(self) -> datetime:
        return datetime.now(tz=UTC) + timedelta(seconds=self.ttl_seconds)
