"""Per-session experiment workflow around the regression engine."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from composition_fit.domain.regression import (
    ChartSeries,
    Composition,
    Fit,
    Point,
    RegressionError,
)
from composition_fit.services.regression import RegressionEngine

_logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when a session id is unknown or has expired."""


class PointLimitReachedError(RuntimeError):
    """Raised when a session already holds the configured number of points."""


@dataclass
class ExperimentSession:
    """One user's measurements and the engine that fits them."""

    id: UUID
    created_at: datetime
    engine: RegressionEngine = field(default_factory=RegressionEngine)


class SessionStore(Protocol):
    """Storage interface for experiment sessions."""

    def add(self, session: ExperimentSession) -> None:
        """Store a new session."""

    def get(self, session_id: UUID) -> ExperimentSession | None:
        """Return a live session, if present."""

    def delete(self, session_id: UUID) -> bool:
        """Remove a session and report whether it existed."""


@dataclass(frozen=True)
class Trendline:
    """A fit together with the chart it produces."""

    fit: Fit
    chart: ChartSeries


@dataclass
class ExperimentService:
    """Application service for adding points, fitting and predicting."""

    store: SessionStore
    max_points: int | None = None

    def start_session(self) -> ExperimentSession:
        """Create an empty experiment session."""
        session = ExperimentSession(id=uuid4(), created_at=datetime.now(tz=UTC))
        self.store.add(session)
        _logger.info("Experiment session created: %s", session.id)
        return session

    def get_session(self, session_id: UUID) -> ExperimentSession:
        """Return a live session or raise SessionNotFoundError."""
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session {session_id} not found.")
        return session

    def end_session(self, session_id: UUID) -> None:
        """Discard a session and its points."""
        if not self.store.delete(session_id):
            raise SessionNotFoundError(f"Session {session_id} not found.")
        _logger.info("Experiment session ended: %s", session_id)

    def add_point(
        self, session_id: UUID, fat: float, resistance: float
    ) -> tuple[Point, ...]:
        """Add a measurement to a session and return all of its points."""
        engine = self.get_session(session_id).engine
        if self.max_points is not None and len(engine.points) >= self.max_points:
            raise PointLimitReachedError(
                f"Session already holds {self.max_points} points."
            )
        engine.add_point(fat, resistance)
        return engine.points

    def generate_trendline(self, session_id: UUID) -> Trendline:
        """Fit the session's points; regression errors propagate."""
        engine = self.get_session(session_id).engine
        try:
            fit = engine.fit()
        except RegressionError as exc:
            _logger.info("Trendline unavailable for %s: %s", session_id, exc)
            raise
        return Trendline(fit=fit, chart=engine.chart_series(fit))

    def chart(self, session_id: UUID) -> ChartSeries:
        """Return chart series, omitting the trendline when no fit exists."""
        engine = self.get_session(session_id).engine
        try:
            fit = engine.fit()
        except RegressionError:
            fit = None
        return engine.chart_series(fit)

    def predict(self, session_id: UUID, resistance: float) -> Composition:
        """Predict the composition for a resistance from a fresh fit."""
        engine = self.get_session(session_id).engine
        return engine.predict_composition(engine.fit(), resistance)
