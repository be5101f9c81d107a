"""Tests for the experiment service."""

from uuid import uuid4

import pytest

from composition_fit.adapters.in_memory_session_store import InMemorySessionStore
from composition_fit.domain.regression import DegenerateFitError, InsufficientDataError
from composition_fit.services.experiments import (
    ExperimentService,
    PointLimitReachedError,
    SessionNotFoundError,
)


def _service(max_points: int | None = None) -> ExperimentService:
    return ExperimentService(store=InMemorySessionStore(), max_points=max_points)


def test_sessions_are_isolated() -> None:
    service = _service()
    first = service.start_session()
    second = service.start_session()

    service.add_point(first.id, 10, 100)

    assert len(service.get_session(first.id).engine.points) == 1
    assert service.get_session(second.id).engine.points == ()


def test_unknown_session_raises() -> None:
    service = _service()

    with pytest.raises(SessionNotFoundError):
        service.add_point(uuid4(), 10, 100)
    with pytest.raises(SessionNotFoundError):
        service.end_session(uuid4())


def test_end_session_discards_points() -> None:
    service = _service()
    session = service.start_session()

    service.end_session(session.id)

    with pytest.raises(SessionNotFoundError):
        service.get_session(session.id)


def test_point_limit_is_enforced() -> None:
    service = _service(max_points=2)
    session = service.start_session()
    service.add_point(session.id, 10, 100)
    service.add_point(session.id, 20, 150)

    with pytest.raises(PointLimitReachedError):
        service.add_point(session.id, 30, 200)
    assert len(service.get_session(session.id).engine.points) == 2


def test_generate_trendline_returns_fit_and_chart() -> None:
    service = _service()
    session = service.start_session()
    for fat, resistance in [(10, 100), (20, 150), (30, 200)]:
        service.add_point(session.id, fat, resistance)

    trendline = service.generate_trendline(session.id)

    assert trendline.fit.slope == pytest.approx(5.0)
    assert trendline.chart.trendline == pytest.approx((100.0, 150.0, 200.0))


def test_generate_trendline_propagates_insufficient_data() -> None:
    service = _service()
    session = service.start_session()
    service.add_point(session.id, 10, 100)

    with pytest.raises(InsufficientDataError):
        service.generate_trendline(session.id)


def test_chart_hides_trendline_when_degenerate() -> None:
    service = _service()
    session = service.start_session()
    service.add_point(session.id, 10, 100)
    service.add_point(session.id, 10, 120)

    chart = service.chart(session.id)

    assert chart.labels == (10.0, 10.0)
    assert chart.trendline is None


def test_predict_refits_after_new_points() -> None:
    service = _service()
    session = service.start_session()
    service.add_point(session.id, 10, 100)
    service.add_point(session.id, 20, 150)
    assert service.predict(session.id, 125).fat == pytest.approx(15.0)

    service.add_point(session.id, 30, 300)

    assert service.predict(session.id, 125).fat != pytest.approx(15.0)


def test_predict_with_flat_line_is_degenerate() -> None:
    service = _service()
    session = service.start_session()
    service.add_point(session.id, 10, 300)
    service.add_point(session.id, 20, 300)

    with pytest.raises(DegenerateFitError):
        service.predict(session.id, 300)
