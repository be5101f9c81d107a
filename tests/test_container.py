"""Tests for container wiring."""

from composition_fit.adapters.in_memory_session_store import InMemorySessionStore
from composition_fit.containers import build_container


def test_build_container_creates_services(settings) -> None:
    settings.max_points_per_session = "10"
    container = build_container(settings)

    assert container.experiment_service.max_points == 10
    assert isinstance(container.experiment_service.store, InMemorySessionStore)
