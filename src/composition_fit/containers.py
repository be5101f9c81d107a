"""Dependency container wiring for the application."""

from dataclasses import dataclass

from composition_fit.adapters.in_memory_session_store import InMemorySessionStore
from composition_fit.config import Settings, parse_point_limit
from composition_fit.services.experiments import ExperimentService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    experiment_service: ExperimentService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = InMemorySessionStore(ttl_seconds=resolved_settings.session_ttl_seconds)
    experiment_service = ExperimentService(
        store=store,
        max_points=parse_point_limit(resolved_settings.max_points_per_session),
    )
    return AppContainer(
        settings=resolved_settings,
        experiment_service=experiment_service,
    )
