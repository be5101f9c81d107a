"""Shared test fixtures."""

import pytest

from composition_fit.config import Settings
from composition_fit.containers import AppContainer, build_container
from composition_fit.services.regression import RegressionEngine


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        session_ttl_seconds=3600,
        max_points_per_session=None,
        display_decimals=2,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def linear_engine() -> RegressionEngine:
    """Engine holding points that lie exactly on y = 5x + 50."""
    engine = RegressionEngine()
    engine.add_point(10, 100)
    engine.add_point(20, 150)
    engine.add_point(30, 200)
    return engine
