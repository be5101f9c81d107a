"""Tests for configuration parsing."""

import pytest

from composition_fit.config import Settings, parse_point_limit


@pytest.mark.parametrize("raw", [None, "", "  ", "*"])
def test_parse_point_limit_unlimited(raw: str | None) -> None:
    assert parse_point_limit(raw) is None


def test_parse_point_limit_value() -> None:
    assert parse_point_limit(" 50 ") == 50


@pytest.mark.parametrize("raw", ["0", "-3", "ten"])
def test_parse_point_limit_invalid(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_point_limit(raw)


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SESSION_TTL_SECONDS", "120")
    monkeypatch.setenv("MAX_POINTS_PER_SESSION", "25")

    settings = Settings()

    assert settings.session_ttl_seconds == 120
    assert parse_point_limit(settings.max_points_per_session) == 25
    assert settings.display_decimals == 2
