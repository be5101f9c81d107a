"""Tests for main module."""

import uvicorn

from composition_fit.main import build_app, main


def test_main_runs_app_with_settings(capsys, monkeypatch) -> None:
    calls = []
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

    main()

    captured = capsys.readouterr()
    assert "Composition Fit" in captured.out
    assert calls == [{"host": "0.0.0.0", "port": 9001}]


def test_build_app_uses_given_container(container) -> None:
    app = build_app(container)

    assert app.state.container is container
