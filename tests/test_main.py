import importlib

import pytest
from pydantic import ValidationError

import monopoly.main
from monopoly.config import Settings


def test_import_does_not_read_environment(monkeypatch):
    monkeypatch.setenv("DB_PORT", "not-a-port")
    module = importlib.reload(monopoly.main)
    assert not hasattr(module, "app")


def test_create_app_uses_given_settings(monkeypatch):
    monkeypatch.setenv("DB_PORT", "not-a-port")
    app = monopoly.main.create_app(settings=Settings())
    paths = {route.path for route in app.routes}
    assert {"/", "/players", "/players/{player_id}", "/games", "/games/{game_id}"} <= paths


def test_run_builds_settings_once(monkeypatch):
    for name in ["DB_SERVER", "DB_PORT", "DB_DATABASE", "DB_USER", "DB_PASSWORD", "DB_ECHO", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PORT", "8123")

    calls = []
    from_env = Settings.from_env

    def counting_from_env():
        calls.append(1)
        return from_env()

    started = {}

    def fake_run(app, host, port):
        started.update(app=app, host=host, port=port)

    monkeypatch.setattr(monopoly.main.Settings, "from_env", counting_from_env)
    monkeypatch.setattr(monopoly.main.uvicorn, "run", fake_run)

    monopoly.main.run()

    assert len(calls) == 1
    assert started["port"] == 8123
    assert started["host"] == "0.0.0.0"
    assert started["app"].title == "Monopoly Service"


def test_bad_port_fails_at_startup(monkeypatch):
    monkeypatch.setenv("DB_PORT", "not-a-port")
    monkeypatch.setattr(monopoly.main.uvicorn, "run", lambda *args, **kwargs: None)
    with pytest.raises(ValidationError):
        monopoly.main.run()
