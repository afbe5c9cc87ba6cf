from __future__ import annotations

import pytest

from listkeeper.config import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DB_DIR", "HOST", "PORT", "API_PREFIX", "LOG_LEVEL"):
        monkeypatch.delenv(f"LISTKEEPER_{name}", raising=False)

    assert get_settings() == Settings()
    assert get_settings().port == 1337


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTKEEPER_DB_DIR", "/srv/todo")
    monkeypatch.setenv("LISTKEEPER_PORT", "8080")
    monkeypatch.setenv("LISTKEEPER_API_PREFIX", "v1/")
    monkeypatch.setenv("LISTKEEPER_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.db_dir == "/srv/todo"
    assert settings.port == 8080
    assert settings.api_prefix == "/v1"
    assert settings.log_level == "debug"


def test_bad_port_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTKEEPER_PORT", "not-a-port")

    assert get_settings().port == 1337
