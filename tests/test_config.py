import logging
import os

from skull_cacher.config import refresh_settings


def test_defaults(monkeypatch):
    for name in list(os.environ):
        if name.startswith("SKULL_CACHE_") or name in ("LOG_LEVEL", "HUMANIZE_LOGS"):
            monkeypatch.delenv(name)

    settings = refresh_settings()

    assert settings.CACHE_DIR.endswith(os.path.join(".skull-cacher", "textures"))
    assert settings.IGNORE_ERRORS is False
    assert settings.READ_TIMEOUT == 10.0
    assert settings.MAX_WORKERS is None
    assert settings.PERSIST_ON_FETCH is False
    assert settings.COALESCE_REQUESTS is True
    assert settings.SESSION_URL == "https://sessionserver.mojang.com"
    assert settings.LOG_LEVEL == logging.INFO


def test_overrides(monkeypatch):
    monkeypatch.setenv("SKULL_CACHE_MAX_WORKERS", "4")
    monkeypatch.setenv("SKULL_CACHE_PERSIST_ON_FETCH", "TRUE")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = refresh_settings()

    assert settings.MAX_WORKERS == 4
    assert settings.PERSIST_ON_FETCH is True
    assert settings.LOG_LEVEL == logging.DEBUG

    monkeypatch.undo()
    refresh_settings()
