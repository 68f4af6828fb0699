import logging
import os

from skull_cacher.constants import (
    DEFAULT_API_URL,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_SESSION_URL,
)


def _flag(name, default):
    return os.environ.get(name, default).lower() == "true"


class Settings:
    def __init__(self):
        self.CACHE_DIR = os.environ.get(
            "SKULL_CACHE_DIR",
            os.path.join(os.path.expanduser("~"), ".skull-cacher", "textures"),
        )
        self.IGNORE_ERRORS = _flag("SKULL_CACHE_IGNORE_ERRORS", "false")
        self.READ_TIMEOUT = float(
            os.environ.get("SKULL_CACHE_READ_TIMEOUT", DEFAULT_READ_TIMEOUT)
        )

        # None lets the executor pick its own default
        max_workers = os.environ.get("SKULL_CACHE_MAX_WORKERS")
        self.MAX_WORKERS = int(max_workers) if max_workers else None

        self.PERSIST_ON_FETCH = _flag("SKULL_CACHE_PERSIST_ON_FETCH", "false")
        self.COALESCE_REQUESTS = _flag("SKULL_CACHE_COALESCE_REQUESTS", "true")

        self.SESSION_URL = os.environ.get("MOJANG_SESSION_URL", DEFAULT_SESSION_URL)
        self.API_URL = os.environ.get("MOJANG_API_URL", DEFAULT_API_URL)

        self.HUMANIZE_LOGS = _flag("HUMANIZE_LOGS", "false")
        self.LOG_LEVEL_STR = os.environ.get("LOG_LEVEL", "INFO")
        self.LOG_LEVEL = getattr(logging, self.LOG_LEVEL_STR.upper(), logging.INFO)


settings = Settings()


def refresh_settings():
    """Re-read the environment into the shared settings object."""
    settings.__init__()
    return settings
