"""
tests/conftest.py
=================
Shared pytest fixtures — every test runs with a fresh Config singleton,
no WORDIFY_* environment variables and an empty working directory, so no
developer .env or wordify.json leaks in.
"""
import logging

import pytest

from number_wordify.core.config import Config

CONFIG_ENV_KEYS = (
    "WORDIFY_SCALE",
    "WORDIFY_CURRENCY",
    "WORDIFY_SINGULAR_UNITS",
    "WORDIFY_CONFIG_FILE",
    "WORDIFY_LOG_DIR",
    "WORDIFY_LOG_RETENTION_DAYS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    for key in CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    Config.clear_instance()
    yield tmp_path
    Config.clear_instance()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """LoggingConfig.setup_logging() replaces root handlers; put them back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_config(tmp_path):
    """Write a wordify.json into the isolated working directory."""
    import json

    def _write(data, name="wordify.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
