"""Pytest configuration and fixtures."""

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest
import structlog

from hound.config.settings import get_settings


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a config file and returns its path."""

    def _write(data: dict[str, Any] | str, name: str = "config.json") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        content = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """A config with one plain repo, one Azure repo and a secret."""
    return {
        "dbpath": "data",
        "repos": {
            "hound": {
                "url": "https://github.com/hound-search/hound.git",
                "vcs-config": {"ref": "main", "token": "s3cr3t-t0k3n"},
            },
            "azure": {
                "url": "https://example.visualstudio.com/project/_git/repo",
                "ms-between-poll": 60000,
                "enable-push-updates": True,
            },
        },
    }


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the cached settings and the host environment."""
    monkeypatch.setenv("HOUND_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("HOUND_CONFIG_PATH", raising=False)
    monkeypatch.delenv("HOUND_ENVIRONMENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any logging configuration a test applied."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
