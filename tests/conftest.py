"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real log directory and
configuration files.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Send the application log to *tmp_path* and reset the singleton."""
    from pomobar_cli.utils.logger import reset_logger

    log_dir = tmp_path / "logs"
    reset_logger()
    with patch("pomobar_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    reset_logger()


# ---------------------------------------------------------------------------
# Config isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def write_config(tmp_path):
    """Return a helper that writes a config.toml into *tmp_path*."""

    def _write(body: str, name: str = "config.toml"):
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty working directory and user config directory.

    Clears the lru_cache so each test gets a fresh ConfigService.
    """
    from pomobar_cli.services.config_service import CONFIG_ENV_VAR, get_config_service

    work_dir = tmp_path / "cwd"
    user_dir = tmp_path / "user_config"
    work_dir.mkdir()
    user_dir.mkdir()

    monkeypatch.chdir(work_dir)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    get_config_service.cache_clear()
    with patch(
        "pomobar_cli.services.config_service.user_config_dir",
        return_value=str(user_dir),
    ):
        yield work_dir, user_dir
    get_config_service.cache_clear()
