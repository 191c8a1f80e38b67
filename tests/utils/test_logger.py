"""Tests for the application logger utility."""

from __future__ import annotations

import logging
from unittest.mock import patch

from pomobar_cli import APP_NAME
from pomobar_cli.utils.logger import get_logger, reset_logger


def test_get_logger_creates_log_file(isolated_log_dir):
    """Logger creates the log file inside user_log_dir."""
    logger = get_logger()

    log_file = isolated_log_dir / "pomobar.log"
    assert log_file.exists(), "Log file should be created on first use"
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    """Repeated calls return the same logger instance."""
    assert get_logger() is get_logger()


def test_get_logger_writes_message(isolated_log_dir):
    """Messages written to the logger appear in the log file."""
    logger = get_logger()
    logger.info("hello from test")

    for handler in logger.handlers:
        handler.flush()

    content = (isolated_log_dir / "pomobar.log").read_text()
    assert "hello from test" in content


def test_get_logger_does_not_propagate():
    assert get_logger().propagate is False


def test_get_logger_creates_parent_dirs(tmp_path):
    """Logger creates nested directories if they do not exist."""
    nested = tmp_path / "a" / "b" / "c"
    reset_logger()
    with patch("pomobar_cli.utils.logger.user_log_dir", return_value=str(nested)):
        get_logger()

    assert nested.is_dir()


def test_reset_logger_drops_handlers():
    get_logger()
    reset_logger()
    assert logging.getLogger(APP_NAME).handlers == []


def test_log_dir_and_logger_use_app_name(tmp_path):
    reset_logger()
    with patch(
        "pomobar_cli.utils.logger.user_log_dir", return_value=str(tmp_path)
    ) as user_log_dir:
        logger = get_logger()

    user_log_dir.assert_called_once_with(APP_NAME)
    assert logger.name == APP_NAME
    reset_logger()
