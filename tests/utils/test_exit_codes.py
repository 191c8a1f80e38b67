"""Unit tests for pomobar_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from pomobar_cli.models.errors import (
    ConfigError,
    DisplayError,
    DurationError,
    InputStreamError,
)
from pomobar_cli.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_DISPLAY,
    ERROR_GENERAL,
    ERROR_INPUT,
    SUCCESS,
    get_exit_code_for_error,
    get_exit_code_name,
)


class TestExitCodeConstants:
    def test_values_are_distinct(self):
        codes = [SUCCESS, ERROR_GENERAL, ERROR_CONFIG, ERROR_DISPLAY, ERROR_INPUT]
        assert len(set(codes)) == len(codes)

    def test_success_is_zero(self):
        assert SUCCESS == 0


class TestNames:
    @pytest.mark.parametrize(
        ("code", "name"),
        [
            (SUCCESS, "SUCCESS"),
            (ERROR_GENERAL, "ERROR_GENERAL"),
            (ERROR_CONFIG, "ERROR_CONFIG"),
            (ERROR_DISPLAY, "ERROR_DISPLAY"),
            (ERROR_INPUT, "ERROR_INPUT"),
        ],
    )
    def test_known_names(self, code, name):
        assert get_exit_code_name(code) == name

    def test_unknown_name(self):
        assert get_exit_code_name(99) == "UNKNOWN(99)"


class TestExitCodeForError:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ConfigError("x"), ERROR_CONFIG),
            (DurationError("x", "3 x"), ERROR_CONFIG),
            (DisplayError("x"), ERROR_DISPLAY),
            (InputStreamError("x"), ERROR_INPUT),
            (RuntimeError("x"), ERROR_GENERAL),
        ],
    )
    def test_mapping(self, error, code):
        assert get_exit_code_for_error(error) == code
