"""
Exit codes for Pomobar CLI.

Every failure ends the process; the exit code tells the caller which
kind of failure it was.
"""

from pomobar_cli.models.errors import (
    ConfigError,
    DisplayError,
    InputStreamError,
)

# Success (normal exit or quit command)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Configuration file missing, unreadable or invalid
ERROR_CONFIG = 2

# Progress display could not be set up
ERROR_DISPLAY = 3

# Terminal input failed
ERROR_INPUT = 4


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_CONFIG: "ERROR_CONFIG",
        ERROR_DISPLAY: "ERROR_DISPLAY",
        ERROR_INPUT: "ERROR_INPUT",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_for_error(error: BaseException) -> int:
    """Map an exception to the exit code the process should end with."""
    if isinstance(error, ConfigError):
        return ERROR_CONFIG
    if isinstance(error, DisplayError):
        return ERROR_DISPLAY
    if isinstance(error, InputStreamError):
        return ERROR_INPUT
    return ERROR_GENERAL
