"""Pomobar CLI domain models.

Configuration models live in :mod:`pomobar_cli.models.config_models`; the
timer itself in :mod:`pomobar_cli.models.timer`.
"""

from .errors import (
    ConfigError,
    DisplayError,
    DurationError,
    InputStreamError,
    PomobarError,
)

__all__ = [
    "PomobarError",
    "ConfigError",
    "DurationError",
    "DisplayError",
    "InputStreamError",
]
