"""Parse loosely typed configuration values into durations.

Accepted forms:

- float: seconds, fractional part kept (``1.5`` -> 1.5 s)
- int: whole seconds (``25`` -> 25 s)
- str: ``"<count> h"``, ``"<count> m"``, ``"<count> s"`` or a bare ``"<count>"``
  of seconds. The string is lower-cased first and split on its first space.
"""

from __future__ import annotations

import math
import re
from datetime import timedelta

from pomobar_cli.models.errors import DurationError

# Unsigned integer: optional '+', ASCII digits only
_COUNT_RE = re.compile(r"\+?[0-9]+")

UNIT_SECONDS = {
    "h": 3_600,
    "m": 60,
    "s": 1,
}


def _parse_count(text: str, original: str) -> int:
    if not _COUNT_RE.fullmatch(text):
        raise DurationError(
            f"invalid duration {original!r}: {text!r} is not a whole number",
            original,
        )
    return int(text)


def _from_seconds(seconds: float, original: object) -> timedelta:
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise DurationError(f"duration {original!r} is too large", original) from e


def parse_duration_string(value: str) -> timedelta:
    """Parse ``"<count> <unit>"`` or a bare ``"<count>"`` into a duration."""
    text = value.lower()
    count, sep, unit = text.partition(" ")
    if not sep:
        return _from_seconds(_parse_count(text, value), value)

    unit = unit.strip()
    if unit not in UNIT_SECONDS:
        raise DurationError(
            f"unsupported duration unit {unit!r} in {value!r} (expected h, m or s)",
            value,
        )
    return _from_seconds(_parse_count(count, value) * UNIT_SECONDS[unit], value)


def parse_duration(value: object) -> timedelta:
    """Convert a configuration value into a ``timedelta``.

    Raises:
        DurationError: if the value has the wrong type, is negative, or
            cannot be parsed.
    """
    # bool is an int subclass; reject it before the int branch
    if isinstance(value, bool):
        raise DurationError("expected a string or a number", value)

    if isinstance(value, float):
        if not math.isfinite(value) or value < 0:
            raise DurationError(
                f"duration must be a finite, non-negative number of seconds, got {value!r}",
                value,
            )
        return _from_seconds(value, value)

    if isinstance(value, int):
        if value < 0:
            raise DurationError(
                f"duration must be a non-negative number of seconds, got {value!r}",
                value,
            )
        return _from_seconds(value, value)

    if isinstance(value, str):
        return parse_duration_string(value)

    raise DurationError("expected a string or a number", value)
