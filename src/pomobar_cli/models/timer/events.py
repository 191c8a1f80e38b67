"""Event types consumed by the phase runner.

The phase loop reads *timer events*: ``Tick`` plus key press / release /
repeat. Keys come from prompt_toolkit as :class:`KeyPress` objects;
:func:`to_event` keeps the ones a command can use and drops the rest
(navigation and function keys, mouse reports, paste and cursor-position
responses).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys


class SpecialKey(Enum):
    """Non-character keys the command buffer reacts to."""

    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"


# A key is either a single printable character or a SpecialKey
Key = str | SpecialKey


@dataclass(frozen=True)
class Tick:
    """Periodic signal to re-check elapsed time and refresh the display."""


@dataclass(frozen=True)
class KeyPressed:
    key: Key


@dataclass(frozen=True)
class KeyReleased:
    key: Key


@dataclass(frozen=True)
class KeyRepeated:
    key: Key


TimerEvent = Tick | KeyPressed | KeyReleased | KeyRepeated

_SPECIAL_KEYS = {
    Keys.ControlM: SpecialKey.ENTER,  # \r, also Keys.Enter
    Keys.ControlJ: SpecialKey.ENTER,  # \n, cbreak mode keeps ICRNL
    Keys.Escape: SpecialKey.ESCAPE,
    Keys.ControlH: SpecialKey.BACKSPACE,  # \x7f and \x08, also Keys.Backspace
}


def key_from_press(key_press: KeyPress) -> Key | None:
    """Return the key a KeyPress stands for, or None if commands ignore it."""
    key = key_press.key
    if isinstance(key, Keys):
        return _SPECIAL_KEYS.get(key)
    if len(key) == 1 and key.isprintable():
        return key
    return None


def to_event(key_press: KeyPress) -> TimerEvent | None:
    """Map a terminal key press to a timer event.

    Terminals report auto-repeat as further presses and never report
    releases, so every kept key becomes a :class:`KeyPressed`.
    """
    key = key_from_press(key_press)
    if key is None:
        return None
    return KeyPressed(key)
