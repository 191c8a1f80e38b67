"""Command buffer typed by the operator while a phase runs.

A command starts with ``:``. Once started, printable characters are
appended, Backspace removes the last one, Escape clears the buffer and
Enter submits it. ``:q`` and ``:quit`` request quitting; any other
submission just clears the buffer.
"""

from __future__ import annotations

from enum import Enum

from .events import KeyPressed, KeyRepeated, SpecialKey, TimerEvent

QUIT_COMMANDS = frozenset({":q", ":quit"})

COMMAND_PREFIX = ":"


class CommandOutcome(Enum):
    """What handling an event did to the buffer."""

    IGNORED = "ignored"  # nothing changed, display untouched
    UPDATED = "updated"  # buffer handled the event, refresh the message
    QUIT = "quit"  # a quit command was submitted


class CommandBuffer:
    """State machine over a single string buffer."""

    def __init__(self):
        self.text = ""

    def clear(self) -> None:
        self.text = ""

    def handle(self, event: TimerEvent) -> CommandOutcome:
        """Apply one event and report the outcome."""
        if isinstance(event, KeyPressed):
            key = event.key
            if key is SpecialKey.ENTER:
                return self._submit()
            if key is SpecialKey.ESCAPE:
                self.clear()
                return CommandOutcome.UPDATED
        elif not isinstance(event, KeyRepeated):
            # Ticks and key releases
            return CommandOutcome.IGNORED

        key = event.key
        if key is SpecialKey.BACKSPACE:
            self.text = self.text[:-1]
            return CommandOutcome.UPDATED
        if key == COMMAND_PREFIX:
            self.text += COMMAND_PREFIX
            return CommandOutcome.UPDATED
        if isinstance(key, str) and self.text:
            self.text += key
            return CommandOutcome.UPDATED
        return CommandOutcome.IGNORED

    def _submit(self) -> CommandOutcome:
        if self.text in QUIT_COMMANDS:
            return CommandOutcome.QUIT
        self.clear()
        return CommandOutcome.UPDATED
