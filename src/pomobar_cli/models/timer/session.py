"""Run a single timed phase."""

from __future__ import annotations

import time
from collections.abc import AsyncIterator, Callable
from datetime import timedelta
from typing import Protocol

from prompt_toolkit.key_binding import KeyPress
from rich.console import Console

from pomobar_cli.utils.logger import get_logger
from pomobar_cli.utils.ui.console import get_console

from .command import CommandBuffer, CommandOutcome
from .cycling import Phase
from .event_source import TICK_INTERVAL, EventStream
from .events import Tick, TimerEvent
from .keyboard import TerminalKeyReader
from .ui import PhaseBar


class DisplaySink(Protocol):
    def set_position(self, position_ms: int) -> None: ...

    def set_message(self, message: str) -> None: ...

    def finish_and_clear(self) -> None: ...


def _to_ms(duration: timedelta) -> int:
    return duration // timedelta(milliseconds=1)


async def run_phase(
    duration: timedelta,
    events: AsyncIterator[TimerEvent],
    display: DisplaySink,
    clock: Callable[[], float] = time.monotonic,
) -> bool:
    """Consume events until the phase is over.

    On every tick the display position is set to the elapsed time; once the
    elapsed time exceeds ``duration`` the phase is complete. Key events go
    through a :class:`CommandBuffer` whose contents are mirrored in the
    display message.

    Returns:
        True if the operator asked to quit, False if the phase ran out.
    """
    command = CommandBuffer()
    start = clock()
    try:
        async for event in events:
            if isinstance(event, Tick):
                elapsed = timedelta(seconds=clock() - start)
                display.set_position(_to_ms(elapsed))
                if elapsed > duration:
                    break
                continue

            outcome = command.handle(event)
            if outcome is CommandOutcome.QUIT:
                return True
            if outcome is CommandOutcome.UPDATED:
                display.set_message(command.text)
        return False
    finally:
        display.finish_and_clear()


class PhaseRunner:
    """Runs phases against the real terminal.

    Each call builds a fresh key reader, event stream and progress bar.
    """

    def __init__(
        self,
        console: Console | None = None,
        interval: timedelta = TICK_INTERVAL,
        key_source_factory: Callable[[], AsyncIterator[KeyPress]] = TerminalKeyReader,
        clock: Callable[[], float] = time.monotonic,
        bell: bool = True,
    ):
        self.console = console or get_console()
        self.interval = interval
        self.key_source_factory = key_source_factory
        self.clock = clock
        self.bell = bell

    async def run(self, phase: Phase, duration: timedelta) -> bool:
        """Run one phase; return True if quitting was requested."""
        logger = get_logger()
        logger.info("phase started: %s (%s)", phase.label, duration)

        display = PhaseBar(_to_ms(duration), phase.template, console=self.console)
        events = EventStream(self.key_source_factory(), self.interval)
        async with events:
            display.start()
            quit_requested = await run_phase(duration, events, display, self.clock)

        if quit_requested:
            logger.info("phase quit: %s", phase.label)
        else:
            logger.info("phase completed: %s", phase.label)
            if self.bell:
                self.console.bell()
        return quit_requested
