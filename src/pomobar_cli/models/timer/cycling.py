"""Pomodoro cycling: which phase comes next and how long it lasts."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from pomobar_cli.utils.logger import get_logger

if TYPE_CHECKING:
    from pomobar_cli.models.config_models import TimerConfig

SESSIONS_BEFORE_LONG_BREAK = 4


class Phase(Enum):
    """One timed segment of the cycle."""

    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def template(self) -> str:
        """Header markup for the progress bar."""
        return f"[bold cyan]{self.label}[/bold cyan]"

    def get_duration(self, config: TimerConfig) -> timedelta:
        """Get the configured duration for this phase."""
        if self is Phase.WORK:
            return config.work_time
        elif self is Phase.SHORT_BREAK:
            return config.short_break
        else:  # long_break
            return config.long_break


_LABELS = {
    Phase.WORK: "Working",
    Phase.SHORT_BREAK: "Short Break",
    Phase.LONG_BREAK: "Long Break",
}


def phase_sequence(
    sessions_before_long_break: int = SESSIONS_BEFORE_LONG_BREAK,
) -> Iterator[Phase]:
    """Yield phases forever: N x (work, short break), then a long break."""
    while True:
        for _ in range(sessions_before_long_break):
            yield Phase.WORK
            yield Phase.SHORT_BREAK
        yield Phase.LONG_BREAK


class PhaseRunnerLike(Protocol):
    async def run(self, phase: Phase, duration: timedelta) -> bool: ...


async def run_cycle(config: TimerConfig, runner: PhaseRunnerLike) -> int:
    """Run phases until one of them reports a quit request.

    Returns the number of phases that completed without quitting.
    """
    logger = get_logger()
    completed = 0
    for phase in phase_sequence():
        if await runner.run(phase, phase.get_duration(config)):
            logger.info("quit requested after %d completed phases", completed)
            return completed
        completed += 1
    return completed
