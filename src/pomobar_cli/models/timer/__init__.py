"""Interval timer - phases, merged input events and the command buffer."""

from .command import CommandBuffer, CommandOutcome
from .cycling import Phase, phase_sequence, run_cycle
from .event_source import TICK_INTERVAL, EventStream
from .events import (
    KeyPressed,
    KeyReleased,
    KeyRepeated,
    SpecialKey,
    Tick,
)
from .keyboard import TerminalKeyReader, TerminalMode
from .session import PhaseRunner, run_phase
from .ui import PhaseBar

__all__ = [
    "CommandBuffer",
    "CommandOutcome",
    "EventStream",
    "KeyPressed",
    "KeyReleased",
    "KeyRepeated",
    "Phase",
    "PhaseBar",
    "PhaseRunner",
    "SpecialKey",
    "TICK_INTERVAL",
    "TerminalKeyReader",
    "TerminalMode",
    "Tick",
    "phase_sequence",
    "run_cycle",
    "run_phase",
]
