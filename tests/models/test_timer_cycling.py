"""Tests for phase ordering and the full Pomodoro cycle."""

from __future__ import annotations

from datetime import timedelta
from itertools import islice

import pytest

from pomobar_cli.models.config_models import TimerConfig
from pomobar_cli.models.timer.cycling import (
    SESSIONS_BEFORE_LONG_BREAK,
    Phase,
    phase_sequence,
    run_cycle,
)

W, S, L = Phase.WORK, Phase.SHORT_BREAK, Phase.LONG_BREAK


@pytest.fixture
def config():
    return TimerConfig(work_time="25 m", short_break="5 m", long_break="15 m")


class FakeRunner:
    """Records phases and asks to quit on the given (1-based) phase."""

    def __init__(self, quit_on: int):
        self.quit_on = quit_on
        self.calls: list[tuple[Phase, timedelta]] = []

    async def run(self, phase: Phase, duration: timedelta) -> bool:
        self.calls.append((phase, duration))
        return len(self.calls) == self.quit_on


class TestPhase:
    @pytest.mark.parametrize(
        ("phase", "label"),
        [(W, "Working"), (S, "Short Break"), (L, "Long Break")],
    )
    def test_labels(self, phase, label):
        assert phase.label == label
        assert phase.template == f"[bold cyan]{label}[/bold cyan]"

    def test_durations_come_from_config(self, config):
        assert W.get_duration(config) == timedelta(minutes=25)
        assert S.get_duration(config) == timedelta(minutes=5)
        assert L.get_duration(config) == timedelta(minutes=15)


class TestPhaseSequence:
    def test_first_round(self):
        phases = list(islice(phase_sequence(), 9))
        assert phases == [W, S, W, S, W, S, W, S, L]

    def test_repeats_forever(self):
        phases = list(islice(phase_sequence(), 27))
        assert phases[9:18] == phases[:9]
        assert phases[18:] == phases[:9]

    def test_long_break_every_fifth_work_session(self):
        phases = list(islice(phase_sequence(), 90))
        assert phases.count(W) == 40
        assert phases.count(S) == 40
        assert phases.count(L) == 10
        assert SESSIONS_BEFORE_LONG_BREAK == 4

    def test_custom_session_count(self):
        assert list(islice(phase_sequence(2), 5)) == [W, S, W, S, L]


class TestRunCycle:
    @pytest.mark.asyncio
    async def test_quit_during_first_phase(self, config):
        runner = FakeRunner(quit_on=1)

        completed = await run_cycle(config, runner)

        assert completed == 0
        assert runner.calls == [(W, timedelta(minutes=25))]

    @pytest.mark.asyncio
    async def test_runs_phases_in_order_with_durations(self, config):
        runner = FakeRunner(quit_on=10)

        completed = await run_cycle(config, runner)

        assert completed == 9
        assert [phase for phase, _ in runner.calls] == [W, S, W, S, W, S, W, S, L, W]
        assert runner.calls[1][1] == timedelta(minutes=5)
        assert runner.calls[8][1] == timedelta(minutes=15)

    @pytest.mark.asyncio
    async def test_quit_during_long_break(self, config):
        runner = FakeRunner(quit_on=9)
        assert await run_cycle(config, runner) == 8
        assert runner.calls[-1][0] is L

    @pytest.mark.asyncio
    async def test_no_phase_after_quit(self, config):
        runner = FakeRunner(quit_on=3)
        await run_cycle(config, runner)
        assert len(runner.calls) == 3
