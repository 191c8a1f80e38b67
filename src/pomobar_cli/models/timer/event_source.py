"""Merge timer ticks and keyboard input into one event sequence."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from datetime import timedelta

from prompt_toolkit.key_binding import KeyPress

from .events import Tick, TimerEvent, to_event

# Resolution at which elapsed time is checked and the display refreshed
TICK_INTERVAL = timedelta(milliseconds=25)

_SOURCE_DONE = object()


class _SourceFailed:
    def __init__(self, error: BaseException):
        self.error = error


class EventStream:
    """Single async sequence of :class:`Tick` and key events for one phase.

    A tick producer and a key producer run as separate tasks and feed one
    queue, so events come out in arrival order with no priority between the
    two sources. Order within each source is preserved. The stream is
    infinite while the tick producer runs; close it (or leave its
    ``async with`` block) to stop both producers. A closed stream cannot be
    reopened; create a new one per phase.
    """

    def __init__(
        self,
        key_source: AsyncIterator[KeyPress],
        interval: timedelta = TICK_INTERVAL,
    ):
        if interval <= timedelta(0):
            raise ValueError("tick interval must be positive")
        self.interval = interval
        self._key_source = key_source
        self._queue: asyncio.Queue = asyncio.Queue()
        self._tasks: list[asyncio.Task] = []
        self._running_sources = 0
        self._started = False
        self._closed = False

    async def __aenter__(self) -> EventStream:
        self._start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __aiter__(self) -> EventStream:
        return self

    async def __anext__(self) -> TimerEvent:
        if self._closed:
            raise StopAsyncIteration
        self._start()

        while True:
            if self._running_sources == 0:
                raise StopAsyncIteration
            item = await self._queue.get()
            if item is _SOURCE_DONE:
                self._running_sources -= 1
                continue
            if isinstance(item, _SourceFailed):
                await self.aclose()
                raise item.error
            return item

    def _start(self) -> None:
        if self._closed:
            raise RuntimeError("event stream is closed and cannot be restarted")
        if self._started:
            return
        self._started = True
        self._tasks = [
            asyncio.create_task(self._produce_ticks()),
            asyncio.create_task(self._produce_keys()),
        ]
        self._running_sources = len(self._tasks)

    async def aclose(self) -> None:
        """Stop both producers and close the key source."""
        if self._closed:
            return
        self._closed = True

        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass

        aclose = getattr(self._key_source, "aclose", None)
        if aclose is not None:
            await aclose()

    async def _produce_ticks(self) -> None:
        loop = asyncio.get_running_loop()
        period = self.interval.total_seconds()
        deadline = loop.time()
        while True:
            # Deadline based so ticks do not drift with processing time
            deadline += period
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            self._queue.put_nowait(Tick())

    async def _produce_keys(self) -> None:
        try:
            async for key_press in self._key_source:
                event = to_event(key_press)
                if event is not None:
                    self._queue.put_nowait(event)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self._queue.put_nowait(_SourceFailed(e))
            return
        self._queue.put_nowait(_SOURCE_DONE)
