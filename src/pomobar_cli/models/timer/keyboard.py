"""Terminal keyboard input for the interval timer.

:class:`TerminalMode` switches stdin to cbreak mode for the lifetime of the
program. :class:`TerminalKeyReader` exposes the prompt_toolkit input of the
current terminal as an async iterator of :class:`KeyPress` objects.
"""

from __future__ import annotations

import asyncio
import sys
from collections import deque
from contextlib import ExitStack

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress

from pomobar_cli.models.errors import InputStreamError
from pomobar_cli.utils.logger import get_logger

# How long a lone ESC waits for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.05


class TerminalMode:
    """Puts the terminal into cbreak mode and restores it afterwards."""

    def __init__(self, stream=None):
        stream = stream if stream is not None else sys.stdin
        try:
            self.fd: int | None = stream.fileno()
        except (AttributeError, OSError, ValueError):
            # Not backed by a real file (e.g. captured stdin)
            self.fd = None
        self.old_settings = None

    def setup(self) -> None:
        """Setup terminal for unbuffered, unechoed input."""
        if self.fd is None:
            return
        try:
            import termios
            import tty
        except ImportError:
            # Windows console input needs no mode switch
            return

        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error:
            # Not a TTY
            self.old_settings = None

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings is None:
            return
        import termios

        termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        self.old_settings = None

    def __enter__(self) -> TerminalMode:
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


class TerminalKeyReader:
    """Async iterator over key presses from a prompt_toolkit input.

    The input is attached on first use and detached by :meth:`aclose`.
    End of input (stdin at EOF, ``/dev/null``, no usable stdin) ends the
    iteration; any other read failure raises :class:`InputStreamError`.
    """

    def __init__(self, inp: Input | None = None, escape_timeout: float = ESCAPE_TIMEOUT):
        self._input = inp
        self.escape_timeout = escape_timeout
        self._pending: deque[KeyPress] = deque()
        self._ready = asyncio.Event()
        self._stack = ExitStack()
        self._flush_handle: asyncio.TimerHandle | None = None
        self._attached = False
        self._eof = False
        self._closed = False
        self._error: Exception | None = None

    def __aiter__(self) -> TerminalKeyReader:
        return self

    async def __anext__(self) -> KeyPress:
        if not (self._attached or self._eof or self._closed):
            self._attach()

        while not self._pending:
            if self._error is not None:
                raise InputStreamError(
                    f"Reading terminal input failed: {self._error}"
                ) from self._error
            if self._eof or self._closed:
                raise StopAsyncIteration
            self._ready.clear()
            await self._ready.wait()
        return self._pending.popleft()

    async def aclose(self) -> None:
        self._closed = True
        self._detach()
        self._ready.set()

    def _attach(self) -> None:
        self._attached = True
        try:
            if self._input is None:
                self._input = create_input()
            self._stack.enter_context(self._input.attach(self._on_input_ready))
        except (EOFError, PermissionError) as e:
            # stdin cannot be polled (/dev/null or a regular file)
            get_logger().info("terminal input unavailable, keys disabled: %r", e)
            self._eof = True
        except OSError as e:
            raise InputStreamError(f"Cannot attach to terminal input: {e}") from e

    def _detach(self) -> None:
        if self._flush_handle is not None:
            self._flush_handle.cancel()
            self._flush_handle = None
        self._stack.close()

    def _on_input_ready(self) -> None:
        try:
            self._pending.extend(self._input.read_keys())
        except OSError as e:
            self._error = e
            self._detach()
            self._ready.set()
            return

        if self._input.closed:
            self._pending.extend(self._input.flush_keys())
            self._eof = True
            self._detach()
        else:
            self._schedule_flush()
        self._ready.set()

    def _schedule_flush(self) -> None:
        if self._flush_handle is not None:
            self._flush_handle.cancel()
        loop = asyncio.get_running_loop()
        self._flush_handle = loop.call_later(self.escape_timeout, self._flush)

    def _flush(self) -> None:
        """Report a pending lone ESC once no more bytes followed it."""
        self._flush_handle = None
        if self._closed or self._eof:
            return
        key_presses = self._input.flush_keys()
        if key_presses:
            self._pending.extend(key_presses)
            self._ready.set()
