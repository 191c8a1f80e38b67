"""Live progress bar shown while a phase runs."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console, RenderableType
from rich.errors import MarkupError
from rich.progress import BarColumn, Progress, ProgressColumn, Task
from rich.text import Text

from pomobar_cli.models.errors import DisplayError
from pomobar_cli.utils.ui.console import get_console


class ElapsedPreciseColumn(ProgressColumn):
    """Renders the task position (milliseconds) as HH:MM:SS."""

    def render(self, task: Task) -> Text:
        seconds = int(task.completed) // 1000
        hours, rest = divmod(seconds, 3600)
        minutes, secs = divmod(rest, 60)
        return Text(f"{hours:02d}:{minutes:02d}:{secs:02d}", style="progress.elapsed")


class _PhaseProgress(Progress):
    """Progress laid out as header line, bar line, message line."""

    def __init__(self, header: Text, *columns, **kwargs):
        self.header = header
        super().__init__(*columns, **kwargs)

    def get_renderables(self) -> Iterable[RenderableType]:
        yield self.header
        yield self.make_tasks_table(self.tasks)
        for task in self.tasks:
            yield Text(task.fields.get("message", ""))


class PhaseBar:
    """Display sink for one phase.

    Position is in milliseconds. The bar is transient: finishing it removes
    it from the terminal.
    """

    def __init__(
        self,
        total_ms: int,
        template: str,
        console: Console | None = None,
        refresh_per_second: float = 20,
    ):
        try:
            self.header = Text.from_markup(template)
        except MarkupError as e:
            raise DisplayError(f"Invalid progress template {template!r}: {e}") from e

        # rich divides by the total when drawing the bar
        self.total_ms = max(1, total_ms)
        self.console = console or get_console()
        self.position = 0
        self.message = ""
        self.finished = False

        self._progress = _PhaseProgress(
            self.header,
            ElapsedPreciseColumn(),
            BarColumn(
                bar_width=None,
                style="blue",
                complete_style="cyan",
                finished_style="cyan",
            ),
            console=self.console,
            transient=True,
            expand=True,
            refresh_per_second=refresh_per_second,
        )
        self._task_id = self._progress.add_task(
            self.header.plain, total=self.total_ms, message=""
        )

    def start(self) -> None:
        self._progress.start()

    def set_position(self, position_ms: int) -> None:
        self.position = position_ms
        self._progress.update(self._task_id, completed=position_ms)

    def set_message(self, message: str) -> None:
        self.message = message
        self._progress.update(self._task_id, message=message)

    def finish_and_clear(self) -> None:
        """Stop rendering and remove the bar from the terminal."""
        if self.finished:
            return
        self.finished = True
        self._progress.stop()

    def __enter__(self) -> PhaseBar:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()
