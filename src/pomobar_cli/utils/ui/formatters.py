"""Output formatters for Pomobar CLI."""

from datetime import timedelta

from rich.markup import escape

from .console import get_console


def format_duration(duration: timedelta) -> str:
    """Format a duration as H:MM:SS, keeping fractional seconds if present."""
    total = duration.total_seconds()
    hours, rest = divmod(int(total), 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{hours}:{minutes:02d}:{seconds:02d}"
    fraction = total - int(total)
    if fraction:
        text += f"{fraction:.3f}".lstrip("0")
    return text


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {escape(message)}")
