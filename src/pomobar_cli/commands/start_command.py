"""Start command - run the Pomodoro cycle in the terminal."""

from pomobar_cli.models.timer import PhaseRunner, TerminalMode, run_cycle
from pomobar_cli.services.config_service import get_config_service
from pomobar_cli.utils.ui.console import get_console
from pomobar_cli.utils.ui.formatters import format_duration, format_info

from .decorators import command_wrapper

console = get_console()


@command_wrapper
async def start() -> None:
    """Run work and break phases until ':q' or ':quit' is entered."""
    config = get_config_service().load_config()

    format_info(
        f"Work {format_duration(config.work_time)}, "
        f"short break {format_duration(config.short_break)}, "
        f"long break {format_duration(config.long_break)}. "
        "Type :q and Enter to quit."
    )

    with TerminalMode():
        await run_cycle(config, PhaseRunner(console))
