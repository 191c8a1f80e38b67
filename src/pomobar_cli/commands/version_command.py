"""Command 'version' of pomobar-cli"""

from pomobar_cli import __version__
from pomobar_cli.utils.ui.console import get_console

console = get_console(highlight=False)


def version() -> None:
    """Show version information"""
    console.print(__version__)
