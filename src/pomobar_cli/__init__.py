"""Pomobar CLI - a terminal Pomodoro interval timer."""

__version__ = "0.1.0"

# Directory name under the platform config and log directories
APP_NAME = "pomobar_cli"
