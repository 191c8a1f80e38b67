"""Custom exceptions for Pomobar CLI."""


class PomobarError(Exception):
    """Base exception for all Pomobar errors."""


class ConfigError(PomobarError):
    """Raised when the configuration file cannot be read or is invalid."""


class DurationError(ConfigError, ValueError):
    """Raised when a configuration value cannot be turned into a duration.

    Also a ``ValueError`` so pydantic validators report it as a field error.
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class DisplayError(PomobarError):
    """Raised when the progress display cannot be initialised."""


class InputStreamError(PomobarError):
    """Raised when reading from the terminal input fails."""
