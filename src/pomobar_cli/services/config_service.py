"""Configuration service for loading the timer configuration.

The configuration is a TOML document with three required keys:
``work_time``, ``short_break`` and ``long_break``. There is no default
configuration; a missing or invalid file stops the program before the first
phase starts.

The file is looked up in this order:

1. an explicit path given to :class:`ConfigService`
2. the ``POMOBAR_CONFIG`` environment variable
3. ``config.toml`` in the current working directory
4. ``config.toml`` in the platform user config directory
"""

from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError

from pomobar_cli import APP_NAME
from pomobar_cli.models.config_models import TimerConfig
from pomobar_cli.models.errors import ConfigError
from pomobar_cli.utils.logger import get_logger

CONFIG_FILE_NAME = "config.toml"
CONFIG_ENV_VAR = "POMOBAR_CONFIG"


def _describe_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into a single line per field."""
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "<root>"
        message = item["msg"].removeprefix("Value error, ")
        parts.append(f"{field}: {message}")
    return "; ".join(parts)


class ConfigService:
    """Locates, reads and validates the timer configuration."""

    def __init__(self, config_path: str | Path | None = None):
        self.config_dir = Path(user_config_dir(APP_NAME))
        self._explicit_path = Path(config_path) if config_path else None
        self._config: TimerConfig | None = None

    def resolve_path(self) -> Path:
        """Return the path the configuration will be read from."""
        if self._explicit_path is not None:
            return self._explicit_path

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)

        local = Path.cwd() / CONFIG_FILE_NAME
        if local.exists():
            return local

        return self.config_dir / CONFIG_FILE_NAME

    @property
    def config(self) -> TimerConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> TimerConfig:
        """Load and validate the configuration file.

        Raises:
            ConfigError: if the file is missing, unreadable, not valid TOML,
                or a duration field is missing or malformed.
        """
        if self._config is not None:
            return self._config

        logger = get_logger()
        path = self.resolve_path()
        logger.debug("loading config from %s", path)

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Malformed config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        try:
            self._config = TimerConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid config file {path}: {_describe_validation_error(e)}"
            ) from e

        logger.info(
            "config loaded from %s: work_time=%s short_break=%s long_break=%s",
            path,
            self._config.work_time,
            self._config.short_break,
            self._config.long_break,
        )
        return self._config


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the process-wide ConfigService instance."""
    return ConfigService()
