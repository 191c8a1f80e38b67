"""Configuration models for the interval timer."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, Field, field_validator

from pomobar_cli.utils.durations import parse_duration


class TimerConfig(BaseModel):
    """Phase durations loaded from config.toml.

    Every field accepts a number of seconds (int or float) or a string such
    as ``"25 m"``, ``"1 h"``, ``"30 s"`` or ``"45"``.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    work_time: timedelta = Field(..., description="Length of a work phase")
    short_break: timedelta = Field(..., description="Length of a short break")
    long_break: timedelta = Field(..., description="Length of a long break")

    @field_validator("work_time", "short_break", "long_break", mode="before")
    @classmethod
    def validate_duration(cls, v: object) -> timedelta:
        """Convert the raw config value into a duration."""
        return parse_duration(v)
