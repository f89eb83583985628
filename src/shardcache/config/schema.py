"""Pydantic model for resolved settings."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, field_validator

_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class CacheSettings(BaseModel):
    root: Path
    log_level: str = "WARNING"

    @field_validator("root", mode="before")
    @classmethod
    def _expand_root(cls, value: object) -> object:
        if isinstance(value, str):
            return Path(value).expanduser()
        if isinstance(value, Path):
            return value.expanduser()
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
