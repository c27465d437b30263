"""Centralized configuration for the command-line front end.

Settings are read from TERRITORY_* environment variables or a .env.territory
file. The analysis core takes no configuration: it is a pure function of the
board it is given.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TERRITORY_", env_file=".env.territory", env_file_encoding="utf-8",
    )

    log_level: str = "WARNING"
    json_indent: int = Field(default=2, ge=0)
    include_pins: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
