"""Configuration management using pydantic-settings."""

import logging
from pathlib import Path
from typing import Any, Self

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised for invalid or incomplete startup configuration."""


class Settings(BaseSettings):
    """Settings loaded from environment variables, `.env` files and CLI flags.

    Environment variable names match the command-line flags
    (BEET_COMMAND for --beet-command, etc.).
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        extra="ignore",
    )

    @model_validator(mode="after")
    def output_file_and_key_go_together(self) -> Self:
        """Reject an output file without a key, or a key without a file."""
        if self.output_file is not None and self.output_key is None:
            raise ValueError("missing output_key for provided output_file")
        if self.output_file is None and self.output_key is not None:
            raise ValueError("missing output_file for provided output_key")
        return self

    beet_command: Path = Field(
        validation_alias="BEET_COMMAND",
        description="Path to the `beet` command from the package `beets`",
    )
    # NOTE: Newline separated tokens, comma separated groups, e.g.
    # "genre:Jazz\nyear:2000..,genre:Blues" -> beet list genre:Jazz year:2000.., genre:Blues
    timeless_args: str = Field(
        validation_alias="TIMELESS_ARGS",
        description="Filter arguments to `beet list` (excluding the date `added` filter)",
    )
    max_entries: int = Field(
        default=400,
        ge=0,
        validation_alias="MAX_ENTRIES",
        description="Number of most recent entries to consider",
    )
    output_file: Path | None = Field(
        default=None,
        validation_alias="OUTPUT_FILE",
        description="JSON file receiving the chosen date",
    )
    output_key: str | None = Field(
        default=None,
        validation_alias="OUTPUT_KEY",
        description="Key for the chosen date in the output file",
    )

    @property
    def output(self) -> tuple[Path, str] | None:
        """The (file, key) pair to write the chosen date to, if configured."""
        if self.output_file is None or self.output_key is None:
            return None
        return self.output_file, self.output_key


def load_settings(**overrides: Any) -> Settings:
    """Load settings, letting non-None keyword overrides win over the environment.

    Overrides are given by field name (e.g. `max_entries=100`).

    Raises:
        ConfigError: If required values are missing or invalid.
    """
    values = {}
    for name, value in overrides.items():
        if value is None:
            continue
        alias = Settings.model_fields[name].validation_alias
        values[alias if isinstance(alias, str) else name] = value

    try:
        settings = Settings(**values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e

    logger.debug(
        "Settings: beet_command=%s max_entries=%d output=%s",
        settings.beet_command,
        settings.max_entries,
        settings.output,
    )
    return settings
