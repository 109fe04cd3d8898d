"""Configuration loading and validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_LOG_FORMATS = frozenset({"json", "text"})


@dataclass(frozen=True)
class Settings:
    """Process settings for hosts embedding the feed. Sourced from environment variables.

    Loaders are code-level configuration (see ``activityfeed.sources.registry``)
    and never come from the environment.
    """

    log_level: str = "INFO"
    log_format: str = "json"


def load_settings(env_path: str | Path | None = None) -> Settings:
    """Load settings from environment variables.

    Loads a .env file if present (for local development). Raises ValueError
    if LOG_FORMAT is not one of the supported formats.
    """
    load_dotenv(dotenv_path=env_path)

    log_format = os.environ.get("LOG_FORMAT", "json").lower()
    if log_format not in _LOG_FORMATS:
        raise ValueError(
            f"Invalid LOG_FORMAT '{log_format}'; "
            f"must be one of: {', '.join(sorted(_LOG_FORMATS))}"
        )

    return Settings(
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_format=log_format,
    )
