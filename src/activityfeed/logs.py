"""Logging setup for the ``activityfeed`` package logger.

Only the package logger is touched; the host application's root logger and
its handlers are left alone.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from activityfeed.config import load_settings

PACKAGE_LOGGER = "activityfeed"


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)-8s %(name)s | %(message)s")


def setup_logging(
    log_level: str = "INFO", log_format: str = "json", *, stream=None
) -> logging.Logger:
    """Attach a single handler to the ``activityfeed`` logger and return it.

    Records stop propagating to the root logger so they are not emitted
    twice. Calling this again swaps the handler rather than adding one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(_build_formatter(log_format))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO))
    logger.propagate = False
    return logger


def setup_logging_from_env(env_path: str | Path | None = None) -> logging.Logger:
    """Read LOG_LEVEL / LOG_FORMAT (and a .env file) and configure the package logger."""
    settings = load_settings(env_path)
    return setup_logging(settings.log_level, settings.log_format)
