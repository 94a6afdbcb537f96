"""Logging setup: plain text or JSON lines on stderr."""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(log_level: str = "WARNING", log_format: str = "text") -> None:
    """Configure the root logger with a single stderr handler.

    stdout is left to the report itself so it can be piped or redirected
    without log noise.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    if log_format.lower() == "json":
        formatter: logging.Formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "levelname": "level",
                "name": "logger",
            },
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    # httpx logs every request at INFO; keep it one notch quieter than ours.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
