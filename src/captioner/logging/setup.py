"""Logging configuration for captioner.

The registry and formatter log their events (``object_registered``,
``caption_filled``, ``invalid_display_mode``, ``deprecated_flag``) with
``extra={"event": ..., "index": ...}``. The formatters here make those
extras visible: as top-level JSON keys, or as a bracketed suffix in plain
text.

Only the ``captioner`` logger is configured, so a host renderer keeps
control of its own root logger.
"""

import logging
import os
import sys
from typing import Any, Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

PACKAGE_LOGGER = "captioner"

# Extras attached to captioner log records, in display order
EVENT_FIELDS = ("event", "index")


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter that always reports which captioner event occurred."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add event fields and shorten standard keys."""
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")
        if "name" in log_record:
            log_record["logger"] = log_record.pop("name")

        for field in EVENT_FIELDS:
            if hasattr(record, field):
                log_record[field] = getattr(record, field)
        log_record.setdefault("event", "log")


class EventTextFormatter(logging.Formatter):
    """Plain-text formatter appending ``[event index=N]`` when present."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        event = getattr(record, "event", None)
        if event is None:
            return text
        index = getattr(record, "index", None)
        if index is None:
            return f"{text} [{event}]"
        return f"{text} [{event} index={index}]"


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``captioner`` logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               CAPTIONER_LOG_LEVEL or WARNING.
        json_format: Whether to use JSON format. Defaults to env var
                     CAPTIONER_LOG_FORMAT == 'json' or True.
        stream: Output stream. Defaults to stderr, leaving stdout to the
                document being rendered.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = os.getenv("CAPTIONER_LOG_LEVEL", "WARNING").upper()
    if json_format is None:
        log_format = os.getenv("CAPTIONER_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)

    if json_format:
        formatter: logging.Formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = EventTextFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Output goes to our handler only; no duplicates through the root logger
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
