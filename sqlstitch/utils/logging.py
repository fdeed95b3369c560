"""Logging helpers for sqlstitch.

Modules log under the ``sqlstitch`` namespace at DEBUG level only, so nothing
is emitted until the application installs a handler, on its own or through
:func:`configure_logging`.

Render and dialect records carry the builder's data as record attributes:

- ``statement``: builder class name, e.g. ``"Select"``
- ``dialect``: capability table name, e.g. ``"postgres"``
- ``length``: number of characters rendered
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import msgspec

if TYPE_CHECKING:
    from collections.abc import Iterable
    from logging import LogRecord

__all__ = ("BUILDER_FIELDS", "ROOT_LOGGER_NAME", "StructuredFormatter", "configure_logging", "get_logger")

ROOT_LOGGER_NAME = "sqlstitch"
BUILDER_FIELDS = ("statement", "dialect", "length")

_json_encoder = msgspec.json.Encoder(enc_hook=str)


class StructuredFormatter(logging.Formatter):
    """Format records as one JSON object per line, builder fields included."""

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in BUILDER_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return _json_encoder.encode(entry).decode()


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``sqlstitch`` or one of its children.

    Args:
        name: Child name such as ``"builder"``. Names already under the namespace are kept.

    Returns:
        The logger.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    extra_handlers: Iterable[logging.Handler] | None = None,
) -> logging.Logger:
    """Send sqlstitch records to stderr.

    Handlers previously installed on the ``sqlstitch`` logger are replaced and
    records stop propagating to the root logger.

    Args:
        level: Level name, e.g. ``"DEBUG"`` to see every rendered statement.
        format_style: ``"structured"`` for JSON lines, anything else for plain text.
        extra_handlers: Handlers added next to the stderr handler.

    Returns:
        The ``sqlstitch`` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if format_style == "structured":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    for extra in extra_handlers or ():
        logger.addHandler(extra)

    logger.propagate = False
    return logger
