"""Logging setup for the ``cards_preview`` logger tree.

The package never touches the root logger. A host that wants the package's
diagnostics calls ``cards_preview.configure_logging()`` once at startup; until
then records go to a NullHandler.

Both formats surface the context fields the package attaches with ``extra``
(which document failed to read, how many cache entries a refresh dropped,
and so on).
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Optional

from .config import settings

PACKAGE_LOGGER = "cards_preview"

# ``extra`` keys set by the package's log calls, in display order.
CONTEXT_FIELDS = (
    "document_key",
    "image_path",
    "card_count",
    "dropped_entries",
    "error",
)


def _context(record: logging.LogRecord) -> dict:
    return {
        field: getattr(record, field)
        for field in CONTEXT_FIELDS
        if hasattr(record, field)
    }


class PreviewJsonFormatter(logging.Formatter):
    """One JSON object per line: standard fields plus any context fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_context(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class PreviewTextFormatter(logging.Formatter):
    """Human-readable line with context fields appended as ``key=value``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = _context(record)
        if context:
            line += " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"
        return line


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Attach a stream handler to the ``cards_preview`` logger.

    Calling it again replaces the handler installed by the previous call, so
    hosts can reconfigure after reloading settings.

    Args:
        log_level: DEBUG..CRITICAL. Defaults to ``settings.log_level``.
        log_format: ``"json"`` or ``"text"``. Defaults to ``settings.log_format``.
        stream: Output stream. Defaults to stdout.

    Returns:
        The installed handler.
    """
    level = (log_level or settings.log_level).upper()
    fmt = (log_format or settings.log_format).lower()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(PreviewJsonFormatter() if fmt == "json" else PreviewTextFormatter())
    handler._cards_preview_owned = True  # marks handlers this function may replace

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in logger.handlers if getattr(h, "_cards_preview_owned", False)]:
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logger.debug("Logging configured", extra={"level": level, "format": fmt})
    return handler
