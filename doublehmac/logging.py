"""Logging helpers for doublehmac.

Library modules log through children of the ``doublehmac`` logger, only at
``DEBUG``, and never include key material or the values being compared.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Optional

LOGGER_NAME = "doublehmac"


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


class _StructuredHandler(logging.StreamHandler):
    pass


def setup_structured_logging(
    level: int = logging.INFO, stream: Optional[IO[str]] = None
) -> logging.Logger:
    """Send ``doublehmac`` log records to ``stream`` as JSON lines.

    Only the package logger is touched; the root logger and its handlers are
    left alone. Calling again replaces the handler installed by a previous
    call instead of stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _StructuredHandler):
            logger.removeHandler(handler)
    handler = _StructuredHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
