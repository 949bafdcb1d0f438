"""Logging setup for the transit router.

Modules log through ``logging.getLogger(__name__)`` and pass context
via ``extra``. This module attaches a single handler to the package
logger, either in plain text or as one JSON object per line.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

logger = logging.getLogger("transit_router")

# Attributes every LogRecord carries; anything else came from ``extra``.
_RESERVED = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render records as JSON lines, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a handler to the ``transit_router`` logger.

    Calling it again replaces the handler installed by a previous call.

    Args:
        config: Logging settings, defaults to the application config.

    Returns:
        The configured package logger.

    Raises:
        ConfigurationError: If the level name is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    handler.set_name("transit_router")

    for existing in list(logger.handlers):
        if existing.get_name() == "transit_router":
            logger.removeHandler(existing)

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
