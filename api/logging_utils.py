"""Logging setup for the Pok Deng service."""

import logging
import sys
from datetime import datetime, timezone

from config import LoggingConfig, config

ROOT_LOGGER = "pokdeng"

SIMPLE_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
SIMPLE_DATEFMT = "%H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """Formatter that renders records as ``key=value | key=value`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        parts = [f"{k}={v}" for k, v in log_data.items() if v is not None]
        return " | ".join(parts)


def setup_logging(settings: LoggingConfig | None = None) -> logging.Logger:
    """
    Configure the ``pokdeng`` logger tree.

    Safe to call more than once; existing handlers are replaced.

    Args:
        settings: Logging settings, defaults to the global configuration

    Returns:
        The configured root ``pokdeng`` logger
    """
    settings = settings or config.logging
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, settings.level, logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if settings.format == "structured":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT, datefmt=SIMPLE_DATEFMT))
    root_logger.addHandler(handler)
    root_logger.propagate = False

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``pokdeng`` namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
