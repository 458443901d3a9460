"""
Console diagnostics.

Every diagnostic line carries its category as a tag prefix, e.g.
``[WARNING] Skipping row 6 ...``. SUCCESS sits between INFO and WARNING.
"""

from __future__ import annotations

import logging
import sys

SUCCESS = 25
LOGGER_NAME = "tabstore"
LOG_FORMAT = "[%(levelname)s] %(message)s"

logging.addLevelName(SUCCESS, "SUCCESS")

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str | int = "INFO", stream=None) -> logging.Handler:
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return _handler
