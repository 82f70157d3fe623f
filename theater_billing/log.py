"""Logging setup shared by the entry points."""
from __future__ import annotations

import logging

from theater_billing.config import LOG_FORMAT, LOGGER_NAME


def setup_logging(name: str = LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
