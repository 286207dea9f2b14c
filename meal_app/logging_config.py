"""Utilities for configuring application logging."""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

_LOGGER_NAME = "meal_recommender"


def _configure_base_logger() -> logging.Logger:
    """Configure (once) the base logger used across the application.

    ``LOG_LEVEL`` selects the level and ``LOG_DIR`` the directory for the
    timestamped log file. An empty ``LOG_DIR`` keeps logging on stdout only.
    """

    base_logger = logging.getLogger(_LOGGER_NAME)
    if base_logger.handlers:
        return base_logger

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    base_logger.setLevel(getattr(logging, level_name, logging.INFO))
    base_logger.propagate = False

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    base_logger.addHandler(stream_handler)

    log_dir = os.getenv("LOG_DIR", "logs")
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_filename = os.path.join(
            log_dir,
            f"meal_recommender_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log",
        )

        file_handler = logging.FileHandler(log_filename, encoding="utf-8")
        file_handler.setFormatter(formatter)
        base_logger.addHandler(file_handler)
        base_logger.debug("Logger configured with stream and file handlers")
    else:
        base_logger.debug("Logger configured with stream handler only")

    return base_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger that shares the base handler configuration."""

    base_logger = _configure_base_logger()
    if not name or name == _LOGGER_NAME:
        return base_logger

    return base_logger.getChild(name)


__all__ = ["get_logger"]
