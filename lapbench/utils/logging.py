"""Lightweight benchmark logging."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_file_logger(log_path: Path) -> logging.Logger:
    """Configure a file logger."""

    logger = logging.getLogger(f"lapbench.{log_path.stem}")
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    handler = logging.FileHandler(log_path, mode="w")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def setup_console_logger(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger."""

    logger = logging.getLogger("lapbench")
    logger.setLevel(level.upper())
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
