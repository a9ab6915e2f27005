"""Logging setup for the API process."""

from __future__ import annotations

import logging
from typing import Optional

from task_tracker.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> None:
    """Send all log records to stderr in one format, at LOG_LEVEL unless overridden."""
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        handlers=[console_handler],
        force=True,
    )
