"""Logging setup for applications embedding the planner."""

import logging
from typing import Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger.

    Args:
        level: Log level name. Defaults to the configured ``log_level``.
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"Logging configured at {level_name}")
