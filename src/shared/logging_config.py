"""
Logging Setup

Configures the standard library logging for the process.
Called once by the entry point; library modules only create loggers.
"""

import logging
from typing import Optional

from src.shared.config import Settings


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """
    Configure root logger from settings.

    Args:
        settings: Application settings (log_level, log_format)
        level: Optional override of settings.log_level (e.g. from --log-level)
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=settings.log_format,
        force=True,
    )
