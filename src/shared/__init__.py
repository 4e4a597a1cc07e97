"""
Shared Module

Cross-cutting concerns used by the entry point.

This module exports:
    - Settings, get_settings: Environment-driven configuration
    - configure_logging: Process logging setup
"""

from .config import Settings, get_settings
from .logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
]
