"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
progress observers, and custom exception hierarchy. It has no internal
dependencies.
"""

from .config_loader import get_config, reload_config, Config
from .logger import get_logger
from .observer import ProgressObserver, LoggingObserver
from .exceptions import (
    PageSearchError,
    ConfigurationError,
    ValidationError,
    PageParseError,
    DatabaseError
)

__all__ = [
    "get_config",
    "reload_config",
    "Config",
    "get_logger",
    "ProgressObserver",
    "LoggingObserver",
    "PageSearchError",
    "ConfigurationError",
    "ValidationError",
    "PageParseError",
    "DatabaseError"
]
