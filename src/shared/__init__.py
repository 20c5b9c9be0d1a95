"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides constants, logging and clock helpers used across the
layers of the application. It must not depend on Infrastructure or
Frameworks.
"""

from .clock import utc_now
from .consts import EnumEnvironment, EnumLogFormat, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogFormat",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
    "utc_now",
]
