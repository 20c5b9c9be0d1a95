"""
Logging Configuration - Shared Layer

Routes structlog event logs through the standard library logging handlers.
Development renders coloured console lines, production renders JSON; the
renderer can also be forced with ``LOG_FORMAT``.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment, EnumLogFormat

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("pymongo", "uvicorn.access")


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def _select_renderer(log_format: str, environment: str) -> Processor:
    log_format = log_format.lower()
    if log_format == EnumLogFormat.JSON or (
        log_format == EnumLogFormat.AUTO
        and environment.lower() == EnumEnvironment.PRODUCTION
    ):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = EnumEnvironment.DEVELOPMENT.value,
) -> None:
    """
    Configure structlog on top of the standard logging module.

    Called once at import of the application with values from the environment
    so that settings loading can already log, then again with the loaded
    settings through ``update_logging_from_settings``.

    Args:
        level: Log level name, defaults to ``LOG_LEVEL`` or INFO
        log_format: ``auto``, ``console`` or ``json``, defaults to ``LOG_FORMAT``
        file_path: Optional file to log to in addition to stdout
        environment: Application environment, used by the ``auto`` format
    """
    log_level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    renderer_name = log_format or os.environ.get("LOG_FORMAT") or EnumLogFormat.AUTO
    log_file = file_path or os.environ.get("LOG_FILE_PATH")

    numeric_level = getattr(logging, log_level, logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(str(_enum_value(renderer_name)), environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    get_logger(__name__).debug(
        "logging.configured", level=log_level, log_file=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: The application settings object from Pydantic.
    """
    configure_logging(
        level=_enum_value(settings.logging.level),
        log_format=_enum_value(settings.logging.format),
        file_path=settings.logging.file_path,
        environment=_enum_value(settings.environment),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
