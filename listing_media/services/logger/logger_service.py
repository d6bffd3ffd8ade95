"""
Centralized Logger Service for the listing media pipeline.

Thin layer over loguru that provides:
- Console output with level-based coloring
- Optional file logging with rotation, retention and compression
- Pre-configured service loggers bound to a logger name and source

Usage:
    from listing_media.services.logger import get_service_logger
    from listing_media.enums import LoggerName, LogSource

    logger = get_service_logger(LoggerName.IMAGE_PIPELINE, LogSource.PIPELINE)
    logger.info("Compressed batch", extra_context={"count": 3})
"""

import sys
from typing import Any, Dict, Optional, Union

from loguru import logger

from ...config import Settings
from ...config import settings as default_settings
from ...constants import (
    LOG_CONSOLE_FORMAT,
    LOG_FILE_COMPRESSION,
    LOG_FILE_RETENTION,
    LOG_FILE_ROTATION,
)
from ...enums import LoggerName, LogLevel, LogSource

_DEFAULT_EXTRA = {
    "logger_name": LoggerName.SYSTEM.value,
    "source": LogSource.SYSTEM.value,
    "context": {},
}


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.INFO,
    log_file: Optional[str] = None,
    serialize_file: bool = True,
) -> None:
    """
    Replace loguru's default sink with the application's console and file sinks.

    Args:
        level: Minimum level for every sink
        log_file: Optional path of a rotating log file
        serialize_file: Write the file sink as JSON lines instead of plain text
    """
    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()

    logger.remove()
    logger.configure(extra=dict(_DEFAULT_EXTRA))
    logger.add(
        sys.stderr,
        level=level_name,
        format=LOG_CONSOLE_FORMAT,
        colorize=sys.stderr.isatty(),
    )

    if log_file:
        logger.add(
            log_file,
            level=level_name,
            rotation=LOG_FILE_ROTATION,
            retention=LOG_FILE_RETENTION,
            compression=LOG_FILE_COMPRESSION,
            serialize=serialize_file,
            enqueue=True,
        )


def get_service_logger(
    logger_name: LoggerName,
    source: LogSource = LogSource.SYSTEM,
):
    """
    Factory function to create a pre-configured logger for a specific service.

    Every record carries the logger name and source in its ``extra`` dict, so
    sinks can filter or format on them.

    Args:
        logger_name: The logger name enum to use for all calls
        source: The log source enum to use for all calls (defaults to SYSTEM)

    Returns:
        ServiceLogger instance with error, warning, info, debug methods
    """
    bound = logger.bind(logger_name=logger_name.value, source=source.value)

    def _with_context(context: Optional[Dict[str, Any]]):
        return bound.bind(context=context) if context else bound

    class ServiceLogger:
        name = logger_name
        log_source = source

        @staticmethod
        def error(
            message: str,
            exception: Optional[BaseException] = None,
            error_context: Optional[Dict[str, Any]] = None,
        ) -> None:
            """Log an error, attaching the traceback when an exception is given."""
            target = _with_context(error_context)
            if exception is not None:
                target.opt(exception=exception).error(message)
            else:
                target.error(message)

        @staticmethod
        def warning(
            message: str, extra_context: Optional[Dict[str, Any]] = None
        ) -> None:
            _with_context(extra_context).warning(message)

        @staticmethod
        def info(message: str, extra_context: Optional[Dict[str, Any]] = None) -> None:
            _with_context(extra_context).info(message)

        @staticmethod
        def debug(
            message: str, extra_context: Optional[Dict[str, Any]] = None
        ) -> None:
            _with_context(extra_context).debug(message)

    return ServiceLogger()


def configure_logging_from_settings(active_settings: Optional[Settings] = None) -> None:
    """Configure sinks from the process settings (global settings by default)."""
    active_settings = active_settings or default_settings
    configure_logging(active_settings.log_level, log_file=active_settings.log_file)
