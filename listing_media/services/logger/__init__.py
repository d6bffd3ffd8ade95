"""
Centralized Logger Service Module.

Usage:
    from listing_media.services.logger import (
        configure_logging_from_settings,
        get_service_logger,
    )
    from listing_media.enums import LoggerName, LogSource

    configure_logging_from_settings()
    logger = get_service_logger(LoggerName.IMAGE_PIPELINE, LogSource.PIPELINE)
"""

# Re-export commonly used enums for convenience
from ...enums import LoggerName, LogLevel, LogSource
from .logger_service import (
    configure_logging,
    configure_logging_from_settings,
    get_service_logger,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_service_logger",
    # Enums
    "LogLevel",
    "LogSource",
    "LoggerName",
]
