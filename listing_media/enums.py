# listing_media/enums.py
"""
Application Enums - Centralized enum definitions.

Kept in one module so configuration, models and the image pipeline can all
import them without circular dependencies.
"""

from enum import Enum


# =============================================================================
# MEDIA TYPES
# =============================================================================


class SupportedMediaType(str, Enum):
    """Image encodings accepted for listing photos. Value is the canonical media type."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    BMP = "image/bmp"


# =============================================================================
# LOGGING SYSTEM
# =============================================================================


class LogLevel(str, Enum):
    """Log level constants for centralized logging system."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogSource(str, Enum):
    """Log source constants for identifying log origins."""

    SYSTEM = "system"
    PIPELINE = "pipeline"


class LoggerName(str, Enum):
    """Logger name constants for categorizing log entries."""

    # Pipeline loggers
    IMAGE_PIPELINE = "image_pipeline"
    BATCH_COMPRESSOR = "batch_compressor"

    # System loggers
    SYSTEM = "system"
