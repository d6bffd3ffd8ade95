# listing_media/constants.py
"""
Application-wide constants and defaults.
"""

# =============================================================================
# IMAGE PIPELINE DEFAULTS
# =============================================================================

# Compression quality on a 0.0 (worst) .. 1.0 (best) scale. Not read from the
# environment.
COMPRESSION_QUALITY = 0.30

# Shorter side of a list-view thumbnail, in pixels
DEFAULT_THUMBNAIL_EDGE_PX = 250
MIN_THUMBNAIL_EDGE_PX = 1
MAX_THUMBNAIL_EDGE_PX = 4096

# Worker bounds for concurrent batch compression
DEFAULT_COMPRESSION_MAX_WORKERS = 4
MAX_COMPRESSION_WORKERS = 8

# =============================================================================
# ENVIRONMENT
# =============================================================================

ALLOWED_ENVIRONMENTS = ("development", "staging", "production")
DEFAULT_ENVIRONMENT = "development"

# =============================================================================
# LOGGING
# =============================================================================

LOG_FILE_ROTATION = "10 MB"
LOG_FILE_RETENTION = "14 days"
LOG_FILE_COMPRESSION = "gz"
LOG_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan>:<cyan>{extra[source]}</cyan> - "
    "<level>{message}</level>"
)
