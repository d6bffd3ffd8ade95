# listing_media/services/image_pipeline/utils/__init__.py
"""
Image Pipeline Utility Functions and Constants

Shared utilities for the image pipeline:
- Supported media type registry
- Decoding/encoding helpers
- Constants and configuration values
"""

from .constants import (
    MISSING_CONTENT_TYPE,
    THUMBNAIL_BACKGROUND_COLOR,
    WRITABLE_MODES,
)
from .image_utils import (
    calculate_thumbnail_dimensions,
    encode_image,
    ensure_writable_mode,
    flatten_transparency,
    has_transparency,
    open_image,
)
from .media_types import (
    SUPPORTED_MEDIA_TYPES,
    is_supported,
    media_type_for_format,
    pillow_format_for,
)

__all__ = [
    "open_image",
    "encode_image",
    "ensure_writable_mode",
    "flatten_transparency",
    "has_transparency",
    "calculate_thumbnail_dimensions",
    "SUPPORTED_MEDIA_TYPES",
    "is_supported",
    "pillow_format_for",
    "media_type_for_format",
    "MISSING_CONTENT_TYPE",
    "THUMBNAIL_BACKGROUND_COLOR",
    "WRITABLE_MODES",
]
