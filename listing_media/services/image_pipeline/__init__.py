# listing_media/services/image_pipeline/__init__.py
"""
Image Pipeline Module

Media ingestion for listing photos: type validation, fixed-quality
recompression and aspect-preserving thumbnail scaling.
"""

from .generators import (
    BatchCompressor,
    ImageCompressor,
    ThumbnailScaler,
)
from .image_pipeline import (
    ImagePipeline,
    create_image_pipeline,
)
from .services import (
    ImageStore,
    TypeValidator,
)
from .utils import (
    MISSING_CONTENT_TYPE,
    SUPPORTED_MEDIA_TYPES,
    calculate_thumbnail_dimensions,
    is_supported,
)

__all__ = [
    # Main pipeline
    "ImagePipeline",
    "create_image_pipeline",
    # Services
    "TypeValidator",
    "ImageStore",
    # Generators
    "ImageCompressor",
    "BatchCompressor",
    "ThumbnailScaler",
    # Utils
    "calculate_thumbnail_dimensions",
    "is_supported",
    # Constants
    "SUPPORTED_MEDIA_TYPES",
    "MISSING_CONTENT_TYPE",
]
