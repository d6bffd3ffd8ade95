"""
Listing media: ingestion pipeline for marketplace listing photos.
"""

from .exceptions import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    InvalidImageError,
    ListingMediaError,
    UnsupportedTypeError,
)
from .models import ImageDto, ImageRecord, RawUpload
from .services.image_pipeline import ImagePipeline, create_image_pipeline

__all__ = [
    "ImagePipeline",
    "create_image_pipeline",
    "RawUpload",
    "ImageRecord",
    "ImageDto",
    "ListingMediaError",
    "UnsupportedTypeError",
    "DecodeError",
    "InvalidImageError",
    "EncodeError",
    "ConfigurationError",
]
