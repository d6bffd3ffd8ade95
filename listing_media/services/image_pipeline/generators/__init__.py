# listing_media/services/image_pipeline/generators/__init__.py
"""
Image Generation Components

- ImageCompressor: fixed-quality recompression of single uploads
- BatchCompressor: order-preserving concurrent recompression of batches
- ThumbnailScaler: aspect-preserving list-view thumbnails
"""

from .batch_compressor import BatchCompressor
from .compressor import ImageCompressor
from .thumbnail_scaler import ThumbnailScaler

__all__ = [
    "ImageCompressor",
    "BatchCompressor",
    "ThumbnailScaler",
]
