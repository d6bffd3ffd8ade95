# listing_media/services/image_pipeline/services/__init__.py
"""
Image Pipeline Services

- TypeValidator: media type gate for upload batches
- ImageStore: persistence collaborator protocol
"""

from .image_store import ImageStore
from .type_validator import TypeValidator

__all__ = [
    "TypeValidator",
    "ImageStore",
]
