from .image_model import ImageDto, ImageRecord, RawUpload

__all__ = [
    "RawUpload",
    "ImageRecord",
    "ImageDto",
]
