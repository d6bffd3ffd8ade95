# listing_media/services/image_pipeline/generators/compressor.py
"""
Image Compressor Component

Re-encodes uploaded listing photos at a fixed low quality to bound storage
and bandwidth cost. GIF uploads pass through untouched so animations survive.
"""

from typing import Any, Dict, List, Optional, Sequence

from ....constants import COMPRESSION_QUALITY
from ....enums import SupportedMediaType
from ....exceptions import EncodeError
from ....models import RawUpload
from ..services.type_validator import TypeValidator
from ..utils.constants import (
    JPEG_MAX_QUALITY,
    JPEG_MIN_QUALITY,
    JPEG_QUALITY_SCALE,
    PNG_MAX_COMPRESS_LEVEL,
)
from ..utils.image_utils import encode_image, ensure_writable_mode, open_image
from ..utils.media_types import pillow_format_for


class ImageCompressor:
    """
    Component responsible for recompressing single uploads.

    Stateless apart from its immutable quality setting, so one instance can
    serve many threads at once.
    """

    def __init__(
        self,
        quality: float = COMPRESSION_QUALITY,
        validator: Optional[TypeValidator] = None,
    ):
        """
        Initialize image compressor.

        Args:
            quality: Compression quality, 0.0 (worst) to 1.0 (best)
            validator: Media type gate (a fresh TypeValidator by default)
        """
        self.quality = max(0.0, min(1.0, quality))
        self.validator = validator or TypeValidator()

    @property
    def jpeg_quality(self) -> int:
        """Quality mapped onto Pillow's JPEG scale."""
        return max(
            JPEG_MIN_QUALITY,
            min(JPEG_MAX_QUALITY, round(self.quality * JPEG_QUALITY_SCALE)),
        )

    @property
    def png_compress_level(self) -> int:
        """Deflate level for PNG; lower quality means harder compression."""
        return int(PNG_MAX_COMPRESS_LEVEL * (1 - self.quality))

    def compress(self, upload: RawUpload) -> bytes:
        """
        Validate and recompress a single upload.

        Raises:
            UnsupportedTypeError: If the declared type is not allowed
            DecodeError: If the bytes cannot be decoded
            EncodeError: If no writer can produce the output
        """
        self.validator.validate([upload])
        return self.compress_validated(upload)

    def compress_all(self, uploads: Sequence[RawUpload]) -> List[bytes]:
        """
        Validate the whole batch, then recompress each upload in input order.

        Nothing is compressed when any upload has an unsupported type.
        """
        self.validator.validate(uploads)
        return [self.compress_validated(upload) for upload in uploads]

    def compress_validated(self, upload: RawUpload) -> bytes:
        """
        Recompress an upload whose type has already passed validation.

        Args:
            upload: Upload to recompress

        Returns:
            New encoded bytes, or the original bytes for GIF and untyped uploads
        """
        content_type = upload.content_type
        if content_type is None or content_type == SupportedMediaType.GIF.value:
            return upload.content

        pillow_format = pillow_format_for(content_type)
        if pillow_format is None:
            raise EncodeError(f"No image writer registered for {content_type}")

        with open_image(upload.content) as source:
            try:
                writable = ensure_writable_mode(source, pillow_format)
            except ValueError as e:
                raise EncodeError(
                    f"Cannot convert {source.mode} image for {pillow_format}: {e}"
                ) from e
            return encode_image(
                writable, pillow_format, **self.writer_params(pillow_format)
            )

    def writer_params(self, pillow_format: str) -> Dict[str, Any]:
        """
        Get writer options for a codec.

        Codecs without a quality knob are written at their defaults.
        """
        if pillow_format == "JPEG":
            return {"quality": self.jpeg_quality, "optimize": True}
        if pillow_format == "PNG":
            return {"compress_level": self.png_compress_level}
        return {}
