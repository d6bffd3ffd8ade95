# listing_media/services/image_pipeline/generators/thumbnail_scaler.py
"""
Thumbnail Scaler Component

Produces list-view thumbnails from stored listing photos. The shorter side of
the source is mapped exactly onto the configured edge and the aspect ratio is
kept, so thumbnails are never cropped or letterboxed.
"""

from typing import Tuple

from PIL import Image

from ....constants import DEFAULT_THUMBNAIL_EDGE_PX
from ....exceptions import ConfigurationError, EncodeError
from ..utils.constants import THUMBNAIL_BACKGROUND_COLOR
from ..utils.image_utils import (
    calculate_thumbnail_dimensions,
    encode_image,
    has_transparency,
    open_image,
)
from ..utils.media_types import media_type_for_format, pillow_format_for


class ThumbnailScaler:
    """Component responsible for resampling stored images to thumbnail size."""

    def __init__(self, edge: int = DEFAULT_THUMBNAIL_EDGE_PX):
        """
        Initialize thumbnail scaler.

        Args:
            edge: Length in pixels the shorter image side is scaled to
        """
        if edge < 1:
            raise ConfigurationError(f"Thumbnail edge must be positive, got {edge}")
        self.edge = edge

    def target_size(self, source_size: Tuple[int, int]) -> Tuple[int, int]:
        return calculate_thumbnail_dimensions(source_size, self.edge)

    def scale(self, image_bytes: bytes) -> bytes:
        """
        Scale stored image bytes to thumbnail size.

        The output codec is sniffed from the bytes themselves; stored images
        carry no reliable media type label.

        Args:
            image_bytes: Encoded image as kept by the image store

        Returns:
            New encoded thumbnail bytes in the same format family

        Raises:
            DecodeError: If the bytes cannot be decoded
            InvalidImageError: If the image has a zero dimension
            EncodeError: If the detected format has no registered writer
        """
        with open_image(image_bytes) as source:
            new_size = self.target_size(source.size)

            pillow_format = pillow_format_for(media_type_for_format(source.format))
            if pillow_format is None:
                raise EncodeError(
                    f"No image writer registered for detected format {source.format}"
                )

            thumbnail = self._resample(source, new_size)
            return encode_image(thumbnail, pillow_format)

    def _resample(self, source: Image.Image, size: Tuple[int, int]) -> Image.Image:
        """
        Resize onto a white canvas of exactly ``size``.

        The canvas is filled first so rounding gaps and transparent pixels
        come out white.
        """
        if has_transparency(source):
            resized = source.convert("RGBA").resize(size, Image.Resampling.LANCZOS)
            mask = resized
        else:
            resized = source.convert("RGB").resize(size, Image.Resampling.LANCZOS)
            mask = None

        canvas = Image.new("RGB", size, THUMBNAIL_BACKGROUND_COLOR)
        canvas.paste(resized, (0, 0), mask)
        return canvas
