# listing_media/services/image_pipeline/utils/image_utils.py
"""
Image Utility Functions

Decoding, encoding and geometry helpers shared by the compressor and the
thumbnail scaler. Every buffer and Pillow image opened here is closed on all
exit paths.
"""

from contextlib import contextmanager
from io import BytesIO
from typing import Iterator, Tuple

from PIL import Image

from ....exceptions import DecodeError, EncodeError, InvalidImageError
from .constants import THUMBNAIL_BACKGROUND_COLOR, WRITABLE_MODES

# Errors Pillow raises for unreadable, truncated or hostile input
_DECODE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)


@contextmanager
def open_image(data: bytes) -> Iterator[Image.Image]:
    """
    Decode image bytes and yield a fully loaded Pillow image.

    Args:
        data: Encoded image bytes

    Yields:
        Loaded image, closed again when the block exits

    Raises:
        DecodeError: If the bytes are not a readable image
    """
    with BytesIO(data) as buffer:
        try:
            image = Image.open(buffer)
        except _DECODE_ERRORS as e:
            raise DecodeError(f"Unable to identify image data: {e}") from e

        try:
            _load_pixels(image)
            yield image
        finally:
            image.close()


def _load_pixels(image: Image.Image) -> None:
    try:
        image.load()
    except _DECODE_ERRORS as e:
        raise DecodeError(f"Unable to decode image data: {e}") from e


def encode_image(image: Image.Image, pillow_format: str, **params) -> bytes:
    """
    Encode an image into a new byte string.

    Args:
        image: Image to write
        pillow_format: Pillow writer name (JPEG, PNG, ...)
        **params: Writer-specific options such as ``quality``

    Returns:
        Freshly encoded bytes

    Raises:
        EncodeError: If no writer exists or the writer fails
    """
    Image.init()
    if pillow_format.upper() not in Image.SAVE:
        raise EncodeError(f"No image writer available for format {pillow_format}")

    try:
        with BytesIO() as buffer:
            image.save(buffer, format=pillow_format, **params)
            return buffer.getvalue()
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"Failed to encode image as {pillow_format}: {e}") from e


def has_transparency(image: Image.Image) -> bool:
    """Check whether an image carries an alpha channel or a transparent palette entry."""
    return image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info


def flatten_transparency(image: Image.Image) -> Image.Image:
    """Composite an image onto an opaque white RGB background."""
    rgba = image.convert("RGBA")
    canvas = Image.new("RGB", rgba.size, THUMBNAIL_BACKGROUND_COLOR)
    canvas.paste(rgba, (0, 0), rgba)
    return canvas


def ensure_writable_mode(image: Image.Image, pillow_format: str) -> Image.Image:
    """
    Convert an image to a pixel mode the target writer can store.

    Transparent images headed for a writer without alpha support are
    flattened onto white rather than having their alpha dropped.
    """
    writable = WRITABLE_MODES.get(pillow_format.upper(), ("RGB",))
    if image.mode in writable:
        return image

    if has_transparency(image):
        if "RGBA" in writable:
            return image.convert("RGBA")
        return flatten_transparency(image)

    return image.convert("RGB")


def calculate_thumbnail_dimensions(
    source_size: Tuple[int, int], edge: int
) -> Tuple[int, int]:
    """
    Calculate thumbnail dimensions whose shorter side equals ``edge``.

    The larger of the two per-axis scale factors is applied to both axes, so
    the aspect ratio is preserved and nothing is cropped or letterboxed.

    Args:
        source_size: (width, height) of source image
        edge: Target length of the shorter side in pixels

    Returns:
        (width, height) of the scaled image

    Raises:
        InvalidImageError: If either source dimension is zero
    """
    source_width, source_height = source_size
    if source_width <= 0 or source_height <= 0:
        raise InvalidImageError(
            f"Image has degenerate dimensions {source_width}x{source_height}"
        )

    ratio = max(edge / source_width, edge / source_height)

    new_width = max(1, round(source_width * ratio))
    new_height = max(1, round(source_height * ratio))
    return (new_width, new_height)
