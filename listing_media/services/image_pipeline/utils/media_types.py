# listing_media/services/image_pipeline/utils/media_types.py
"""
Supported media type registry.

The allow-list is built once at import from ``SupportedMediaType`` and never
changes afterwards. Lookups are case-sensitive.
"""

from typing import Dict, FrozenSet, Optional

from ....enums import SupportedMediaType

SUPPORTED_MEDIA_TYPES: FrozenSet[str] = frozenset(
    media_type.value for media_type in SupportedMediaType
)

# Pillow codec name used to write each declared media type
_PILLOW_FORMATS: Dict[str, str] = {
    SupportedMediaType.JPEG.value: "JPEG",
    SupportedMediaType.PNG.value: "PNG",
    SupportedMediaType.GIF.value: "GIF",
    SupportedMediaType.BMP.value: "BMP",
}

_MEDIA_TYPES_BY_FORMAT: Dict[str, str] = {
    pillow_format: media_type for media_type, pillow_format in _PILLOW_FORMATS.items()
}
# Camera JPEGs with an MPF block are identified by Pillow as MPO
_MEDIA_TYPES_BY_FORMAT["MPO"] = SupportedMediaType.JPEG.value


def is_supported(type_label: Optional[str]) -> bool:
    """Return True when the declared type label is on the allow-list."""
    return type_label in SUPPORTED_MEDIA_TYPES


def pillow_format_for(media_type: Optional[str]) -> Optional[str]:
    """
    Get the Pillow writer name for a declared media type.

    Args:
        media_type: Canonical media type such as ``image/png``

    Returns:
        Pillow format name, or None for types outside the allow-list
    """
    if media_type is None:
        return None
    return _PILLOW_FORMATS.get(media_type)


def media_type_for_format(pillow_format: Optional[str]) -> Optional[str]:
    """Reverse lookup from a sniffed Pillow format to its canonical media type."""
    if pillow_format is None:
        return None
    return _MEDIA_TYPES_BY_FORMAT.get(pillow_format.upper())
