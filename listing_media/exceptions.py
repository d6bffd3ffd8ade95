# listing_media/exceptions.py
"""
Custom exceptions for the listing media pipeline.

Centralized location for all custom exception classes. Each class carries the
HTTP status the web layer answers with when the error reaches a client.
"""

from typing import Iterable


class ListingMediaError(Exception):
    """Base exception for all listing media errors."""

    status_code: int = 500


class UnsupportedTypeError(ListingMediaError):
    """One or more uploads declared an encoding outside the allow-list."""

    status_code = 415

    def __init__(self, offending_types: Iterable[str]):
        self.offending_types = frozenset(offending_types)
        super().__init__(
            "Received unsupported image types: "
            + ", ".join(sorted(self.offending_types))
        )


class DecodeError(ListingMediaError):
    """Image bytes are malformed, truncated or not an image at all."""

    status_code = 406


class InvalidImageError(ListingMediaError):
    """Decoded image has degenerate geometry (zero width or height)."""

    status_code = 422


class EncodeError(ListingMediaError):
    """No codec writer could produce output for an accepted image."""

    pass


class ConfigurationError(ListingMediaError):
    """Custom exception for configuration and validation errors."""

    pass
