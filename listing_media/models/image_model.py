# listing_media/models/image_model.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RawUpload(BaseModel):
    """One uploaded photo as received from the HTTP boundary."""

    content: bytes = Field(..., description="Raw image bytes exactly as uploaded")
    content_type: Optional[str] = Field(
        None, description="Media type declared by the client (may be missing)"
    )
    filename: Optional[str] = Field(None, description="Original client filename")

    model_config = ConfigDict(frozen=True)


class ImageRecord(BaseModel):
    """Stored listing photo as returned by the image store"""

    id: int = Field(..., ge=0, description="Image ID")
    resource: bytes = Field(..., description="Encoded image bytes")
    is_default: bool = Field(
        default=False, description="Whether this is the listing's cover image"
    )
    owner_id: int = Field(..., ge=0, description="ID of the owning listing")

    model_config = ConfigDict(frozen=True, from_attributes=True)


class ImageDto(BaseModel):
    """Read projection of a listing photo"""

    id: int
    resource: bytes

    model_config = ConfigDict(frozen=True, from_attributes=True)
