#!/usr/bin/env python3
# tests/conftest.py
"""
Pytest configuration and shared fixtures for listing media tests.

All images are built in memory with Pillow; nothing touches the filesystem.
"""

from io import BytesIO
from unittest.mock import MagicMock

import pytest
from PIL import Image, ImageDraw

from listing_media.config import ImagePipelineConfig
from listing_media.models import ImageRecord, RawUpload
from listing_media.services.image_pipeline import ImagePipeline, ImageStore


def encode(img: Image.Image, fmt: str, **params) -> bytes:
    """Encode a Pillow image into bytes."""
    buffer = BytesIO()
    img.save(buffer, format=fmt, **params)
    return buffer.getvalue()


def decode_size(data: bytes):
    """Return (width, height) and Pillow format of encoded bytes."""
    with Image.open(BytesIO(data)) as img:
        return img.size, img.format


def make_photo(size=(640, 480)) -> Image.Image:
    """Create a photo-like RGB image: smooth gradient, shapes and sensor noise."""
    width, height = size
    gradient = Image.linear_gradient("L").resize(size)
    noise = Image.effect_noise(size, 40)
    img = Image.merge("RGB", (gradient, noise, gradient.rotate(90).resize(size)))

    draw = ImageDraw.Draw(img)
    draw.ellipse(
        [width // 8, height // 8, width // 2, height // 2], fill=(200, 40, 40)
    )
    draw.rectangle(
        [width // 2, height // 2, width - width // 8, height - height // 8],
        fill=(30, 90, 200),
    )
    return img


def make_graphic(size=(640, 480)) -> Image.Image:
    """Create a flat-colour graphic (screenshots, logos) that deflates well."""
    width, height = size
    img = Image.new("RGB", size, color="white")
    draw = ImageDraw.Draw(img)
    draw.rectangle(
        [width // 8, height // 8, width - width // 8 - 1, height // 2], fill="blue"
    )
    draw.ellipse(
        [width // 4, height // 2, width // 2, height - height // 8 - 1], fill="green"
    )
    return img


def make_animated_gif(size=(64, 48), frames=3) -> bytes:
    """Create a small animated GIF."""
    colors = ["red", "green", "blue", "yellow"]
    images = [Image.new("RGB", size, color=colors[i % len(colors)]) for i in range(frames)]
    buffer = BytesIO()
    images[0].save(
        buffer,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=100,
        loop=0,
    )
    return buffer.getvalue()


@pytest.fixture
def jpeg_upload():
    """High quality photographic JPEG upload."""
    content = encode(make_photo(), "JPEG", quality=95)
    return RawUpload(content=content, content_type="image/jpeg", filename="photo.jpg")


@pytest.fixture
def png_upload():
    """Uncompressed PNG upload."""
    content = encode(make_graphic(), "PNG", compress_level=0)
    return RawUpload(content=content, content_type="image/png", filename="graphic.png")


@pytest.fixture
def bmp_upload():
    """BMP upload."""
    content = encode(make_graphic((120, 80)), "BMP")
    return RawUpload(content=content, content_type="image/bmp", filename="scan.bmp")


@pytest.fixture
def gif_upload():
    """Animated GIF upload."""
    return RawUpload(
        content=make_animated_gif(), content_type="image/gif", filename="anim.gif"
    )


@pytest.fixture
def text_upload():
    """Plain text masquerading as a photo upload."""
    return RawUpload(
        content=b"plain text", content_type="text/plain", filename="text.txt"
    )


@pytest.fixture
def pipeline_config():
    """Pipeline configuration with a small thumbnail edge."""
    return ImagePipelineConfig(thumbnail_edge_px=120, compression_max_workers=2)


@pytest.fixture
def mock_store():
    """Mock image store collaborator."""
    store = MagicMock(spec=ImageStore)
    store.find_resources_by_owner.return_value = [b"first", b"second"]
    store.find_by_owner.return_value = [
        ImageRecord(id=1, resource=b"first", is_default=True, owner_id=7),
        ImageRecord(id=2, resource=b"second", owner_id=7),
    ]
    return store


@pytest.fixture
def pipeline(pipeline_config, mock_store):
    """ImagePipeline wired to a mock store."""
    return ImagePipeline(config=pipeline_config, store=mock_store)
