# listing_media/services/image_pipeline/utils/constants.py
"""
Image Pipeline Constants
"""

# Placeholder reported for uploads that declared no media type at all
MISSING_CONTENT_TYPE = "<missing>"

# Canvas fill behind scaled thumbnails (also flattens transparency)
THUMBNAIL_BACKGROUND_COLOR = (255, 255, 255)

# JPEG quality on Pillow's integer scale (1-95)
JPEG_QUALITY_SCALE = 100
JPEG_MIN_QUALITY = 1
JPEG_MAX_QUALITY = 95

# PNG deflate levels (0 = store, 9 = smallest)
PNG_MAX_COMPRESS_LEVEL = 9

# Pixel modes each writer can store without conversion
WRITABLE_MODES = {
    "JPEG": ("RGB", "L", "CMYK"),
    "PNG": ("1", "L", "LA", "P", "RGB", "RGBA", "I", "I;16"),
    "GIF": ("1", "L", "P", "RGB", "RGBA"),
    "BMP": ("1", "L", "P", "RGB"),
}
