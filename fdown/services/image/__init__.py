"""
Image services module.

Contains image URL extraction and normalization.
"""

from fdown.services.image.url_transform import (
    MAX_RESOLUTION,
    extract_image_url,
    normalize_image_url,
)

__all__ = [
    'MAX_RESOLUTION',
    'extract_image_url',
    'normalize_image_url',
]
