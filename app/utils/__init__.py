"""
Utilities package
"""

from .helpers import (
    is_image_mime_type, parse_data_url, prepare_image, resize_image,
    MAX_IMAGE_DIMENSION, JPEG_QUALITY
)

__all__ = [
    'is_image_mime_type',
    'parse_data_url',
    'prepare_image',
    'resize_image',
    'MAX_IMAGE_DIMENSION',
    'JPEG_QUALITY',
]
