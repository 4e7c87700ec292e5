"""
Services package
"""

# Import all services to make them available
from . import ocr_service
from . import extraction_service
from . import image_processing_pipeline

__all__ = [
    'ocr_service',
    'extraction_service',
    'image_processing_pipeline',
]
