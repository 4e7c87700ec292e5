"""
Pydantic schemas for API request/response validation
"""
from .extraction import ExtractionRequest, ExtractionResponse
from .image import EmbeddableImage, PreparedImage, PrepareResponse
from .common import ErrorResponse

__all__ = [
    # Extraction
    "ExtractionRequest",
    "ExtractionResponse",
    # Image
    "EmbeddableImage",
    "PreparedImage",
    "PrepareResponse",
    # Common
    "ErrorResponse",
]
