"""
Domain logic package
"""

from .exceptions import (
    ExtractorError, ConfigurationError, ImageValidationError,
    ImageProcessingError, UpstreamError, UnexpectedError, InvalidTransitionError
)
from .prompts import DEFAULT_USER_PROMPT, resolve_user_prompt

__all__ = [
    'ExtractorError',
    'ConfigurationError',
    'ImageValidationError',
    'ImageProcessingError',
    'UpstreamError',
    'UnexpectedError',
    'InvalidTransitionError',
    'DEFAULT_USER_PROMPT',
    'resolve_user_prompt',
]
