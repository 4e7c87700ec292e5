"""
Routers package
"""

# Import all routers to make them available
from . import health
from . import analyze
from . import prepare

__all__ = [
    'health',
    'analyze',
    'prepare',
]
