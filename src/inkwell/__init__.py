"""
Inkwell
GraphQL resolution layer over in-memory authors, posts and comments
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
