"""
socialgraph backend
Users, posts and comments served over GraphQL from a document store
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
