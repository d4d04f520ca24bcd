"""
Document store module for the socialgraph backend
"""

from .base import (
    COLLECTION_COMMENTS,
    COLLECTION_POSTS,
    COLLECTION_USERS,
    Document,
    EntityCollection,
    EntityStore,
    to_object_id,
    to_object_ids,
)
from .connection import close_store, create_store, get_store, init_store, reset_store

__all__ = [
    "COLLECTION_COMMENTS",
    "COLLECTION_POSTS",
    "COLLECTION_USERS",
    "Document",
    "EntityCollection",
    "EntityStore",
    "close_store",
    "create_store",
    "get_store",
    "init_store",
    "reset_store",
    "to_object_id",
    "to_object_ids",
]
