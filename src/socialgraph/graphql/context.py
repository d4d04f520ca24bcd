"""
Per-request GraphQL context
"""

from typing import Any

import strawberry
from fastapi import Request

from ..config import settings
from ..store import EntityStore, get_store
from .loaders import Loaders


def build_context(
    store: EntityStore | None = None,
    request: Request | None = None,
    batch_references: bool | None = None,
) -> dict[str, Any]:
    """Build the context dict handed to every resolver of one request."""
    store = store or get_store()
    if batch_references is None:
        batch_references = settings.batch_references

    return {
        "request": request,
        "store": store,
        "loaders": Loaders(store) if batch_references else None,
    }


def get_store_from_info(info: strawberry.Info) -> EntityStore:
    return info.context["store"]


def get_loaders_from_info(info: strawberry.Info) -> Loaders | None:
    return info.context.get("loaders")
