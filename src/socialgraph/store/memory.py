"""
In-process document store.

Keeps each collection in an insertion-ordered dict, which gives the same
"natural order" semantics MongoDB exposes for unsorted finds. Documents are
deep-copied on the way in and out so callers never share state with the store.
"""

import copy
from collections.abc import Iterable
from typing import Any

from bson import ObjectId

from ..logging import get_logger
from .base import (
    COLLECTION_COMMENTS,
    COLLECTION_POSTS,
    COLLECTION_USERS,
    Document,
    EntityCollection,
    EntityStore,
)

logger = get_logger(__name__)


class InMemoryCollection(EntityCollection):
    def __init__(self, name: str):
        self.name = name
        self._documents: dict[ObjectId, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    async def find_one(self, entity_id: ObjectId) -> Document | None:
        document = self._documents.get(entity_id)
        return copy.deepcopy(document) if document is not None else None

    async def find_many(self, entity_ids: Iterable[ObjectId]) -> list[Document]:
        wanted = set(entity_ids)
        return [
            copy.deepcopy(document)
            for entity_id, document in self._documents.items()
            if entity_id in wanted
        ]

    async def find_all(self) -> list[Document]:
        return [copy.deepcopy(document) for document in self._documents.values()]

    async def find_by(self, field: str, value: Any) -> Document | None:
        for document in self._documents.values():
            if document.get(field) == value:
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document: Document) -> ObjectId:
        stored = copy.deepcopy(document)
        entity_id = stored.get("_id") or ObjectId()
        if entity_id in self._documents:
            raise ValueError(f"Duplicate _id {entity_id} in collection {self.name}")
        stored["_id"] = entity_id
        self._documents[entity_id] = stored
        return entity_id

    async def update_one(self, entity_id: ObjectId, fields: Document) -> Document | None:
        document = self._documents.get(entity_id)
        if document is None:
            return None
        document.update(copy.deepcopy(fields))
        return copy.deepcopy(document)

    async def delete_one(self, entity_id: ObjectId) -> int:
        if self._documents.pop(entity_id, None) is None:
            return 0
        return 1


class InMemoryEntityStore(EntityStore):
    """Entity store backed by process memory. Data is lost on restart."""

    def __init__(self):
        self.users = InMemoryCollection(COLLECTION_USERS)
        self.posts = InMemoryCollection(COLLECTION_POSTS)
        self.comments = InMemoryCollection(COLLECTION_COMMENTS)
        logger.info("Using in-memory document store")

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        return None
