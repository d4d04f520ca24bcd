"""Core document store interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from ..errors import InvalidIdentifierError

# Collection names (schemaless store, so these are the whole "schema")
COLLECTION_USERS = "users"
COLLECTION_POSTS = "posts"
COLLECTION_COMMENTS = "comments"

Document = dict[str, Any]


def to_object_id(value: str | ObjectId) -> ObjectId:
    """Convert a boundary identifier string to the store's native identifier."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(str(value)) from e


def to_object_ids(values: Iterable[str | ObjectId] | None) -> list[ObjectId]:
    """Convert a list of identifiers, preserving order and duplicates."""
    if not values:
        return []
    return [to_object_id(value) for value in values]


class EntityCollection(ABC):
    """Identifier-keyed accessor over one collection of documents.

    Documents are plain dicts keyed by ``_id``. Reference attributes are stored
    as ObjectIds (or lists of them); the collection never interprets them.
    """

    name: str

    @abstractmethod
    async def find_one(self, entity_id: ObjectId) -> Document | None:
        """Return the document with this id, or None."""
        pass

    @abstractmethod
    async def find_many(self, entity_ids: Iterable[ObjectId]) -> list[Document]:
        """Return every document whose id is in ``entity_ids``.

        Ids with no matching document are skipped. Results come back in store
        order, not in the order of ``entity_ids``.
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Document]:
        """Return all documents in store order."""
        pass

    @abstractmethod
    async def find_by(self, field: str, value: Any) -> Document | None:
        """Return the first document whose ``field`` equals ``value``."""
        pass

    @abstractmethod
    async def insert_one(self, document: Document) -> ObjectId:
        """Insert a document and return its newly assigned id."""
        pass

    @abstractmethod
    async def update_one(self, entity_id: ObjectId, fields: Document) -> Document | None:
        """Set ``fields`` on the matching document and return it post-merge.

        Returns None when no document has this id.
        """
        pass

    @abstractmethod
    async def delete_one(self, entity_id: ObjectId) -> int:
        """Delete the matching document and return the deleted count (0 or 1)."""
        pass


class EntityStore(ABC):
    """The three collections of the social graph behind one connection."""

    users: EntityCollection
    posts: EntityCollection
    comments: EntityCollection

    def collection(self, name: str) -> EntityCollection:
        """Look up a collection by name."""
        collections = {
            COLLECTION_USERS: self.users,
            COLLECTION_POSTS: self.posts,
            COLLECTION_COMMENTS: self.comments,
        }
        try:
            return collections[name]
        except KeyError:
            raise ValueError(f"Unknown collection: {name}") from None

    @abstractmethod
    async def ping(self) -> None:
        """Round-trip to the store; raises if it is unreachable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
        pass
