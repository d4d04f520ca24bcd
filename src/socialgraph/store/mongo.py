"""MongoDB document store using the pymongo async client."""

from collections.abc import Iterable
from typing import Any

from bson import ObjectId
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection

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


class MongoCollection(EntityCollection):
    def __init__(self, collection: AsyncCollection):
        self.name = collection.name
        self._collection = collection

    async def find_one(self, entity_id: ObjectId) -> Document | None:
        return await self._collection.find_one({"_id": entity_id})

    async def find_many(self, entity_ids: Iterable[ObjectId]) -> list[Document]:
        cursor = self._collection.find({"_id": {"$in": list(entity_ids)}})
        return await cursor.to_list(length=None)

    async def find_all(self) -> list[Document]:
        cursor = self._collection.find()
        return await cursor.to_list(length=None)

    async def find_by(self, field: str, value: Any) -> Document | None:
        return await self._collection.find_one({field: value})

    async def insert_one(self, document: Document) -> ObjectId:
        # insert_one adds _id to the dict it is given
        result = await self._collection.insert_one(dict(document))
        return result.inserted_id

    async def update_one(self, entity_id: ObjectId, fields: Document) -> Document | None:
        return await self._collection.find_one_and_update(
            {"_id": entity_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    async def delete_one(self, entity_id: ObjectId) -> int:
        result = await self._collection.delete_one({"_id": entity_id})
        return result.deleted_count


class MongoEntityStore(EntityStore):
    """Entity store over one MongoDB database."""

    def __init__(self, client: AsyncMongoClient, database_name: str):
        self.client = client
        self.database_name = database_name

        database = client[database_name]
        self.users = MongoCollection(database[COLLECTION_USERS])
        self.posts = MongoCollection(database[COLLECTION_POSTS])
        self.comments = MongoCollection(database[COLLECTION_COMMENTS])

    @classmethod
    def from_url(cls, url: str, database_name: str) -> "MongoEntityStore":
        """Create a store with a new client. Connections are opened lazily."""
        client: AsyncMongoClient = AsyncMongoClient(url)
        logger.info("MongoDB client created", database=database_name)
        return cls(client, database_name)

    async def ping(self) -> None:
        await self.client.admin.command("ping")

    async def close(self) -> None:
        await self.client.close()
        logger.info("MongoDB client closed", database=self.database_name)
