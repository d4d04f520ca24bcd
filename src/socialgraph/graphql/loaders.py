from collections.abc import Sequence
from functools import partial

from bson import ObjectId
from strawberry.dataloader import DataLoader

from ..store import COLLECTION_COMMENTS, COLLECTION_POSTS, COLLECTION_USERS, Document
from ..store.base import EntityCollection, EntityStore


async def load_documents(
    collection: EntityCollection, keys: Sequence[ObjectId]
) -> list[Document | None]:
    """Batch load documents by ID with a single "id in set" query."""
    documents = await collection.find_many(dict.fromkeys(keys))
    documents_map = {document["_id"]: document for document in documents}
    return [documents_map.get(key) for key in keys]


class Loaders:
    """Request-scoped batching of reference lookups, one loader per collection.

    Caching is disabled: loaders only coalesce the lookups issued while the
    event loop resolves one level of the response.
    """

    def __init__(self, store: EntityStore):
        self.user_loader = DataLoader(load_fn=partial(load_documents, store.users), cache=False)
        self.post_loader = DataLoader(load_fn=partial(load_documents, store.posts), cache=False)
        self.comment_loader = DataLoader(
            load_fn=partial(load_documents, store.comments), cache=False
        )

    def for_collection(self, name: str) -> DataLoader[ObjectId, Document | None]:
        loaders = {
            COLLECTION_USERS: self.user_loader,
            COLLECTION_POSTS: self.post_loader,
            COLLECTION_COMMENTS: self.comment_loader,
        }
        return loaders[name]
