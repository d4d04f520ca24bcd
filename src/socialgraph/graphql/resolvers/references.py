"""
Resolution of identifier references into stored documents.

Entities point at each other by id only. A relationship field is resolved
when a client asks for it, after the parent object has been materialized:

- a single reference must exist; a missing target raises ``NotFoundError``
- a multi reference is fetched with one "id in set" query; ids that match no
  document are dropped, so the result may be shorter than the stored list

Resolution never writes to the store. Without request loaders every call is
its own store round-trip; with loaders, lookups issued together are batched
per collection.
"""

from collections.abc import Sequence

import strawberry
from bson import ObjectId

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import Document
from ..context import get_loaders_from_info, get_store_from_info

logger = get_logger(__name__)


async def resolve_reference(
    info: strawberry.Info, collection: str, entity_type: str, entity_id: ObjectId
) -> Document:
    """Fetch the one document a single-reference field points at."""
    loaders = get_loaders_from_info(info)
    if loaders is not None:
        document = await loaders.for_collection(collection).load(entity_id)
    else:
        document = await get_store_from_info(info).collection(collection).find_one(entity_id)

    if document is None:
        logger.info("Referenced entity not found", entity_type=entity_type, id=str(entity_id))
        raise NotFoundError(entity_type, str(entity_id))

    return document


async def resolve_references(
    info: strawberry.Info, collection: str, entity_ids: Sequence[ObjectId]
) -> list[Document]:
    """Fetch every live document a multi-reference field points at."""
    if not entity_ids:
        return []

    loaders = get_loaders_from_info(info)
    if loaders is not None:
        # $in semantics: each matching document once
        loaded = await loaders.for_collection(collection).load_many(list(dict.fromkeys(entity_ids)))
        documents = [document for document in loaded if document is not None]
    else:
        documents = await get_store_from_info(info).collection(collection).find_many(entity_ids)

    missing = len(set(entity_ids)) - len(documents)
    if missing:
        logger.debug("Dangling references omitted", collection=collection, missing=missing)

    return documents
