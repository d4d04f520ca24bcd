"""Lookup, update and delete helpers shared by the entity resolvers."""

from typing import Any

import strawberry

from ...errors import InvalidIdentifierError, NotFoundError
from ...logging import get_logger
from ...store import Document, to_object_id
from ..context import get_store_from_info

logger = get_logger(__name__)


def settable_fields(input: Any, names: tuple[str, ...]) -> dict[str, Any]:
    """Collect the input fields a client actually supplied.

    Unset fields and explicit nulls are skipped, so they stay untouched in
    the stored document.
    """
    fields = {}
    for name in names:
        value = getattr(input, name, strawberry.UNSET)
        if value is strawberry.UNSET or value is None:
            continue
        fields[name] = value
    return fields


async def fetch_document(
    info: strawberry.Info, collection: str, entity_type: str, id: str
) -> Document:
    """Fetch one document by its boundary id, raising NotFoundError if absent."""
    store = get_store_from_info(info)
    document = await store.collection(collection).find_one(to_object_id(id))
    if document is None:
        logger.info(f"{entity_type} not found", id=id)
        raise NotFoundError(entity_type, id)
    return document


async def update_document(
    info: strawberry.Info, collection: str, entity_type: str, id: str, fields: dict[str, Any]
) -> Document:
    """Apply a partial set to one document and return it post-merge."""
    entity_id = to_object_id(id)
    if not fields:
        return await fetch_document(info, collection, entity_type, id)

    store = get_store_from_info(info)
    document = await store.collection(collection).update_one(entity_id, fields)
    if document is None:
        logger.info(f"{entity_type} not found for update", id=id)
        raise NotFoundError(entity_type, id)

    logger.info(f"{entity_type} updated", id=id, fields=sorted(fields))
    return document


async def delete_document(info: strawberry.Info, collection: str, entity_type: str, id: str) -> bool:
    """Delete one document. References held by other documents are left as-is."""
    try:
        entity_id = to_object_id(id)
    except InvalidIdentifierError:
        # Nothing can be stored under an unparseable id
        logger.info(f"{entity_type} not found for delete", id=id)
        return False

    store = get_store_from_info(info)
    deleted_count = await store.collection(collection).delete_one(entity_id)
    if deleted_count == 1:
        logger.info(f"{entity_type} deleted", id=id)
    return deleted_count == 1
