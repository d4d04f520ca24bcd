from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import UniquenessViolationError
from ...logging import get_logger
from ...security import get_password_hash_async
from ...store import COLLECTION_COMMENTS, COLLECTION_POSTS, COLLECTION_USERS, to_object_ids
from ..context import get_store_from_info
from .common import delete_document, fetch_document, settable_fields, update_document
from .documents import comment_from_document, post_from_document, user_from_document
from .references import resolve_references

if TYPE_CHECKING:
    from ..mutations.root import UpdateUserInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)

USER_UPDATABLE_FIELDS = ("name", "password", "email")


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    documents = await get_store_from_info(info).users.find_all()
    return [user_from_document(document) for document in documents]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User:
    document = await fetch_document(info, COLLECTION_USERS, "User", id)
    return user_from_document(document)


# User field resolvers
async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    documents = await resolve_references(info, COLLECTION_POSTS, user.post_ids)
    return [post_from_document(document) for document in documents]


async def resolve_user_comments(user: User, info: strawberry.Info) -> list[Comment]:
    documents = await resolve_references(info, COLLECTION_COMMENTS, user.comment_ids)
    return [comment_from_document(document) for document in documents]


async def resolve_user_liked_posts(user: User, info: strawberry.Info) -> list[Post]:
    documents = await resolve_references(info, COLLECTION_POSTS, user.liked_post_ids)
    return [post_from_document(document) for document in documents]


# Mutation resolvers
async def create_user(
    info: strawberry.Info,
    name: str,
    password: str,
    email: str,
    posts: list[str] | None = None,
    comments: list[str] | None = None,
    liked_posts: list[str] | None = None,
) -> User:
    """
    Create a new user.

    Email uniqueness is checked before the insert. The check and the insert are
    separate store calls, so two concurrent creates with the same email can
    both succeed.
    """
    document = {
        "name": name,
        "email": email,
        "posts": to_object_ids(posts),
        "comments": to_object_ids(comments),
        "likedPosts": to_object_ids(liked_posts),
    }

    store = get_store_from_info(info)
    if await store.users.find_by("email", email) is not None:
        logger.info("User email already exists", email=email)
        raise UniquenessViolationError("User", "email", email)

    document["password"] = await get_password_hash_async(password)
    document["_id"] = await store.users.insert_one(document)

    logger.info("User created", id=str(document["_id"]))
    return user_from_document(document)


async def update_user(info: strawberry.Info, id: str, input: UpdateUserInput) -> User:
    """
    Update a user's scalar fields.

    A new password is hashed before it is stored. Email uniqueness is not
    re-checked here.
    """
    fields = settable_fields(input, USER_UPDATABLE_FIELDS)
    if "password" in fields:
        fields["password"] = await get_password_hash_async(fields["password"])

    document = await update_document(info, COLLECTION_USERS, "User", id, fields)
    return user_from_document(document)


async def delete_user(info: strawberry.Info, id: str) -> bool:
    return await delete_document(info, COLLECTION_USERS, "User", id)
