from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import (
    COLLECTION_COMMENTS,
    COLLECTION_POSTS,
    COLLECTION_USERS,
    to_object_id,
    to_object_ids,
)
from ..context import get_store_from_info
from .common import delete_document, fetch_document, settable_fields, update_document
from .documents import comment_from_document, post_from_document, user_from_document
from .references import resolve_reference, resolve_references

if TYPE_CHECKING:
    from ..mutations.root import UpdatePostInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)

POST_UPDATABLE_FIELDS = ("content",)


# Query resolvers
async def resolve_posts(info: strawberry.Info) -> list[Post]:
    documents = await get_store_from_info(info).posts.find_all()
    return [post_from_document(document) for document in documents]


async def resolve_post_by_id(info: strawberry.Info, id: str) -> Post:
    document = await fetch_document(info, COLLECTION_POSTS, "Post", id)
    return post_from_document(document)


# Post field resolvers
async def resolve_post_author(post: Post, info: strawberry.Info) -> User:
    document = await resolve_reference(info, COLLECTION_USERS, "User", post.author_id)
    return user_from_document(document)


async def resolve_post_comments(post: Post, info: strawberry.Info) -> list[Comment]:
    documents = await resolve_references(info, COLLECTION_COMMENTS, post.comment_ids)
    return [comment_from_document(document) for document in documents]


async def resolve_post_likes(post: Post, info: strawberry.Info) -> list[User]:
    documents = await resolve_references(info, COLLECTION_USERS, post.like_ids)
    return [user_from_document(document) for document in documents]


# Mutation resolvers
async def create_post(
    info: strawberry.Info,
    content: str,
    author: str,
    comments: list[str] | None = None,
    likes: list[str] | None = None,
) -> Post:
    """
    Create a new post.

    The author's ``posts`` list is not touched; linking the post back to its
    author is up to the caller.
    """
    document = {
        "content": content,
        "author": to_object_id(author),
        "comments": to_object_ids(comments),
        "likes": to_object_ids(likes),
    }

    document["_id"] = await get_store_from_info(info).posts.insert_one(document)

    logger.info("Post created", id=str(document["_id"]), author=author)
    return post_from_document(document)


async def update_post(info: strawberry.Info, id: str, input: UpdatePostInput) -> Post:
    fields = settable_fields(input, POST_UPDATABLE_FIELDS)
    document = await update_document(info, COLLECTION_POSTS, "Post", id, fields)
    return post_from_document(document)


async def delete_post(info: strawberry.Info, id: str) -> bool:
    return await delete_document(info, COLLECTION_POSTS, "Post", id)
