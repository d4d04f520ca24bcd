from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import COLLECTION_COMMENTS, COLLECTION_POSTS, COLLECTION_USERS, to_object_id
from ..context import get_store_from_info
from .common import delete_document, fetch_document, settable_fields, update_document
from .documents import comment_from_document, post_from_document, user_from_document
from .references import resolve_reference

if TYPE_CHECKING:
    from ..mutations.root import UpdateCommentInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)

COMMENT_UPDATABLE_FIELDS = ("text",)


# Query resolvers
async def resolve_comments(info: strawberry.Info) -> list[Comment]:
    documents = await get_store_from_info(info).comments.find_all()
    return [comment_from_document(document) for document in documents]


async def resolve_comment_by_id(info: strawberry.Info, id: str) -> Comment:
    document = await fetch_document(info, COLLECTION_COMMENTS, "Comment", id)
    return comment_from_document(document)


# Comment field resolvers
async def resolve_comment_author(comment: Comment, info: strawberry.Info) -> User:
    document = await resolve_reference(info, COLLECTION_USERS, "User", comment.author_id)
    return user_from_document(document)


async def resolve_comment_post(comment: Comment, info: strawberry.Info) -> Post:
    document = await resolve_reference(info, COLLECTION_POSTS, "Post", comment.post_id)
    return post_from_document(document)


# Mutation resolvers
async def create_comment(info: strawberry.Info, text: str, author: str, post: str) -> Comment:
    """
    Create a new comment.

    Neither the post's nor the author's ``comments`` list is updated.
    """
    document = {
        "text": text,
        "author": to_object_id(author),
        "post": to_object_id(post),
    }

    document["_id"] = await get_store_from_info(info).comments.insert_one(document)

    logger.info("Comment created", id=str(document["_id"]), author=author, post=post)
    return comment_from_document(document)


async def update_comment(info: strawberry.Info, id: str, input: UpdateCommentInput) -> Comment:
    fields = settable_fields(input, COMMENT_UPDATABLE_FIELDS)
    document = await update_document(info, COLLECTION_COMMENTS, "Comment", id, fields)
    return comment_from_document(document)


async def delete_comment(info: strawberry.Info, id: str) -> bool:
    return await delete_document(info, COLLECTION_COMMENTS, "Comment", id)
