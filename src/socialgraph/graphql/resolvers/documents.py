"""Conversion from stored documents to GraphQL types."""

from ...store import Document
from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


def user_from_document(document: Document) -> User:
    return User(
        id=str(document["_id"]),
        name=document["name"],
        email=document["email"],
        password=document["password"],
        post_ids=list(document.get("posts") or []),
        comment_ids=list(document.get("comments") or []),
        liked_post_ids=list(document.get("likedPosts") or []),
    )


def post_from_document(document: Document) -> Post:
    return Post(
        id=str(document["_id"]),
        content=document["content"],
        author_id=document["author"],
        comment_ids=list(document.get("comments") or []),
        like_ids=list(document.get("likes") or []),
    )


def comment_from_document(document: Document) -> Comment:
    return Comment(
        id=str(document["_id"]),
        text=document["text"],
        author_id=document["author"],
        post_id=document["post"],
    )
