"""
Post GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    content: str

    author_id: strawberry.Private[ObjectId]
    comment_ids: strawberry.Private[list[ObjectId]]
    like_ids: strawberry.Private[list[ObjectId]]

    @strawberry.field
    async def author(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")]:
        """Get the author of this post."""
        from ..resolvers.post import resolve_post_author

        return await resolve_post_author(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get the comments listed on this post."""
        from ..resolvers.post import resolve_post_comments

        return await resolve_post_comments(self, info)

    @strawberry.field
    async def likes(
        self, info: strawberry.Info
    ) -> list[Annotated["User", strawberry.lazy(".user")]]:
        """Get the users who liked this post."""
        from ..resolvers.post import resolve_post_likes

        return await resolve_post_likes(self, info)
