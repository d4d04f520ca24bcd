"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    password: str = strawberry.field(description="bcrypt hash of the user's password")

    # Stored reference ids, resolved on demand by the fields below
    post_ids: strawberry.Private[list[ObjectId]]
    comment_ids: strawberry.Private[list[ObjectId]]
    liked_post_ids: strawberry.Private[list[ObjectId]]

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Get the posts listed on this user."""
        from ..resolvers.user import resolve_user_posts

        return await resolve_user_posts(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get the comments listed on this user."""
        from ..resolvers.user import resolve_user_comments

        return await resolve_user_comments(self, info)

    @strawberry.field
    async def liked_posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Get the posts this user has liked."""
        from ..resolvers.user import resolve_user_liked_posts

        return await resolve_user_liked_posts(self, info)
