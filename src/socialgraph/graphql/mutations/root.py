"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


# Input types for mutations
@strawberry.input
class UpdateUserInput:
    """Input for updating a user. Omitted fields are left unchanged."""

    name: str | None = strawberry.UNSET
    password: str | None = strawberry.UNSET
    email: str | None = strawberry.UNSET


@strawberry.input
class UpdatePostInput:
    """Input for updating a post."""

    content: str | None = strawberry.UNSET


@strawberry.input
class UpdateCommentInput:
    """Input for updating a comment."""

    text: str | None = strawberry.UNSET


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(
        self,
        info: strawberry.Info,
        name: str,
        password: str,
        email: str,
        posts: list[strawberry.ID] | None = None,
        comments: list[strawberry.ID] | None = None,
        liked_posts: list[strawberry.ID] | None = None,
    ) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, name, password, email, posts, comments, liked_posts)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdateUserInput
    ) -> User:
        """Update an existing user."""
        from ..resolvers.user import update_user

        return await update_user(info, id, input)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a user."""
        from ..resolvers.user import delete_user

        return await delete_user(info, id)

    # Post mutations
    @strawberry.mutation(name="createPost")
    async def create_post(
        self,
        info: strawberry.Info,
        content: str,
        author: strawberry.ID,
        comments: list[strawberry.ID] | None = None,
        likes: list[strawberry.ID] | None = None,
    ) -> Post:
        """Create a new post."""
        from ..resolvers.post import create_post

        return await create_post(info, content, author, comments, likes)

    @strawberry.mutation(name="updatePost")
    async def update_post(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdatePostInput
    ) -> Post:
        """Update an existing post."""
        from ..resolvers.post import update_post

        return await update_post(info, id, input)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a post."""
        from ..resolvers.post import delete_post

        return await delete_post(info, id)

    # Comment mutations
    @strawberry.mutation(name="createComment")
    async def create_comment(
        self,
        info: strawberry.Info,
        text: str,
        author: strawberry.ID,
        post: strawberry.ID,
    ) -> Comment:
        """Create a new comment."""
        from ..resolvers.comment import create_comment

        return await create_comment(info, text, author, post)

    @strawberry.mutation(name="updateComment")
    async def update_comment(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdateCommentInput
    ) -> Comment:
        """Update an existing comment."""
        from ..resolvers.comment import update_comment

        return await update_comment(info, id, input)

    @strawberry.mutation(name="deleteComment")
    async def delete_comment(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a comment."""
        from ..resolvers.comment import delete_comment

        return await delete_comment(info, id)
