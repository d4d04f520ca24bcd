"""
Fixtures for executing GraphQL operations against the in-memory store.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from strawberry.types import ExecutionResult

from socialgraph.graphql.context import build_context
from socialgraph.graphql.schema import schema
from socialgraph.store.memory import InMemoryEntityStore

RunGraphQL = Callable[..., Awaitable[ExecutionResult]]

CREATE_USER = """
mutation CreateUser(
  $name: String!, $email: String!, $password: String!,
  $posts: [ID!], $comments: [ID!], $likedPosts: [ID!]
) {
  createUser(
    name: $name, email: $email, password: $password,
    posts: $posts, comments: $comments, likedPosts: $likedPosts
  ) {
    id
    name
    email
    password
  }
}
"""

CREATE_POST = """
mutation CreatePost($content: String!, $author: ID!, $comments: [ID!], $likes: [ID!]) {
  createPost(content: $content, author: $author, comments: $comments, likes: $likes) {
    id
    content
  }
}
"""

CREATE_COMMENT = """
mutation CreateComment($text: String!, $author: ID!, $post: ID!) {
  createComment(text: $text, author: $author, post: $post) {
    id
    text
  }
}
"""


@pytest.fixture
def run_graphql(store: InMemoryEntityStore) -> RunGraphQL:
    """Execute an operation with a fresh request context."""

    async def run(
        query: str, variables: dict[str, Any] | None = None, batch_references: bool = False
    ) -> ExecutionResult:
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=build_context(store, batch_references=batch_references),
        )

    return run


@pytest.fixture
def create_user(run_graphql: RunGraphQL) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def create(
        name: str = "Alice",
        email: str = "a@x.com",
        password: str = "secret",
        posts: list[str] | None = None,
        comments: list[str] | None = None,
        liked_posts: list[str] | None = None,
    ) -> dict[str, Any]:
        result = await run_graphql(
            CREATE_USER,
            {
                "name": name,
                "email": email,
                "password": password,
                "posts": posts,
                "comments": comments,
                "likedPosts": liked_posts,
            },
        )
        assert result.errors is None, result.errors
        return result.data["createUser"]

    return create


@pytest.fixture
def create_post(run_graphql: RunGraphQL) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def create(
        author: str,
        content: str = "Hello",
        comments: list[str] | None = None,
        likes: list[str] | None = None,
    ) -> dict[str, Any]:
        result = await run_graphql(
            CREATE_POST,
            {"content": content, "author": author, "comments": comments, "likes": likes},
        )
        assert result.errors is None, result.errors
        return result.data["createPost"]

    return create


@pytest.fixture
def create_comment(run_graphql: RunGraphQL) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def create(author: str, post: str, text: str = "Nice post") -> dict[str, Any]:
        result = await run_graphql(CREATE_COMMENT, {"text": text, "author": author, "post": post})
        assert result.errors is None, result.errors
        return result.data["createComment"]

    return create
