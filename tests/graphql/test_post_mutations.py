"""
Tests for post and comment queries and mutations
"""

import pytest
from bson import ObjectId

UPDATE_POST = """
mutation UpdatePost($id: ID!, $input: UpdatePostInput!) {
  updatePost(id: $id, input: $input) { id content }
}
"""

UPDATE_COMMENT = """
mutation UpdateComment($id: ID!, $input: UpdateCommentInput!) {
  updateComment(id: $id, input: $input) { id text }
}
"""


class TestPostMutations:
    @pytest.mark.asyncio
    async def test_create_stores_supplied_author_and_arrays(self, create_user, create_post, store):
        author = await create_user()
        comment_id = str(ObjectId())

        post = await create_post(
            author=author["id"], content="Hi", comments=[comment_id], likes=[author["id"]]
        )

        stored = await store.posts.find_one(ObjectId(post["id"]))
        assert stored == {
            "_id": ObjectId(post["id"]),
            "content": "Hi",
            "author": ObjectId(author["id"]),
            "comments": [ObjectId(comment_id)],
            "likes": [ObjectId(author["id"])],
        }

    @pytest.mark.asyncio
    async def test_create_does_not_link_author(self, create_user, create_post, store):
        author = await create_user()

        await create_post(author=author["id"])

        stored_author = await store.users.find_one(ObjectId(author["id"]))
        assert stored_author["posts"] == []

    @pytest.mark.asyncio
    async def test_updating_content_leaves_references_identical(
        self, create_user, create_post, run_graphql, store
    ):
        author = await create_user()
        post = await create_post(
            author=author["id"], comments=[str(ObjectId())], likes=[author["id"]]
        )
        before = await store.posts.find_one(ObjectId(post["id"]))

        result = await run_graphql(UPDATE_POST, {"id": post["id"], "input": {"content": "Edited"}})

        assert result.errors is None
        assert result.data["updatePost"] == {"id": post["id"], "content": "Edited"}
        after = await store.posts.find_one(ObjectId(post["id"]))
        assert after["content"] == "Edited"
        for field in ("_id", "author", "comments", "likes"):
            assert after[field] == before[field]

    @pytest.mark.asyncio
    async def test_update_unknown_post(self, run_graphql):
        result = await run_graphql(
            UPDATE_POST, {"id": str(ObjectId()), "input": {"content": "Edited"}}
        )

        assert result.errors[0].extensions["code"] == "NOT_FOUND"
        assert result.errors[0].extensions["entityType"] == "Post"

    @pytest.mark.asyncio
    async def test_delete_post(self, create_user, create_post, run_graphql):
        author = await create_user()
        post = await create_post(author=author["id"])

        first = await run_graphql("mutation($id: ID!) { deletePost(id: $id) }", {"id": post["id"]})
        second = await run_graphql("mutation($id: ID!) { deletePost(id: $id) }", {"id": post["id"]})

        assert first.data == {"deletePost": True}
        assert second.data == {"deletePost": False}

    @pytest.mark.asyncio
    async def test_delete_post_malformed_id(self, run_graphql):
        result = await run_graphql('mutation { deletePost(id: "not-an-id") }')

        assert result.errors is None
        assert result.data == {"deletePost": False}

    @pytest.mark.asyncio
    async def test_list_posts(self, create_user, create_post, run_graphql):
        author = await create_user()
        await create_post(author=author["id"], content="one")
        await create_post(author=author["id"], content="two")

        result = await run_graphql("{ posts { content } }")

        assert result.data == {"posts": [{"content": "one"}, {"content": "two"}]}


class TestCommentMutations:
    @pytest.mark.asyncio
    async def test_create_stores_supplied_references(
        self, create_user, create_post, create_comment, store
    ):
        author = await create_user()
        post = await create_post(author=author["id"])

        comment = await create_comment(author=author["id"], post=post["id"], text="Nice")

        stored = await store.comments.find_one(ObjectId(comment["id"]))
        assert stored["author"] == ObjectId(author["id"])
        assert stored["post"] == ObjectId(post["id"])
        assert stored["text"] == "Nice"

        # Back-references are the caller's job
        stored_post = await store.posts.find_one(ObjectId(post["id"]))
        assert stored_post["comments"] == []

    @pytest.mark.asyncio
    async def test_update_comment_text(self, create_user, create_post, create_comment, run_graphql):
        author = await create_user()
        post = await create_post(author=author["id"])
        comment = await create_comment(author=author["id"], post=post["id"])

        result = await run_graphql(UPDATE_COMMENT, {"id": comment["id"], "input": {"text": "Edit"}})

        assert result.data["updateComment"] == {"id": comment["id"], "text": "Edit"}

    @pytest.mark.asyncio
    async def test_query_comment_by_id(self, create_user, create_post, create_comment, run_graphql):
        author = await create_user()
        post = await create_post(author=author["id"])
        comment = await create_comment(author=author["id"], post=post["id"], text="Hello")

        result = await run_graphql(
            "query($id: ID!) { comment(id: $id) { id text } }", {"id": comment["id"]}
        )

        assert result.data == {"comment": {"id": comment["id"], "text": "Hello"}}

    @pytest.mark.asyncio
    async def test_create_with_malformed_post_id(self, create_user, run_graphql, store):
        author = await create_user()

        result = await run_graphql(
            'mutation($a: ID!) { createComment(text: "x", author: $a, post: "bad") { id } }',
            {"a": author["id"]},
        )

        assert result.errors[0].extensions["code"] == "INVALID_ID"
        assert len(store.comments) == 0

    @pytest.mark.asyncio
    async def test_delete_comment_nonexistent(self, run_graphql):
        result = await run_graphql(
            "mutation($id: ID!) { deleteComment(id: $id) }", {"id": str(ObjectId())}
        )

        assert result.data == {"deleteComment": False}
