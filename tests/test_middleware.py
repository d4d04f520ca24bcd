"""Tests for request logging helpers."""

import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from socialgraph.logging import generate_request_id, resolve_log_level
from socialgraph.middleware import (
    extract_graphql_operation_name,
    read_graphql_payload,
    sanitize_graphql_variables,
    sanitize_query_params,
)


def make_request(method: str, path: str = "/graphql", params=None, body: bytes = b""):
    request = MagicMock()
    request.method = method
    request.url.path = path
    request.query_params = params or {}
    request.body = AsyncMock(return_value=body)
    return request


class TestSanitizeQueryParams:
    def test_redacts_sensitive_keys(self) -> None:
        result = sanitize_query_params({"password": "x", "api_key": "y", "name": "alice"})

        assert result == {"password": "[REDACTED]", "api_key": "[REDACTED]", "name": "alice"}

    def test_matching_is_case_insensitive(self) -> None:
        assert sanitize_query_params({"Auth_Token": "x"}) == {"Auth_Token": "[REDACTED]"}

    def test_author_is_not_sensitive(self) -> None:
        assert sanitize_query_params({"author": "abc"}) == {"author": "abc"}


class TestSanitizeGraphQLVariables:
    def test_redacts_nested_passwords(self) -> None:
        variables = {
            "email": "a@x.com",
            "password": "secret",
            "input": {"name": "Alice", "password": "new"},
        }

        assert sanitize_graphql_variables(variables) == {
            "email": "a@x.com",
            "password": "[REDACTED]",
            "input": {"name": "Alice", "password": "[REDACTED]"},
        }

    def test_keeps_reference_ids(self) -> None:
        variables = {"author": "a" * 24, "likes": ["b" * 24]}

        assert sanitize_graphql_variables(variables) == variables

    def test_decodes_json_string_from_query_string(self) -> None:
        result = sanitize_graphql_variables('{"password": "secret", "name": "Alice"}')

        assert result == {"password": "[REDACTED]", "name": "Alice"}

    def test_undecodable_string_is_redacted(self) -> None:
        assert sanitize_graphql_variables("password=secret") == "[REDACTED]"


class TestExtractGraphQLOperationName:
    @pytest.mark.asyncio
    async def test_ignores_other_paths(self) -> None:
        assert await extract_graphql_operation_name(make_request("GET", "/health")) is None

    @pytest.mark.asyncio
    async def test_post_with_operation_name(self) -> None:
        body = json.dumps({"operationName": "GetUser", "query": "query GetUser { users { id } }"})

        assert await extract_graphql_operation_name(make_request("POST", body=body.encode())) == (
            "GetUser"
        )

    @pytest.mark.asyncio
    async def test_post_named_mutation(self) -> None:
        body = json.dumps({"query": "mutation CreateUser { createUser { id } }"})

        name = await extract_graphql_operation_name(make_request("POST", body=body.encode()))

        assert name == "mutation:CreateUser"

    @pytest.mark.asyncio
    async def test_post_anonymous(self) -> None:
        body = json.dumps({"query": "{ users { id } }"})

        name = await extract_graphql_operation_name(make_request("POST", body=body.encode()))

        assert name == "unnamed_operation"

    @pytest.mark.asyncio
    async def test_post_invalid_json(self) -> None:
        assert await extract_graphql_operation_name(make_request("POST", body=b"{nope")) is None

    @pytest.mark.asyncio
    async def test_get_introspection(self) -> None:
        request = make_request("GET", params={"query": "{ __schema { types { name } } }"})

        assert await extract_graphql_operation_name(request) == "__introspection"


class TestReadGraphQLPayload:
    @pytest.mark.asyncio
    async def test_post_body(self) -> None:
        body = json.dumps({"query": "{ users { id } }", "variables": {"id": "x"}})

        payload = await read_graphql_payload(make_request("POST", body=body.encode()))

        assert payload == {"query": "{ users { id } }", "variables": {"id": "x"}}

    @pytest.mark.asyncio
    async def test_post_non_object_body(self) -> None:
        assert await read_graphql_payload(make_request("POST", body=b"[1, 2]")) is None

    @pytest.mark.asyncio
    async def test_get_without_params(self) -> None:
        assert await read_graphql_payload(make_request("GET")) is None

    @pytest.mark.asyncio
    async def test_other_path(self) -> None:
        assert await read_graphql_payload(make_request("POST", "/health", body=b"{}")) is None


def test_request_ids_are_unique() -> None:
    ids = {generate_request_id() for _ in range(100)}

    assert len(ids) == 100
    assert all(len(request_id) == 14 for request_id in ids)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        (None, logging.INFO),
        ("warning", logging.WARNING),
        ("DEBUG", logging.DEBUG),
        ("loud", logging.INFO),
    ],
)
def test_resolve_log_level(name, expected) -> None:
    assert resolve_log_level(name) == expected
