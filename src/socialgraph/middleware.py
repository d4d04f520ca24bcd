"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
REDACTED = "[REDACTED]"

# Matched as substrings, so "author" must not be caught by a bare "auth"
SENSITIVE_KEYS = {
    "password",
    "token",
    "api_key",
    "apikey",
    "secret",
    "authorization",
    "session",
    "cookie",
    "credentials",
}

# Logged separately from the query string
GRAPHQL_PAYLOAD_KEYS = ("query", "variables", "extensions")


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(sensitive in lowered for sensitive in SENSITIVE_KEYS)


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Remove sensitive query parameters from logging.

    Args:
        params: Dictionary of query parameters

    Returns:
        Dictionary with sensitive parameters redacted
    """
    return {key: REDACTED if _is_sensitive(key) else value for key, value in params.items()}


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: REDACTED if _is_sensitive(k) else _redact(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_redact(item) for item in value]
    return value


def sanitize_graphql_variables(variables: Any) -> Any:
    """Redact sensitive entries, at any depth, from GraphQL variables.

    GET requests carry variables as a JSON string; anything that does not
    decode is redacted whole.
    """
    if isinstance(variables, str):
        try:
            variables = json.loads(variables)
        except json.JSONDecodeError:
            return REDACTED
    return _redact(variables)


async def read_graphql_payload(request: Request) -> dict[str, Any] | None:
    """GraphQL request parameters from the query string (GET) or JSON body (POST)."""
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        return dict(request.query_params) or None

    if request.method == "POST":
        body = await request.body()
        if not body:
            return None
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        return data if isinstance(data, dict) else None

    return None


def graphql_operation_name(payload: dict[str, Any]) -> str | None:
    """Operation name from the payload, falling back to the query text."""
    op = payload.get("operationName")
    if isinstance(op, str) and op:
        return op

    query = payload.get("query")
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = re.search(r"\b(query|mutation)\s+(\w+)", query)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Best-effort GraphQL operation name for GET and POST /graphql."""
    payload = await read_graphql_payload(request)
    return graphql_operation_name(payload) if payload else None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id and log each request with its GraphQL operation."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        set_request_context(request.headers.get("x-request-id"))

        try:
            log_data: dict[str, Any] = {
                "method": request.method,
                "path": request.url.path,
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }

            if request.query_params:
                params = sanitize_query_params(dict(request.query_params))
                if request.url.path == GRAPHQL_PATH:
                    params = {k: v for k, v in params.items() if k not in GRAPHQL_PAYLOAD_KEYS}
                log_data["query_params"] = params or None

            graphql_operation = None
            payload = await read_graphql_payload(request)
            if payload:
                graphql_operation = graphql_operation_name(payload)
                log_data["graphql_operation"] = graphql_operation
                if payload.get("variables"):
                    log_data["graphql_variables"] = sanitize_graphql_variables(
                        payload["variables"]
                    )

            logger.info("Request started", **log_data)

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
