"""
Domain errors raised by the store adapter, resolvers and mutations.

Each error carries a machine-readable ``code``. GraphQL copies an exception's
``extensions`` mapping into the error response, so clients can tell a missing
document from a uniqueness collision without parsing messages.
"""

from typing import Any


class SocialGraphError(Exception):
    """Base exception for socialgraph operations."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, **self.details}


class NotFoundError(SocialGraphError):
    """A single-entity lookup by identifier matched no document."""

    code = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(
            f"{entity_type} with ID {entity_id} not found",
            entityType=entity_type,
            id=entity_id,
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class UniquenessViolationError(SocialGraphError):
    """A create collided with an existing document on a unique attribute."""

    code = "UNIQUENESS_VIOLATION"

    def __init__(self, entity_type: str, field: str, value: str):
        super().__init__(
            f"{entity_type} with {field} {value!r} already exists",
            entityType=entity_type,
            field=field,
        )
        self.entity_type = entity_type
        self.field = field
        self.value = value


class InvalidIdentifierError(SocialGraphError):
    """An identifier argument is not a valid store identifier."""

    code = "INVALID_ID"

    def __init__(self, value: str):
        super().__init__(f"Invalid identifier: {value!r}", id=value)
        self.value = value


class ConfigurationError(SocialGraphError):
    """The application is configured in a way that cannot start."""

    code = "CONFIGURATION_ERROR"
