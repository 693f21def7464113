"""Errors raised by use cases and translated to HTTP responses by the API layer."""

from __future__ import annotations

from typing import Any


class ServiceError(RuntimeError):
    """Base class for errors that carry a client-facing message."""

    def __init__(self, message: str, *, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class RequestValidationFailed(ServiceError, ValueError):
    """A required field is missing or malformed (HTTP 400)."""


class NotFoundError(ServiceError, LookupError):
    """A resource required by the operation does not exist (HTTP 404)."""


class ConflictError(ServiceError):
    """The write collides with an existing row (HTTP 409)."""


class UpstreamServiceError(ServiceError):
    """The database or a vendor API failed (HTTP 500, upstream message attached)."""


class ServiceNotConfiguredError(ServiceError):
    """Credentials or settings required by a provider are missing (HTTP 500)."""


class NotificationDispatchError(ServiceError):
    """Base class for errors that abort a single channel attempt."""

    code = "NotificationDispatchError"


class TemplateNotFoundError(NotificationDispatchError):
    """No active template exists for the requested key."""

    code = "TemplateNotFound"


class TemplateIncompleteForChannelError(NotificationDispatchError):
    """The template has no body for the requested channel."""

    code = "TemplateIncompleteForChannel"


class MissingVariableError(NotificationDispatchError):
    """A placeholder referenced by the template has no binding."""

    code = "MissingVariable"

    def __init__(self, variable: str) -> None:
        super().__init__(f"Missing value for template variable '{variable}'")
        self.variable = variable


__all__ = [
    "ServiceError",
    "RequestValidationFailed",
    "NotFoundError",
    "ConflictError",
    "UpstreamServiceError",
    "ServiceNotConfiguredError",
    "NotificationDispatchError",
    "TemplateNotFoundError",
    "TemplateIncompleteForChannelError",
    "MissingVariableError",
]
