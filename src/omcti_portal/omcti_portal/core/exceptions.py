from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ApiError(Exception):
    """Base exception for failures talking to the remote API."""


class ApiConnectionError(ApiError):
    """Raised on transport failures, HTTP errors and unreadable bodies."""


class ApiResponseError(ApiError):
    """Raised when the API answers but reports a non-success status."""

    def __init__(self, message: str, *, task: str | None = None, body=None):
        super().__init__(message)
        self.task = task
        self.body = body
