"""
Exception hierarchy for the BudhHub application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class BudhHubError(Exception):
    """Base exception for all BudhHub application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NotFoundError(BudhHubError):
    """Raised when a requested row does not exist."""

    def __init__(
        self,
        resource: str,
        resource_id: Any = None,
        message: str | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Resource name ("Course", "Lesson", ...)
            resource_id: ID of the missing row
            message: Override for the default "<resource> not found" message
        """
        details = {"resource": resource}
        if resource_id is not None:
            details["resource_id"] = str(resource_id)
        super().__init__(message or f"{resource} not found", details)


class AuthenticationError(BudhHubError):
    """Raised when the caller has no valid identity."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class PermissionDeniedError(BudhHubError):
    """Raised when the caller is identified but not allowed."""

    def __init__(self, message: str = "Forbidden", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class InvalidRequestError(BudhHubError):
    """Raised when a request is well-formed but violates a business rule."""

    def __init__(
        self,
        message: str,
        errors: list[Any] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid request error.

        Args:
            message: Error message
            errors: Itemised reasons returned to the client
            details: Additional context
        """
        self.errors = errors or []
        super().__init__(message, details)


class StorageError(BudhHubError):
    """Raised when an object storage operation fails."""

    def __init__(self, message: str, key: str | None = None) -> None:
        details = {"key": key} if key else None
        super().__init__(message, details)


class StorageNotConfiguredError(StorageError):
    """Raised when object storage credentials are missing."""

    def __init__(self) -> None:
        super().__init__("Object storage is not configured")


class EmailDeliveryError(BudhHubError):
    """Raised when an email cannot be sent."""
