"""Domain exceptions for the link resolver.

Resolution itself never raises for malformed input (it degrades to empty
results). These exceptions cover invariant violations and configuration
errors. The presentation layer maps them to HTTP responses in
exception handlers.
"""

from typing import Any


class LinkResolverException(Exception):
    """Base exception for all link resolver errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, route_name).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable payload for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(LinkResolverException):
    """Raised when a value object is constructed with invalid data."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class RouteNotFoundException(LinkResolverException):
    """Raised when a URL is requested for a route name that is not configured."""

    def __init__(self, route_name: str) -> None:
        super().__init__(
            f"No route configured for {route_name!r}",
            "ROUTE_NOT_FOUND",
            {"route_name": route_name},
        )


class SqlNotConfiguredException(LinkResolverException):
    """Raised when SQL-backed stores are used but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            "SQL database is not configured. Set DATABASE_URL to use the SQL stores.",
            "SQL_NOT_CONFIGURED",
        )
