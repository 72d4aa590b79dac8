"""Domain error classes.

Protocol-agnostic errors that represent business and catalog failures.
These errors are translated to appropriate formats (HTTP today) by protocol adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains error information that can be
    translated to HTTP or any other transport.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., URIs, status codes)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - offset < 0
        - limit outside 1..100

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "limit", "message": "Must be <= 100"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Comic is not in the favorites store

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Favorite")
            identifier: Resource identifier (e.g., comic id)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


# ==============================================================================
# Catalog Errors
# ==============================================================================


class CatalogError(DomainError):
    """Base class for failures talking to the remote comics catalog.

    The catalog client never retries; every subclass surfaces a single
    failed attempt to the caller.
    """

    error_code: str = "CATALOG_ERROR"


class InvalidURLError(CatalogError):
    """Base URL or resource URI is not a valid absolute URL.

    Raised before any request is dispatched (programmer/config error).

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "INVALID_URL"

    def __init__(self, url: str, **context: Any) -> None:
        super().__init__(f"Invalid URL: '{url}'", url=url, **context)


class NetworkError(CatalogError):
    """Transport failure (DNS, connect, timeout, reset). Transient.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "NETWORK_ERROR"


class DecodeError(CatalogError):
    """Response body does not match the expected JSON shape.

    Treated as permanent for that payload.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "DECODE_ERROR"


class ServerError(CatalogError):
    """Catalog answered with a non-2xx status, or with an empty result set
    for a single-entity endpoint.

    Exactly one of ``status`` / ``empty_result`` describes the failure.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "SERVER_ERROR"

    def __init__(
        self,
        status: int | None = None,
        *,
        empty_result: bool = False,
        message: str | None = None,
        **context: Any,
    ) -> None:
        self.status = status
        self.empty_result = empty_result
        if message is None:
            if empty_result:
                message = "Catalog returned an empty result for a single-entity request"
            else:
                message = f"Catalog responded with HTTP {status}"
        super().__init__(message, status=status, empty_result=empty_result, **context)

    @classmethod
    def empty_result_error(cls, **context: Any) -> "ServerError":
        """Build the ``ServerError(emptyResult)`` variant."""
        return cls(empty_result=True, **context)
