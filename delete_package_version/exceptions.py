"""Exception classes for registry and configuration failures."""


class RegistryError(Exception):
    """Base exception for all package registry failures.

    Attributes:
        status: HTTP status code reported by the registry, or None when no
            response was received
        message: Error message reported by the registry
        request_id: Registry request identifier, when available
    """

    def __init__(
        self, status: int | None, message: str, request_id: str | None = None
    ) -> None:
        self.status = status
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{status}] {message}")


class AuthenticationError(RegistryError):
    """Raised when the token is missing, invalid or expired (401)."""

    pass


class AuthorizationError(RegistryError):
    """Raised when the token lacks the required scope (403)."""

    pass


class NotFoundError(RegistryError):
    """Raised when a package or package version is not found (404)."""

    pass


class RateLimitedError(RegistryError):
    """Raised when the registry rate limit is exhausted."""

    def __init__(
        self,
        status: int | None,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(status, message, request_id)
        self.retry_after = retry_after


class ValidationError(RegistryError):
    """Raised on other client errors (400, 422, ...)."""

    pass


class ServerError(RegistryError):
    """Raised on server errors (5xx)."""

    pass


class NoResponseError(RegistryError):
    """Raised when the request failed before any response was received."""

    def __init__(self, message: str) -> None:
        super().__init__(None, message)


class ConfigurationError(Exception):
    """Raised when a required input or context value is missing or invalid."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
