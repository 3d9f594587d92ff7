"""
HTTP Transport for the package registry API.

Handles authenticated HTTP communication and maps error responses onto
typed exceptions. Requests are issued once; there is no retry logic.
"""

import time
from collections.abc import Callable
from typing import Any

import httpx

from delete_package_version.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NoResponseError,
    NotFoundError,
    RateLimitedError,
    RegistryError,
    ServerError,
    ValidationError,
)
from delete_package_version.logging import log_http_request, log_http_response

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
API_VERSION = "2022-11-28"
USER_AGENT = "delete-package-version/0.1.0"


class HTTPTransport:
    """
    HTTP transport layer for the registry REST API.

    Handles:
    - Bearer token authentication and API version headers
    - Page-by-page listing of collection endpoints
    - Error response parsing into typed exceptions
    - Network failures surfaced as NoResponseError
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            token: Token authorizing registry API access
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests to stub the network)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a single authenticated request.

        Args:
            method: HTTP method (GET, DELETE, ...)
            path: API path (e.g., "/orgs/acme/packages/npm/lib/versions")
            params: Query parameters

        Returns:
            Parsed JSON response, or None when the response has no body

        Raises:
            RegistryError: On error responses or network failures
        """
        def make_request() -> httpx.Response:
            return self._client.request(method, path, params=params)

        log_http_request(method, f"{self.base_url}{path}", dict(self._client.headers), params)
        response = self._execute(make_request)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RegistryError(response.status_code, "Invalid JSON in response body") from e

    def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        per_page: int = 100,
    ) -> list[Any]:
        """
        Collect every item of a list endpoint, one page at a time.

        Stops at the first page holding fewer than ``per_page`` items, so a
        collection that fits on one page costs a single request.

        Args:
            path: API path of the list endpoint
            params: Extra query parameters
            per_page: Page size requested from the registry

        Returns:
            All items across pages, in the order the registry returned them

        Raises:
            RegistryError: On error responses or network failures
        """
        items: list[Any] = []
        page = 1
        while True:
            query = dict(params or {})
            query.update({"per_page": per_page, "page": page})
            data = self.request("GET", path, params=query)
            if not data:
                break
            items.extend(data)
            if len(data) < per_page:
                break
            page += 1
        return items

    def _execute(self, request_fn: Callable[[], httpx.Response]) -> httpx.Response:
        """
        Execute a request and raise on error responses.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            The successful response

        Raises:
            RegistryError: On error responses or network failures
        """
        started = time.monotonic()
        try:
            response = request_fn()
        except httpx.RequestError as e:
            raise NoResponseError(f"{type(e).__name__}: {e}") from e

        log_http_response(
            response.status_code,
            str(response.request.url),
            elapsed_ms=(time.monotonic() - started) * 1000,
            request_id=response.headers.get("X-GitHub-Request-Id"),
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        return response

    def _parse_error_response(self, response: httpx.Response) -> RegistryError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate RegistryError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        rate_limit_exhausted = (
            status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"
        )

        if status_code == 429 or rate_limit_exhausted:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(status_code, message, retry_after, request_id)
        elif status_code == 401:
            return AuthenticationError(status_code, message, request_id)
        elif status_code == 403:
            return AuthorizationError(status_code, message, request_id)
        elif status_code == 404:
            return NotFoundError(status_code, message, request_id)
        elif status_code >= 500:
            return ServerError(status_code, message, request_id)
        else:
            return ValidationError(status_code, message, request_id)
