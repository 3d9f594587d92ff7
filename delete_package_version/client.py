"""
Registry client.

Provides the primary interface for talking to the package registry API.
"""

import os
from typing import Any

import httpx

from delete_package_version.clients import PackagesClient
from delete_package_version.config import get_input
from delete_package_version.exceptions import ConfigurationError
from delete_package_version.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HTTPTransport


class RegistryClient:
    """
    Main client for the package registry API.

    Example:
        ```python
        from delete_package_version import RegistryClient
        from delete_package_version.types import PackageCoordinate

        with RegistryClient(token="ghp_...") as client:
            coordinate = PackageCoordinate("acme", "my-lib", "npm")
            for version in client.packages.list_versions(coordinate):
                print(version.id, version.name)
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the registry client.

        Args:
            token: Token authorizing registry API access
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            transport: Optional httpx transport, for tests
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            token=token,
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

        self.packages = PackagesClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "RegistryClient":
        """
        Create a client from environment variables.

        Environment variables:
            INPUT_TOKEN: Step input holding the token (preferred)
            GITHUB_TOKEN: Fallback token
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If no token is available
        """
        token = get_input("token") or os.environ.get("GITHUB_TOKEN", "")
        if not token:
            raise ConfigurationError("INPUT_TOKEN or GITHUB_TOKEN environment variable not set")

        base_url = os.environ.get("GITHUB_API_URL") or cls.DEFAULT_BASE_URL
        return cls(token=token, base_url=base_url, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "RegistryClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
