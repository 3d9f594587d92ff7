"""Testing utilities.

Provides a mock registry client for testing code that deletes package
versions. Pytest fixtures live in ``delete_package_version.testing.fixtures``.
"""

from delete_package_version.testing.mock import (
    MockCall,
    MockPackagesClient,
    MockRegistryClient,
    MockResponse,
)

__all__ = [
    "MockRegistryClient",
    "MockPackagesClient",
    "MockCall",
    "MockResponse",
]
