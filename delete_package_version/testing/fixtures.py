"""
Pytest fixtures for testing code built on this package.
"""

from typing import Generator

import pytest

from delete_package_version.config import ActionConfig, RepositoryContext
from delete_package_version.testing.mock import MockRegistryClient
from delete_package_version.types.packages import PackageCoordinate, PackageVersion


def create_mock_version(id: int = 1, name: str = "1.0.0", **kwargs) -> PackageVersion:
    """Create a PackageVersion with sensible defaults."""
    return PackageVersion(id=id, name=name, **kwargs)


def create_action_config(**overrides) -> ActionConfig:
    """
    Create an ActionConfig for tests.

    Example:
        ```python
        config = create_action_config(version="2.3.0", must_start_with="v")
        ```
    """
    values = {
        "token": "test-token",
        "package_name": "my-lib",
        "package_type": "npm",
        "version": "2.3.0",
        "context": RepositoryContext(owner="acme", repo="my-repo"),
    }
    values.update(overrides)
    return ActionConfig(**values)


@pytest.fixture
def mock_client() -> Generator[MockRegistryClient, None, None]:
    """
    Provide a MockRegistryClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client, sample_coordinate):
            mock_client.packages.add_versions(sample_coordinate, [...])
            ...
            assert mock_client.was_called("packages.delete_version")
        ```
    """
    client = MockRegistryClient()
    yield client
    client.reset()


@pytest.fixture
def sample_coordinate() -> PackageCoordinate:
    """Provide the coordinate of an npm package owned by "acme"."""
    return PackageCoordinate(org="acme", package_name="my-lib", package_type="npm")


@pytest.fixture
def sample_versions() -> list[PackageVersion]:
    """Provide two listed versions, 2.2.0 (id 1) and 2.3.0 (id 2)."""
    return [
        create_mock_version(id=1, name="2.2.0"),
        create_mock_version(id=2, name="2.3.0"),
    ]


@pytest.fixture
def mock_client_with_versions(
    mock_client: MockRegistryClient,
    sample_coordinate: PackageCoordinate,
    sample_versions: list[PackageVersion],
) -> MockRegistryClient:
    """Provide a mock client where the sample package holds the sample versions."""
    mock_client.packages.add_versions(sample_coordinate, sample_versions)
    return mock_client


@pytest.fixture
def action_config() -> ActionConfig:
    """Provide an ActionConfig targeting my-lib@2.3.0 in acme/my-repo."""
    return create_action_config()
