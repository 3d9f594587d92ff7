"""
Pytest plugin exposing the testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["delete_package_version.testing.conftest"]
"""

from delete_package_version.testing.fixtures import (
    action_config,
    mock_client,
    mock_client_with_versions,
    sample_coordinate,
    sample_versions,
)

__all__ = [
    "action_config",
    "mock_client",
    "mock_client_with_versions",
    "sample_coordinate",
    "sample_versions",
]
