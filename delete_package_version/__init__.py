"""delete-package-version - delete one version of an organization package."""

from delete_package_version.action import run, set_failed
from delete_package_version.client import RegistryClient
from delete_package_version.config import ActionConfig, RepositoryContext, get_input
from delete_package_version.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    NoResponseError,
    NotFoundError,
    RateLimitedError,
    RegistryError,
    ServerError,
    ValidationError,
)
from delete_package_version.filters import FilterResult, evaluate_filters
from delete_package_version.logging import configure_logging, get_logger
from delete_package_version.transport import HTTPTransport
from delete_package_version.types import (
    DeletionRequest,
    PackageCoordinate,
    PackageVersion,
    RunOutcome,
)
from delete_package_version.workflow import (
    PROTECTED_PACKAGE_NAME,
    delete_package_version,
    delete_version,
    find_package_version,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Entry point
    "run",
    "set_failed",
    # Client
    "RegistryClient",
    "HTTPTransport",
    # Configuration
    "ActionConfig",
    "RepositoryContext",
    "get_input",
    # Workflow
    "FilterResult",
    "evaluate_filters",
    "find_package_version",
    "delete_version",
    "delete_package_version",
    "PROTECTED_PACKAGE_NAME",
    # Types
    "PackageCoordinate",
    "PackageVersion",
    "DeletionRequest",
    "RunOutcome",
    # Exceptions
    "RegistryError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "NoResponseError",
    "ConfigurationError",
    # Logging
    "configure_logging",
    "get_logger",
]
