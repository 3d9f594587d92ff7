"""
Action configuration.

Reads step inputs and the ambient repository context from the environment
the GitHub Actions runner provides.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from delete_package_version.exceptions import ConfigurationError
from delete_package_version.transport import DEFAULT_BASE_URL
from delete_package_version.types.packages import DeletionRequest, PackageCoordinate


def get_input(
    name: str,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """
    Read a step input.

    The runner exposes input ``package-type`` as ``INPUT_PACKAGE-TYPE``:
    spaces become underscores and the name is upper-cased. Values are
    whitespace-trimmed.

    Args:
        name: Input name as declared in action.yml
        required: Whether an empty value is an error
        environ: Environment mapping (default: os.environ)

    Returns:
        The trimmed input value, or "" when unset

    Raises:
        ConfigurationError: If the input is required and empty
    """
    env = os.environ if environ is None else environ
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    value = env.get(key, "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


@dataclass(frozen=True)
class RepositoryContext:
    """Owner and name of the repository running the step."""

    owner: str
    repo: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RepositoryContext":
        """
        Parse ``GITHUB_REPOSITORY`` ("owner/repo").

        Raises:
            ConfigurationError: If the variable is unset or malformed
        """
        env = os.environ if environ is None else environ
        value = env.get("GITHUB_REPOSITORY", "")
        owner, sep, repo = value.partition("/")
        if not sep or not owner or not repo:
            raise ConfigurationError(
                "GITHUB_REPOSITORY environment variable not set or not in owner/repo form"
            )
        return cls(owner=owner, repo=repo)


@dataclass(frozen=True)
class ActionConfig:
    """Everything one run needs, read once at the entry point."""

    token: str
    package_name: str
    package_type: str
    version: str
    context: RepositoryContext
    must_end_with: str = ""
    must_start_with: str = ""
    api_url: str = DEFAULT_BASE_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ActionConfig":
        """
        Build the configuration from step inputs and runner context.

        Environment variables:
            INPUT_TOKEN, INPUT_PACKAGE, INPUT_PACKAGE-TYPE, INPUT_VERSION (required)
            INPUT_MUST-END-WITH, INPUT_MUST-START-WITH (optional)
            GITHUB_REPOSITORY: owner/repo of the running workflow (required)
            GITHUB_API_URL: API base URL (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If a required value is missing
        """
        env = os.environ if environ is None else environ
        return cls(
            token=get_input("token", required=True, environ=env),
            package_name=get_input("package", required=True, environ=env),
            package_type=get_input("package-type", required=True, environ=env),
            version=get_input("version", required=True, environ=env),
            must_end_with=get_input("must-end-with", environ=env),
            must_start_with=get_input("must-start-with", environ=env),
            context=RepositoryContext.from_env(env),
            api_url=env.get("GITHUB_API_URL") or DEFAULT_BASE_URL,
        )

    @property
    def coordinate(self) -> PackageCoordinate:
        """Packages are looked up in the organization owning the repository."""
        return PackageCoordinate(
            org=self.context.owner,
            package_name=self.package_name,
            package_type=self.package_type,
        )

    @property
    def request(self) -> DeletionRequest:
        return DeletionRequest(
            coordinate=self.coordinate,
            version=self.version,
            must_start_with=self.must_start_with,
            must_end_with=self.must_end_with,
        )

    def __repr__(self) -> str:
        return (
            f"ActionConfig(package_name={self.package_name!r}, "
            f"package_type={self.package_type!r}, version={self.version!r}, "
            f"context={self.context!r}, token='[REDACTED]')"
        )
