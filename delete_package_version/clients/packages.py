"""Packages resource client."""

from typing import TYPE_CHECKING
from urllib.parse import quote

from delete_package_version.exceptions import RegistryError
from delete_package_version.types.packages import PackageCoordinate, PackageVersion

if TYPE_CHECKING:
    from delete_package_version.transport import HTTPTransport


def versions_path(coordinate: PackageCoordinate) -> str:
    """Build the versions collection path for a package."""
    return (
        f"/orgs/{quote(coordinate.org, safe='')}/packages/"
        f"{quote(coordinate.package_type, safe='')}/"
        f"{quote(coordinate.package_name, safe='')}/versions"
    )


class PackagesClient:
    """Client for organization package version operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the packages client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_versions(self, coordinate: PackageCoordinate) -> list[PackageVersion]:
        """
        List all versions of a package.

        Args:
            coordinate: Organization, package name and package type

        Returns:
            Every version the registry reports, in registry order

        Raises:
            NotFoundError: If the package does not exist in the organization
            RegistryError: On any other registry failure, or when an entry
                lacks the id/name fields
        """
        data = self.transport.paginate(versions_path(coordinate))
        try:
            return [PackageVersion.from_api(item) for item in data]
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise RegistryError(200, f"Unexpected package version entry: {e!r}") from e

    def delete_version(self, coordinate: PackageCoordinate, version_id: int) -> None:
        """
        Delete one package version by identifier.

        Args:
            coordinate: Organization, package name and package type
            version_id: Registry identifier of the version

        Raises:
            NotFoundError: If the version no longer exists
            RegistryError: On any other registry failure
        """
        self.transport.request(
            method="DELETE",
            path=f"{versions_path(coordinate)}/{version_id}",
        )
