"""
Version lookup and deletion.

The three steps of a deletion: the protected-package guard, resolving the
requested version name to a registry identifier, and removing it.
"""

from typing import TYPE_CHECKING

from delete_package_version.exceptions import NotFoundError
from delete_package_version.logging import get_logger
from delete_package_version.types.packages import PackageCoordinate, PackageVersion

if TYPE_CHECKING:
    from delete_package_version.clients.packages import PackagesClient

# Package exercised by this repository's own CI; never deleted.
PROTECTED_PACKAGE_NAME = "package-for-ci-testing-in-repo"

logger = get_logger("workflow")


def is_protected(coordinate: PackageCoordinate) -> bool:
    return coordinate.package_name == PROTECTED_PACKAGE_NAME


def find_package_version(
    packages: "PackagesClient",
    coordinate: PackageCoordinate,
    version: str,
) -> PackageVersion | None:
    """
    Find the version whose name is exactly ``version``.

    Matching is case-sensitive string equality; no version normalization.

    Args:
        packages: Packages client
        coordinate: Package to search
        version: Requested version name

    Returns:
        The matching version, or None when the package or version is absent

    Raises:
        RegistryError: On any registry failure other than package not found
    """
    org, name = coordinate.org, coordinate.package_name
    try:
        versions = packages.list_versions(coordinate)
    except NotFoundError:
        logger.info(f"Package [{name}] not found in organization [{org}]")
        return None

    match = next((v for v in versions if v.name == version), None)

    if match is None:
        logger.info(f"Available versions: {', '.join(v.name for v in versions)}")
        logger.info(
            f"Package [{name}] version [{version}] not found in organization [{org}]"
        )
        return None

    logger.info(f"Found package [{name}] version [{version}] in organization [{org}]")
    logger.info(f"Package type: {coordinate.package_type}, Version ID: {match.id}")
    return match


def delete_version(
    packages: "PackagesClient",
    coordinate: PackageCoordinate,
    version_id: int,
) -> None:
    """
    Delete a version by identifier.

    Raises:
        RegistryError: On any failure, including the version having vanished
    """
    packages.delete_version(coordinate, version_id)


def delete_package_version(
    packages: "PackagesClient",
    coordinate: PackageCoordinate,
    version: str,
) -> bool:
    """
    Delete the named version of a package if it exists.

    Args:
        packages: Packages client
        coordinate: Package holding the version
        version: Exact version name to delete

    Returns:
        True when a delete occurred, False when the package is protected or
        the version is absent

    Raises:
        RegistryError: When listing or deleting fails
    """
    if is_protected(coordinate):
        logger.info(
            f"Skipping deletion of package [{coordinate.package_name}] version [{version}] "
            f"in organization [{coordinate.org}] as it is used for CI testing"
        )
        return False

    match = find_package_version(packages, coordinate, version)
    if match is None:
        return False

    delete_version(packages, coordinate, match.id)
    return True
