"""Data model types used by the package."""

from delete_package_version.types.packages import (
    DeletionRequest,
    PackageCoordinate,
    PackageVersion,
    RunOutcome,
)

__all__ = [
    "PackageCoordinate",
    "PackageVersion",
    "DeletionRequest",
    "RunOutcome",
]
