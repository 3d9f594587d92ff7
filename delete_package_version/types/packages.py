"""Package-related data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class PackageCoordinate:
    """Identifies a package collection within an organization."""

    org: str
    package_name: str
    package_type: str  # "npm", "container", "maven", ...


@dataclass
class PackageVersion:
    """One version of a package as listed by the registry."""

    id: int
    name: str
    url: str | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PackageVersion":
        """Build a version from a registry list entry."""
        container = (data.get("metadata") or {}).get("container") or {}
        return cls(
            id=data["id"],
            name=data["name"],
            url=data.get("url"),
            html_url=data.get("html_url"),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
            tags=list(container.get("tags") or []),
        )


@dataclass(frozen=True)
class DeletionRequest:
    """Input contract for one run."""

    coordinate: PackageCoordinate
    version: str
    must_start_with: str = ""
    must_end_with: str = ""


class RunOutcome(str, Enum):
    """How a run ended."""

    SKIPPED = "skipped"
    DELETED = "deleted"
    ABSENT = "absent"
    FAILED = "failed"


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
