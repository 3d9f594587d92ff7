"""Prefix/suffix filters deciding whether a version is considered at all."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterResult:
    """Outcome of filter evaluation; ``reason`` is set when skipped."""

    proceed: bool
    reason: str | None = None


def evaluate_filters(
    version: str,
    must_start_with: str = "",
    must_end_with: str = "",
) -> FilterResult:
    """
    Check a version string against the optional prefix and suffix filters.

    Both filters must pass. An empty filter places no constraint. The suffix
    is checked first, which only affects the reason reported when both fail.

    Args:
        version: Requested version string
        must_start_with: Required prefix, or "" for none
        must_end_with: Required suffix, or "" for none

    Returns:
        FilterResult with ``proceed`` False and a reason when filtered out
    """
    if must_end_with and not version.endswith(must_end_with):
        return FilterResult(False, f"it does not end with [{must_end_with}]")

    if must_start_with and not version.startswith(must_start_with):
        return FilterResult(False, f"it does not start with [{must_start_with}]")

    return FilterResult(True)
