"""
Tests for version lookup and deletion.

Feature: delete-package-version
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from delete_package_version.exceptions import NotFoundError, ServerError
from delete_package_version.testing import MockRegistryClient
from delete_package_version.types.packages import PackageCoordinate, PackageVersion
from delete_package_version.workflow import (
    PROTECTED_PACKAGE_NAME,
    delete_package_version,
    delete_version,
    find_package_version,
)

version_name_strategy = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(whitelist_categories=("L", "N"), whitelist_characters=".-+"),
)


class TestFindPackageVersion:
    def test_exact_match(
        self,
        mock_client_with_versions: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
        caplog_info: pytest.LogCaptureFixture,
    ) -> None:
        found = find_package_version(mock_client_with_versions.packages, sample_coordinate, "2.3.0")

        assert found == PackageVersion(id=2, name="2.3.0")
        assert "Found package [my-lib] version [2.3.0] in organization [acme]" in caplog_info.text
        assert "Package type: npm, Version ID: 2" in caplog_info.text

    def test_no_match_logs_available_versions(
        self,
        mock_client_with_versions: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
        caplog_info: pytest.LogCaptureFixture,
    ) -> None:
        found = find_package_version(mock_client_with_versions.packages, sample_coordinate, "9.9.9")

        assert found is None
        assert "Available versions: 2.2.0, 2.3.0" in caplog_info.text
        assert "Package [my-lib] version [9.9.9] not found in organization [acme]" in caplog_info.text

    def test_match_is_case_sensitive(
        self,
        mock_client: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        mock_client.packages.add_versions(sample_coordinate, [PackageVersion(id=5, name="V1.0")])

        assert find_package_version(mock_client.packages, sample_coordinate, "v1.0") is None

    def test_no_version_normalization(
        self,
        mock_client: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        mock_client.packages.add_versions(sample_coordinate, [PackageVersion(id=5, name="v1.0.0")])

        assert find_package_version(mock_client.packages, sample_coordinate, "1.0.0") is None
        assert find_package_version(mock_client.packages, sample_coordinate, "v1.0") is None

    def test_missing_package_is_not_an_error(
        self,
        mock_client: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
        caplog_info: pytest.LogCaptureFixture,
    ) -> None:
        found = find_package_version(mock_client.packages, sample_coordinate, "2.3.0")

        assert found is None
        assert "Package [my-lib] not found in organization [acme]" in caplog_info.text

    def test_other_failures_propagate(
        self,
        mock_client: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        mock_client.packages.configure_list_versions(error=ServerError(500, "Server Error"))

        with pytest.raises(ServerError):
            find_package_version(mock_client.packages, sample_coordinate, "2.3.0")


class TestDeleteVersion:
    def test_deletes_identifier(
        self,
        mock_client_with_versions: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        delete_version(mock_client_with_versions.packages, sample_coordinate, 1)

        remaining = mock_client_with_versions.packages.versions(sample_coordinate)
        assert [v.id for v in remaining] == [2]

    def test_vanished_version_propagates(
        self,
        mock_client_with_versions: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        with pytest.raises(NotFoundError):
            delete_version(mock_client_with_versions.packages, sample_coordinate, 42)


class TestDeletePackageVersion:
    def test_deletes_matching_version(
        self,
        mock_client_with_versions: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        assert delete_package_version(mock_client_with_versions.packages, sample_coordinate, "2.3.0")

        calls = mock_client_with_versions.get_calls("packages.delete_version")
        assert len(calls) == 1
        assert calls[0].args == (sample_coordinate, 2)

    def test_absent_version_issues_no_delete(
        self,
        mock_client: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        mock_client.packages.add_versions(sample_coordinate, [PackageVersion(id=1, name="2.2.0")])

        assert not delete_package_version(mock_client.packages, sample_coordinate, "2.3.0")
        assert not mock_client.was_called("packages.delete_version")

    def test_missing_package_issues_no_delete(
        self,
        mock_client: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        assert not delete_package_version(mock_client.packages, sample_coordinate, "2.3.0")
        assert mock_client.call_count("packages.list_versions") == 1
        assert not mock_client.was_called("packages.delete_version")

    def test_protected_package_never_touches_registry(
        self,
        mock_client: MockRegistryClient,
        caplog_info: pytest.LogCaptureFixture,
    ) -> None:
        coordinate = PackageCoordinate("acme", PROTECTED_PACKAGE_NAME, "npm")
        mock_client.packages.add_versions(coordinate, [PackageVersion(id=1, name="1.0.0")])

        assert not delete_package_version(mock_client.packages, coordinate, "1.0.0")
        assert mock_client.get_calls() == []
        assert "as it is used for CI testing" in caplog_info.text

    def test_list_failure_issues_no_delete(
        self,
        mock_client: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        mock_client.packages.configure_list_versions(error=ServerError(502, "Bad Gateway"))

        with pytest.raises(ServerError):
            delete_package_version(mock_client.packages, sample_coordinate, "2.3.0")

        assert not mock_client.was_called("packages.delete_version")

    def test_delete_failure_propagates(
        self,
        mock_client_with_versions: MockRegistryClient,
        sample_coordinate: PackageCoordinate,
    ) -> None:
        mock_client_with_versions.packages.configure_delete_version(
            error=NotFoundError(404, "Package version not found.")
        )

        with pytest.raises(NotFoundError):
            delete_package_version(mock_client_with_versions.packages, sample_coordinate, "2.3.0")


@given(
    version=version_name_strategy,
    package_type=st.sampled_from(["npm", "container", "maven", "rubygems", "nuget", "docker"]),
    listed=st.lists(version_name_strategy, max_size=10),
)
@settings(max_examples=100)
def test_protected_package_is_never_deleted(
    version: str, package_type: str, listed: list[str]
) -> None:
    """
    The CI sentinel package is never deleted, whatever the registry holds.
    """
    mock = MockRegistryClient()
    coordinate = PackageCoordinate("acme", PROTECTED_PACKAGE_NAME, package_type)
    mock.packages.add_versions(
        coordinate,
        [PackageVersion(id=i, name=name) for i, name in enumerate(listed + [version])],
    )

    assert not delete_package_version(mock.packages, coordinate, version)
    assert not mock.was_called("packages.delete_version")


@given(
    version=version_name_strategy,
    others=st.lists(version_name_strategy, max_size=10),
)
@settings(max_examples=100)
def test_single_exact_match_deleted_once(version: str, others: list[str]) -> None:
    """
    With exactly one listed version named like the request, that version's
    identifier is deleted exactly once.
    """
    others = [name for name in others if name != version]
    versions = [PackageVersion(id=100 + i, name=name) for i, name in enumerate(others)]
    versions.insert(len(versions) // 2, PackageVersion(id=7, name=version))

    mock = MockRegistryClient()
    coordinate = PackageCoordinate("acme", "my-lib", "npm")
    mock.packages.add_versions(coordinate, versions)

    assert delete_package_version(mock.packages, coordinate, version)

    calls = mock.get_calls("packages.delete_version")
    assert [call.args[1] for call in calls] == [7]
