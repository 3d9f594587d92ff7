#!/usr/bin/env python3
"""
List the versions of an organization package and show which one a
deletion would target.

Run with:
    GITHUB_TOKEN=... python examples/list_versions.py acme my-lib npm 2.3.0
"""

import logging
import sys

from delete_package_version import (
    PackageCoordinate,
    RegistryClient,
    RegistryError,
    configure_logging,
    find_package_version,
)

if len(sys.argv) != 5:
    print("usage: list_versions.py ORG PACKAGE PACKAGE_TYPE VERSION")
    sys.exit(2)

org, package_name, package_type, version = sys.argv[1:]
configure_logging(level=logging.INFO)

coordinate = PackageCoordinate(org=org, package_name=package_name, package_type=package_type)

with RegistryClient.from_env() as client:
    try:
        versions = client.packages.list_versions(coordinate)
    except RegistryError as e:
        print(f"Listing failed: status={e.status} message={e.message}")
        sys.exit(1)

    print(f"{len(versions)} version(s) of {package_name}:")
    for v in versions:
        tags = f" tags={','.join(v.tags)}" if v.tags else ""
        print(f"   {v.id}: {v.name}{tags}")

    # Same lookup the action performs before deleting
    match = find_package_version(client.packages, coordinate, version)
    print(f"\nWould delete: {match.id if match else 'nothing'}")
