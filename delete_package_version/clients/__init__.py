"""Registry resource clients."""

from delete_package_version.clients.packages import PackagesClient

__all__ = [
    "PackagesClient",
]
