"""The package catalog: name -> Package, built once from index data.

The catalog is populated by a single writer right after the index is
loaded and is read-only afterwards. Refreshing the index means building a
new ``Catalog`` and swapping it in, not mutating one that resolutions may
be reading.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from toolcatalog.core.catalog.models import Package, Release

if TYPE_CHECKING:
    from toolcatalog.core.catalog.index import IndexPackage

logger = logging.getLogger(__name__)


class Catalog:
    """Mapping from package name to ``Package``.

    Thread safety: This class is NOT thread-safe. ``insert`` must not run
    concurrently with lookups.
    """

    def __init__(self, packages: Iterable[Package] = ()) -> None:
        self._packages: dict[str, Package] = {}
        for package in packages:
            self.insert(package)

    @classmethod
    def from_index(cls, index_packages: Iterable[IndexPackage]) -> Catalog:
        """Build a catalog from raw index descriptors.

        Each descriptor is extracted into a ``Package`` and inserted under
        its name, so a later descriptor replaces an earlier one with the
        same name.

        Args:
            index_packages: Descriptors produced by the index loader.

        Returns:
            A new, populated ``Catalog``.
        """
        catalog = cls()
        for index_package in index_packages:
            catalog.insert(index_package.extract_package())
        return catalog

    def insert(self, package: Package) -> None:
        """Insert *package*, replacing any package with the same name.

        NOTE: replacement is whole. Tools and cores of the previous
        package are dropped, not merged.
        """
        if package.name in self._packages:
            logger.debug("Replacing package %s in catalog", package.name)
        self._packages[package.name] = package

    def get_package(self, name: str) -> Package | None:
        return self._packages.get(name)

    def names(self) -> list[str]:
        """Return the package names sorted case-insensitively, ascending.

        Names equal except for case are ordered by their exact spelling, so
        the result never depends on insertion order.
        """
        return sorted(self._packages, key=lambda name: (name.lower(), name))

    def find_release(
        self, packager: str, architecture: str, version: str
    ) -> Release | None:
        """Look up a core release by package, architecture and version.

        Returns:
            The ``Release``, or None if any of the three keys is missing.
        """
        package = self._packages.get(packager)
        if package is None:
            return None
        core = package.get_core(architecture)
        if core is None:
            return None
        return core.get_release(version)

    @property
    def packages(self) -> Mapping[str, Package]:
        """Read-only view of the name -> package mapping."""
        return MappingProxyType(self._packages)

    def __len__(self) -> int:
        return len(self._packages)

    def __contains__(self, name: object) -> bool:
        return name in self._packages
