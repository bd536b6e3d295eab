"""Dependency resolver: turn a release's tool dependency edges into tool releases.

Resolution is exact-match lookup, not constraint solving. Each edge
(packager, tool, version) is resolved by three keyed lookups in turn:
package in the catalog, tool in the package, release in the tool. The
first missing key fails the edge, and the first failing edge fails the
whole release. No partial result is ever returned.

Failures are raised as ``ResolutionError`` subclasses and are never logged
or retried here. Whether to refresh the index and try again is the
caller's decision.
"""

from __future__ import annotations

from toolcatalog.core.catalog.models import (
    CoreDependency,
    Release,
    ToolDependency,
    ToolRelease,
)
from toolcatalog.core.catalog.status import Catalog
from toolcatalog.exceptions import (
    InvalidInputError,
    PackageNotFoundError,
    ReleaseNotFoundError,
    ToolNotFoundError,
)


class DependencyResolver:
    """Resolves tool dependencies against one catalog snapshot.

    The resolver holds no state besides the catalog, so one instance can
    serve any number of resolutions as long as the catalog is not mutated.

    Args:
        catalog: The catalog to resolve against.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def resolve_tool(self, dependency: ToolDependency) -> ToolRelease:
        """Find the tool release named by *dependency*.

        Args:
            dependency: The (packager, tool, version) edge to resolve.

        Returns:
            The ``ToolRelease`` object stored in the catalog.

        Raises:
            PackageNotFoundError: The packager is not in the catalog.
            ToolNotFoundError: The package does not offer the tool.
            ReleaseNotFoundError: The tool does not offer the version.
        """
        package = self._catalog.get_package(dependency.packager)
        if package is None:
            raise PackageNotFoundError(dependency.packager)
        tool = package.get_tool(dependency.tool_name)
        if tool is None:
            raise ToolNotFoundError(dependency.packager, dependency.tool_name)
        release = tool.get_release(dependency.tool_version)
        if release is None:
            raise ReleaseNotFoundError(
                dependency.packager, dependency.tool_name, dependency.tool_version
            )
        return release

    def resolve(self, release: Release | None) -> list[CoreDependency]:
        """Resolve every tool dependency declared by *release*.

        Args:
            release: The core release. Must not be None.

        Returns:
            One ``CoreDependency`` per declared edge, in declaration order.
            Empty list if the release declares no dependencies.

        Raises:
            InvalidInputError: If *release* is None. No lookup is attempted.
            ResolutionError: For the first edge that cannot be resolved.
        """
        if release is None:
            raise InvalidInputError("release cannot be None")

        resolved: list[CoreDependency] = []
        for dependency in release.dependencies:
            resolved.append(
                CoreDependency(
                    tool_name=dependency.tool_name,
                    release=self.resolve_tool(dependency),
                )
            )
        return resolved


def resolve_tool(dependency: ToolDependency, catalog: Catalog) -> ToolRelease:
    """Resolve a single dependency edge against *catalog*."""
    return DependencyResolver(catalog).resolve_tool(dependency)


def resolve_dependencies(
    release: Release | None, catalog: Catalog
) -> list[CoreDependency]:
    """Resolve all tool dependencies of *release* against *catalog*."""
    return DependencyResolver(catalog).resolve(release)
