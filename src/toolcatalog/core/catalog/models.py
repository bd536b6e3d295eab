"""Identity graph for packages, tools, tool releases and core releases.

Containment is strictly hierarchical::

    Catalog -> Package -> Tool -> ToolRelease
                       -> Core -> Release -> [ToolDependency]

Every level is a name-keyed dict owned by its parent. Lookups are exact
string matches on the key; version strings are never normalized or
compared semantically. A ``ToolDependency`` is a value triple naming a
``ToolRelease`` elsewhere in the catalog, possibly in another package, and
only becomes a ``CoreDependency`` once the resolver finds it.

The containers (``Package``, ``Tool``, ``Core``, ``Release``) are plain
dataclasses whose dicts are filled while the index is extracted. Once the
package is inserted into a ``Catalog`` they are treated as read-only;
nothing here enforces it.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ToolDownload:
    """Download and placement metadata for one host flavour of a tool release.

    Attributes:
        host: Host triplet the archive is built for (e.g. "x86_64-linux-gnu").
        url: Archive download URL.
        archive_file_name: File name to store the archive under.
        checksum: Checksum in "<algorithm>:<hex>" form, as published.
        size: Archive size in bytes.
    """

    host: str
    url: str
    archive_file_name: str = ""
    checksum: str = ""
    size: int = 0


@dataclass(frozen=True)
class ToolRelease:
    """One concrete, installable version of a tool.

    Frozen, with downloads held in a tuple, so a release is hashable.
    """

    version: str
    downloads: tuple[ToolDownload, ...] = ()

    def download_for(self, host: str) -> ToolDownload | None:
        """Return the download published for *host*, or None."""
        for download in self.downloads:
            if download.host == host:
                return download
        return None


@dataclass
class Tool:
    """A named utility (compiler, uploader, debugger) offered by one package.

    The ``releases`` dict is filled during index extraction and must not be
    changed once the owning package is in a catalog.

    Attributes:
        name: Tool name, unique within its package.
        package_name: Name of the owning package.
        releases: Mapping of version string to ``ToolRelease``.
    """

    name: str
    package_name: str = ""
    releases: dict[str, ToolRelease] = field(default_factory=dict)

    def get_release(self, version: str) -> ToolRelease | None:
        return self.releases.get(version)

    def versions(self) -> list[str]:
        """Return the published version strings in lexical order."""
        return sorted(self.releases)


# ---------------------------------------------------------------------------
# Cores
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ToolDependency:
    """An unresolved reference to a tool release: (packager, tool, version).

    The referenced release may live in a different package than the core
    declaring the edge, and may not exist in the catalog at all.
    """

    packager: str
    tool_name: str
    tool_version: str

    def __str__(self) -> str:
        return f"{self.packager}:{self.tool_name}@{self.tool_version}"


@dataclass
class Release:
    """A concrete, installable version of a core (hardware definition).

    Read-only after extraction, like the other containers.

    Attributes:
        version: Release version string.
        dependencies: Tool dependency edges, in declaration order.
        boards: Names of the boards this release supports.
    """

    version: str
    dependencies: list[ToolDependency] = field(default_factory=list)
    boards: list[str] = field(default_factory=list)


@dataclass
class Core:
    """A buildable hardware definition for one architecture of a package."""

    name: str
    architecture: str
    releases: dict[str, Release] = field(default_factory=dict)

    def get_release(self, version: str) -> Release | None:
        return self.releases.get(version)

    def versions(self) -> list[str]:
        return sorted(self.releases)


# ---------------------------------------------------------------------------
# Package
# ---------------------------------------------------------------------------


@dataclass
class Package:
    """A vendor distribution owning tools and cores.

    Mutable while the index is extracted; read-only once inserted into a
    catalog. Replacing a package means inserting a new one, never editing
    ``tools`` or ``cores`` in place.

    Attributes:
        name: Package name, the identity key in the catalog.
        maintainer: Maintainer as published in the index.
        website_url: Vendor website.
        email: Maintainer contact address.
        tools: Mapping of tool name to ``Tool``.
        cores: Mapping of architecture to ``Core``.
    """

    name: str
    maintainer: str = ""
    website_url: str = ""
    email: str = ""
    tools: dict[str, Tool] = field(default_factory=dict)
    cores: dict[str, Core] = field(default_factory=dict)

    def get_tool(self, name: str) -> Tool | None:
        return self.tools.get(name)

    def get_core(self, architecture: str) -> Core | None:
        return self.cores.get(architecture)


# ---------------------------------------------------------------------------
# CoreDependency: resolution output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CoreDependency:
    """A resolved dependency edge: the tool name and the release found for it."""

    tool_name: str
    release: ToolRelease

    def __str__(self) -> str:
        return f"{self.tool_name} v. {self.release.version}"
