"""Package catalog: identity graph, index descriptors and the catalog itself.

The package is split into focused submodules:

- ``models``: Package, Tool, ToolRelease, Core, Release and the dependency
  edge types.
- ``status``: The ``Catalog`` mapping and its enumeration.
- ``index``: Raw index descriptors (``IndexPackage``, ``Index``) that the
  catalog is built from.

All public names are re-exported here so callers can write
``from toolcatalog.core.catalog import Catalog``.
"""

from toolcatalog.core.catalog.models import (
    Core,
    CoreDependency,
    Package,
    Release,
    Tool,
    ToolDependency,
    ToolDownload,
    ToolRelease,
)
from toolcatalog.core.catalog.status import Catalog
from toolcatalog.core.catalog.index import Index, IndexPackage

__all__ = [
    "Catalog",
    "Core",
    "CoreDependency",
    "Index",
    "IndexPackage",
    "Package",
    "Release",
    "Tool",
    "ToolDependency",
    "ToolDownload",
    "ToolRelease",
]
