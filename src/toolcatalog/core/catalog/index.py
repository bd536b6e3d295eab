"""Raw index descriptors and their conversion into catalog packages.

The index document follows the ``package_index.json`` layout::

    {
      "packages": [
        {
          "name": "arduino",
          "maintainer": "Arduino",
          "websiteURL": "https://www.arduino.cc/",
          "email": "packages@arduino.cc",
          "platforms": [
            {
              "name": "Arduino AVR Boards",
              "architecture": "avr",
              "version": "1.6.20",
              "boards": [{"name": "Arduino Uno"}],
              "toolsDependencies": [
                {"packager": "arduino", "name": "avr-gcc", "version": "4.9.2"}
              ]
            }
          ],
          "tools": [
            {
              "name": "avr-gcc",
              "version": "4.9.2",
              "systems": [
                {"host": "x86_64-linux-gnu", "url": "...",
                 "archiveFileName": "...", "checksum": "SHA-256:...",
                 "size": "27400001"}
              ]
            }
          ]
        }
      ]
    }

Fetching the document is the caller's job. This module only validates an
already-retrieved document and extracts ``Package`` objects from it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from toolcatalog.core.catalog.models import (
    Core,
    Package,
    Release,
    Tool,
    ToolDependency,
    ToolDownload,
    ToolRelease,
)
from toolcatalog.core.catalog.status import Catalog
from toolcatalog.exceptions import IndexFormatError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _require_str(entry: dict[str, Any], key: str, where: str) -> str:
    value = entry.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Unquoted YAML scalars such as `version: 1.0` decode as numbers.
        raise IndexFormatError(
            f"{where}: {key!r} must be a quoted string, got {value!r}"
        )
    if not isinstance(value, str) or not value:
        raise IndexFormatError(f"{where}: missing or invalid {key!r}")
    return value


def _optional_str(entry: dict[str, Any], key: str, where: str) -> str:
    value = entry.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise IndexFormatError(f"{where}: {key!r} must be a string")
    return value


def _list_of_dicts(entry: dict[str, Any], key: str, where: str) -> list[dict[str, Any]]:
    value = entry.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise IndexFormatError(f"{where}: {key!r} must be a list of objects")
    return value


def _parse_size(value: Any, where: str) -> int:
    # Published indexes carry sizes as decimal strings.
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise IndexFormatError(f"{where}: invalid size {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise IndexFormatError(f"{where}: invalid size {value!r}") from None


# ---------------------------------------------------------------------------
# IndexPackage: one raw package descriptor
# ---------------------------------------------------------------------------


@dataclass
class IndexPackage:
    """A package entry as it appears in the index document.

    Attributes:
        name: Package name.
        maintainer: Maintainer name.
        website_url: Vendor website.
        email: Maintainer contact.
        platforms: Raw platform (core release) entries.
        tools: Raw tool release entries.
    """

    name: str
    maintainer: str = ""
    website_url: str = ""
    email: str = ""
    platforms: list[dict[str, Any]] = field(default_factory=list)
    tools: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IndexPackage:
        """Validate the top-level fields of a raw package entry.

        Raises:
            IndexFormatError: If the entry is not an object or lacks a name.
        """
        if not isinstance(data, dict):
            raise IndexFormatError("package entry must be an object")
        name = _require_str(data, "name", "package")
        where = f"package {name!r}"
        return cls(
            name=name,
            maintainer=_optional_str(data, "maintainer", where),
            website_url=_optional_str(data, "websiteURL", where),
            email=_optional_str(data, "email", where),
            platforms=_list_of_dicts(data, "platforms", where),
            tools=_list_of_dicts(data, "tools", where),
        )

    def extract_package(self) -> Package:
        """Convert this descriptor into a ``Package``.

        Platforms are grouped by architecture into cores, and tool entries
        by name into tools. A later entry for the same (architecture,
        version) or (tool, version) replaces the earlier one.

        Raises:
            IndexFormatError: If a platform or tool entry is malformed.
        """
        package = Package(
            name=self.name,
            maintainer=self.maintainer,
            website_url=self.website_url,
            email=self.email,
        )
        for entry in self.tools:
            self._add_tool_release(package, entry)
        for entry in self.platforms:
            self._add_core_release(package, entry)
        return package

    def _add_tool_release(self, package: Package, entry: dict[str, Any]) -> None:
        where = f"package {self.name!r} tool"
        name = _require_str(entry, "name", where)
        version = _require_str(entry, "version", f"{where} {name!r}")
        where = f"package {self.name!r} tool {name}@{version}"

        downloads = []
        for system in _list_of_dicts(entry, "systems", where):
            downloads.append(
                ToolDownload(
                    host=_require_str(system, "host", where),
                    url=_require_str(system, "url", where),
                    archive_file_name=_optional_str(system, "archiveFileName", where),
                    checksum=_optional_str(system, "checksum", where),
                    size=_parse_size(system.get("size"), where),
                )
            )

        tool = package.tools.get(name)
        if tool is None:
            tool = Tool(name=name, package_name=package.name)
            package.tools[name] = tool
        tool.releases[version] = ToolRelease(version=version, downloads=tuple(downloads))

    def _add_core_release(self, package: Package, entry: dict[str, Any]) -> None:
        where = f"package {self.name!r} platform"
        architecture = _require_str(entry, "architecture", where)
        version = _require_str(entry, "version", f"{where} {architecture!r}")
        where = f"package {self.name!r} platform {architecture}@{version}"

        dependencies = [
            ToolDependency(
                packager=_require_str(dep, "packager", where),
                tool_name=_require_str(dep, "name", where),
                tool_version=_require_str(dep, "version", where),
            )
            for dep in _list_of_dicts(entry, "toolsDependencies", where)
        ]
        boards = [
            _require_str(board, "name", where)
            for board in _list_of_dicts(entry, "boards", where)
        ]

        core = package.cores.get(architecture)
        if core is None:
            core = Core(name="", architecture=architecture)
            package.cores[architecture] = core
        core.name = _optional_str(entry, "name", where) or core.name or architecture
        core.releases[version] = Release(
            version=version, dependencies=dependencies, boards=boards
        )


# ---------------------------------------------------------------------------
# Index: a whole index document
# ---------------------------------------------------------------------------


@dataclass
class Index:
    """A parsed index document: an ordered list of package descriptors."""

    packages: list[IndexPackage] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Index:
        """Build an ``Index`` from a decoded index document.

        Raises:
            IndexFormatError: If the document has no ``packages`` list or
                any package entry is malformed.
        """
        if not isinstance(data, dict) or not isinstance(data.get("packages"), list):
            raise IndexFormatError("index document must contain a 'packages' list")
        return cls(packages=[IndexPackage.from_dict(p) for p in data["packages"]])

    @classmethod
    def from_json(cls, json_str: str) -> Index:
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as exc:
            raise IndexFormatError(f"invalid JSON index: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def read(cls, path: Path | str) -> Index:
        """Load an index file from disk.

        Files ending in ``.yaml`` or ``.yml`` are decoded as YAML, anything
        else as JSON.

        Raises:
            IndexFormatError: If the file cannot be read or decoded, or
                the document is malformed.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise IndexFormatError(f"cannot read index {path}: {exc}") from exc

        if path.suffix.lower() in _YAML_SUFFIXES:
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise IndexFormatError(f"invalid YAML index {path}: {exc}") from exc
            index = cls.from_dict(data)
        else:
            index = cls.from_json(text)

        logger.debug("Loaded %d packages from %s", len(index.packages), path)
        return index

    def create_catalog(self) -> Catalog:
        """Build a ``Catalog`` from this index's packages."""
        return Catalog.from_index(self.packages)
