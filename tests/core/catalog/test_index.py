"""Tests for index document parsing and package extraction."""

from __future__ import annotations

import json
import pathlib
from typing import Any

import pytest
import yaml

from toolcatalog.core.catalog import Index, IndexPackage, ToolDependency
from toolcatalog.exceptions import IndexFormatError, ToolCatalogError


class TestExtractPackage:
    def test_package_metadata(self, sample_index_data: dict[str, Any]) -> None:
        index = Index.from_dict(sample_index_data)
        pkg = index.packages[0].extract_package()
        assert pkg.name == "arduino"
        assert pkg.maintainer == "Arduino"
        assert pkg.website_url == "https://www.arduino.cc/"
        assert pkg.email == "packages@arduino.cc"

    def test_tools_grouped_by_name(self, sample_index_data: dict[str, Any]) -> None:
        pkg = Index.from_dict(sample_index_data).packages[0].extract_package()
        assert set(pkg.tools) == {"avr-gcc", "avrdude"}
        avr_gcc = pkg.tools["avr-gcc"]
        assert avr_gcc.package_name == "arduino"
        assert avr_gcc.versions() == ["1.0", "2.0"]

    def test_tool_downloads(self, sample_index_data: dict[str, Any]) -> None:
        pkg = Index.from_dict(sample_index_data).packages[0].extract_package()
        release = pkg.tools["avr-gcc"].releases["1.0"]
        assert len(release.downloads) == 2
        linux = release.download_for("x86_64-linux-gnu")
        assert linux is not None
        assert linux.archive_file_name == "avr-gcc-1.0-linux.tar.bz2"
        assert linux.size == 1024

    def test_cores_grouped_by_architecture(self, sample_index_data: dict[str, Any]) -> None:
        pkg = Index.from_dict(sample_index_data).packages[0].extract_package()
        assert set(pkg.cores) == {"avr", "samd", "bare"}
        avr = pkg.cores["avr"]
        assert avr.name == "Arduino AVR Boards"
        assert avr.versions() == ["1.6.20", "1.6.21"]

    def test_release_dependencies_in_order(self, sample_index_data: dict[str, Any]) -> None:
        pkg = Index.from_dict(sample_index_data).packages[0].extract_package()
        release = pkg.cores["avr"].releases["1.6.20"]
        assert release.dependencies == [
            ToolDependency("arduino", "avr-gcc", "1.0"),
            ToolDependency("arduino", "avrdude", "6.3"),
        ]
        assert release.boards == ["Arduino Uno", "Arduino Mega"]

    def test_platform_without_dependencies(self, sample_index_data: dict[str, Any]) -> None:
        pkg = Index.from_dict(sample_index_data).packages[0].extract_package()
        assert pkg.cores["bare"].releases["0.1.0"].dependencies == []

    def test_duplicate_tool_release_last_wins(self) -> None:
        desc = IndexPackage(
            name="p",
            tools=[
                {"name": "t", "version": "1.0", "systems": [{"host": "a", "url": "u1"}]},
                {"name": "t", "version": "1.0", "systems": [{"host": "b", "url": "u2"}]},
            ],
        )
        release = desc.extract_package().tools["t"].releases["1.0"]
        assert [d.host for d in release.downloads] == ["b"]

    def test_core_name_falls_back_to_architecture(self) -> None:
        desc = IndexPackage(name="p", platforms=[{"architecture": "esp32", "version": "2.0"}])
        assert desc.extract_package().cores["esp32"].name == "esp32"

    def test_integer_size_accepted(self) -> None:
        desc = IndexPackage(
            name="p",
            tools=[{"name": "t", "version": "1", "systems": [{"host": "h", "url": "u", "size": 42}]}],
        )
        assert desc.extract_package().tools["t"].releases["1"].downloads[0].size == 42


class TestMalformedIndex:
    def test_missing_packages_key(self) -> None:
        with pytest.raises(IndexFormatError, match="packages"):
            Index.from_dict({})

    def test_not_an_object(self) -> None:
        with pytest.raises(IndexFormatError):
            Index.from_dict([])  # type: ignore[arg-type]

    def test_package_without_name(self) -> None:
        with pytest.raises(IndexFormatError, match="name"):
            Index.from_dict({"packages": [{"maintainer": "x"}]})

    def test_package_entry_not_object(self) -> None:
        with pytest.raises(IndexFormatError):
            Index.from_dict({"packages": ["arduino"]})

    def test_tools_not_a_list(self) -> None:
        with pytest.raises(IndexFormatError, match="tools"):
            Index.from_dict({"packages": [{"name": "p", "tools": {"name": "t"}}]})

    def test_tool_without_version(self) -> None:
        desc = IndexPackage(name="p", tools=[{"name": "t"}])
        with pytest.raises(IndexFormatError, match="version"):
            desc.extract_package()

    def test_dependency_without_packager(self) -> None:
        desc = IndexPackage(
            name="p",
            platforms=[{
                "architecture": "avr", "version": "1.0",
                "toolsDependencies": [{"name": "avr-gcc", "version": "1.0"}],
            }],
        )
        with pytest.raises(IndexFormatError, match="packager"):
            desc.extract_package()

    def test_bad_size(self) -> None:
        desc = IndexPackage(
            name="p",
            tools=[{"name": "t", "version": "1", "systems": [{"host": "h", "url": "u", "size": "big"}]}],
        )
        with pytest.raises(IndexFormatError, match="size"):
            desc.extract_package()

    def test_invalid_json(self) -> None:
        with pytest.raises(IndexFormatError, match="JSON"):
            Index.from_json("{not json")

    def test_error_is_toolcatalog_error(self) -> None:
        with pytest.raises(ToolCatalogError):
            Index.from_dict({})


class TestRead:
    def test_read_json(self, index_file: pathlib.Path) -> None:
        index = Index.read(index_file)
        assert [p.name for p in index.packages] == ["arduino", "vendor"]

    def test_read_yaml(
        self, tmp_path: pathlib.Path, sample_index_data: dict[str, Any]
    ) -> None:
        path = tmp_path / "index.yaml"
        path.write_text(yaml.safe_dump(sample_index_data))
        catalog = Index.read(path).create_catalog()
        assert catalog.names() == ["arduino", "vendor"]

    def test_read_missing_file(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(IndexFormatError, match="cannot read"):
            Index.read(tmp_path / "missing.json")

    def test_read_invalid_yaml(self, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "index.yml"
        path.write_text("packages: [unclosed\n")
        with pytest.raises(IndexFormatError, match="YAML"):
            Index.read(path)

    def test_unquoted_yaml_version(self, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "index.yaml"
        path.write_text(
            "packages:\n"
            "  - name: arduino\n"
            "    tools:\n"
            "      - name: avr-gcc\n"
            "        version: 1.0\n"
        )
        with pytest.raises(IndexFormatError, match="'version' must be a quoted string, got 1.0"):
            Index.read(path).create_catalog()

    def test_create_catalog(self, index_file: pathlib.Path) -> None:
        catalog = Index.read(index_file).create_catalog()
        assert len(catalog) == 2
        assert catalog.get_package("vendor").get_tool("openocd") is not None

    def test_roundtrip_through_json_text(self, sample_index_data: dict[str, Any]) -> None:
        index = Index.from_json(json.dumps(sample_index_data))
        assert len(index.packages) == 2
