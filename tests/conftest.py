"""Shared fixtures for toolcatalog tests."""

from __future__ import annotations

import json
import pathlib
from typing import Any

import pytest

from toolcatalog.core.catalog import Catalog, Index


def _system(host: str, name: str) -> dict[str, Any]:
    return {
        "host": host,
        "url": f"https://downloads.example.com/{name}",
        "archiveFileName": name,
        "checksum": "SHA-256:" + "0" * 64,
        "size": "1024",
    }


@pytest.fixture
def sample_index_data() -> dict[str, Any]:
    """A two-package index with one broken and one cross-package core."""
    return {
        "packages": [
            {
                "name": "arduino",
                "maintainer": "Arduino",
                "websiteURL": "https://www.arduino.cc/",
                "email": "packages@arduino.cc",
                "tools": [
                    {
                        "name": "avr-gcc",
                        "version": "1.0",
                        "systems": [
                            _system("x86_64-linux-gnu", "avr-gcc-1.0-linux.tar.bz2"),
                            _system("i686-mingw32", "avr-gcc-1.0-win.zip"),
                        ],
                    },
                    {
                        "name": "avr-gcc",
                        "version": "2.0",
                        "systems": [_system("x86_64-linux-gnu", "avr-gcc-2.0.tar.bz2")],
                    },
                    {
                        "name": "avrdude",
                        "version": "6.3",
                        "systems": [_system("x86_64-linux-gnu", "avrdude-6.3.tar.bz2")],
                    },
                ],
                "platforms": [
                    {
                        "name": "Arduino AVR Boards",
                        "architecture": "avr",
                        "version": "1.6.20",
                        "boards": [{"name": "Arduino Uno"}, {"name": "Arduino Mega"}],
                        "toolsDependencies": [
                            {"packager": "arduino", "name": "avr-gcc", "version": "1.0"},
                            {"packager": "arduino", "name": "avrdude", "version": "6.3"},
                        ],
                    },
                    {
                        "name": "Arduino AVR Boards",
                        "architecture": "avr",
                        "version": "1.6.21",
                        "toolsDependencies": [
                            {"packager": "arduino", "name": "avr-gcc", "version": "9.9"},
                        ],
                    },
                    {
                        "name": "Arduino SAMD Boards",
                        "architecture": "samd",
                        "version": "1.0.0",
                        "toolsDependencies": [
                            {"packager": "vendor", "name": "openocd", "version": "0.10"},
                        ],
                    },
                    {
                        "name": "Arduino Bare Boards",
                        "architecture": "bare",
                        "version": "0.1.0",
                    },
                ],
            },
            {
                "name": "vendor",
                "maintainer": "Vendor Inc.",
                "tools": [
                    {
                        "name": "openocd",
                        "version": "0.10",
                        "systems": [_system("x86_64-linux-gnu", "openocd-0.10.tar.bz2")],
                    },
                ],
            },
        ]
    }


@pytest.fixture
def sample_catalog(sample_index_data: dict[str, Any]) -> Catalog:
    return Index.from_dict(sample_index_data).create_catalog()


@pytest.fixture
def index_file(tmp_path: pathlib.Path, sample_index_data: dict[str, Any]) -> pathlib.Path:
    """Write the sample index to a JSON file."""
    path = tmp_path / "package_index.json"
    path.write_text(json.dumps(sample_index_data))
    return path
