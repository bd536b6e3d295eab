"""Shared ``--index`` option and catalog loading for CLI commands."""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from toolcatalog.core.catalog import Catalog, Index
from toolcatalog.exceptions import IndexFormatError

INDEX_ENVVAR = "TOOLCATALOG_INDEX"

index_option = click.option(
    "--index", "index_path",
    type=click.Path(dir_okay=False),
    envvar=INDEX_ENVVAR,
    required=True,
    help=f"Path to a package index file (JSON or YAML). Env: {INDEX_ENVVAR}.",
)

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)


def fail(message: str, output_format: str, exit_code: int) -> NoReturn:
    """Report *message* in the requested format and exit."""
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(exit_code)


def load_catalog(index_path: str, output_format: str) -> Catalog:
    """Read the index at *index_path* and build a catalog, or exit with code 2."""
    try:
        return Index.read(index_path).create_catalog()
    except IndexFormatError as exc:
        fail(str(exc), output_format, 2)
