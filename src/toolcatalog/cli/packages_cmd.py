"""``toolcatalog packages`` -- List the packages in an index.

Exit Codes:
    0 -- Listing printed.
    2 -- The index could not be read or is malformed.
"""

from __future__ import annotations

import json
import sys

import click

from toolcatalog.cli.catalog_loader import format_option, index_option, load_catalog


@click.command("packages")
@index_option
@format_option
def packages_command(index_path: str, output_format: str) -> None:
    """List package names in the index, sorted case-insensitively."""
    catalog = load_catalog(index_path, output_format)

    if output_format == "json":
        click.echo(json.dumps({"packages": catalog.names()}, indent=2))
    else:
        from toolcatalog.cli.output import print_package_names
        print_package_names(catalog)

    sys.exit(0)
