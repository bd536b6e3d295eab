"""toolcatalog CLI -- Inspect package indexes and resolve core tool dependencies.

Entry point for the ``toolcatalog`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    packages -- List the packages in an index.
    deps     -- Resolve the tool releases a core release depends on.

Usage::

    toolcatalog packages --index package_index.json
    toolcatalog deps arduino:avr@1.6.20 --index package_index.json
    TOOLCATALOG_INDEX=package_index.json toolcatalog deps arduino:avr@1.6.20
"""

from __future__ import annotations

import logging

import click

from toolcatalog import __version__
from toolcatalog.cli.deps_cmd import deps_command
from toolcatalog.cli.packages_cmd import packages_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """toolcatalog: Package catalog and tool dependency resolution.

    Load a package index, list its packages, and resolve the exact tool
    releases a hardware core release needs to build or upload.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(packages_command)
cli.add_command(deps_command)
