"""``toolcatalog deps <packager:arch@version>`` -- Resolve a core's tool releases.

Looks up the core release in the index and resolves each of its tool
dependencies to the exact tool release it names.

Exit Codes:
    0 -- All dependencies resolved.
    1 -- A dependency names a package, tool, or version missing from the index.
    2 -- Malformed reference, unknown core release, or unreadable index.
"""

from __future__ import annotations

import json
import re
import sys

import click

from toolcatalog.cli.catalog_loader import (
    fail,
    format_option,
    index_option,
    load_catalog,
)
from toolcatalog.core.dependency import DependencyResolver
from toolcatalog.exceptions import ResolutionError

# packager:architecture@version, e.g. "arduino:avr@1.6.20"
_CORE_REF_RE = re.compile(r"^(?P<packager>[^:@\s]+):(?P<arch>[^:@\s]+)@(?P<version>\S+)$")


@click.command("deps")
@click.argument("core_ref")
@index_option
@format_option
def deps_command(core_ref: str, index_path: str, output_format: str) -> None:
    """Resolve the tool dependencies of CORE_REF (packager:arch@version).

    Exit code 0 on success, 1 if a dependency cannot be resolved, 2 if the
    reference is malformed, the core release is unknown, or the index
    cannot be read.
    """
    match = _CORE_REF_RE.match(core_ref)
    if match is None:
        fail(
            f"invalid core reference {core_ref!r}, expected packager:arch@version",
            output_format, 2,
        )

    catalog = load_catalog(index_path, output_format)
    release = catalog.find_release(
        match.group("packager"), match.group("arch"), match.group("version")
    )
    if release is None:
        fail(f"core release {core_ref} not found in index", output_format, 2)

    try:
        deps = DependencyResolver(catalog).resolve(release)
    except ResolutionError as exc:
        if output_format == "json":
            click.echo(json.dumps({"core": core_ref, "error": str(exc)}))
        else:
            from toolcatalog.cli.output import print_resolution_failure
            print_resolution_failure(core_ref, str(exc))
        sys.exit(1)

    resolved = list(zip(release.dependencies, deps))
    if output_format == "json":
        click.echo(json.dumps({
            "core": core_ref,
            "dependencies": [
                {
                    "packager": edge.packager,
                    "tool": dep.tool_name,
                    "version": dep.release.version,
                }
                for edge, dep in resolved
            ],
        }, indent=2))
    else:
        from toolcatalog.cli.output import print_dependencies
        print_dependencies(core_ref, resolved)

    sys.exit(0)
