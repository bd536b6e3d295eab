"""Rich output formatting helpers for the toolcatalog CLI."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from toolcatalog.core.catalog import Catalog, CoreDependency, ToolDependency

console = Console()


def print_package_names(catalog: Catalog) -> None:
    """Print the catalog's package names with their tool and core counts."""
    names = catalog.names()
    if not names:
        console.print("[dim]No packages in the index.[/dim]")
        return

    table = Table(title="Packages", show_header=True, header_style="bold")
    table.add_column("Package", style="bold")
    table.add_column("Maintainer", style="dim")
    table.add_column("Tools", justify="right")
    table.add_column("Cores", justify="right")
    for name in names:
        package = catalog.packages[name]
        table.add_row(
            Text(name), Text(package.maintainer or "-"),
            str(len(package.tools)), str(len(package.cores)),
        )
    console.print(table)


def print_dependencies(
    core_ref: str, resolved: list[tuple[ToolDependency, CoreDependency]]
) -> None:
    """Print the resolved tool releases of a core release.

    Args:
        core_ref: The core release reference as given on the command line.
        resolved: (declared edge, resolved dependency) pairs, in declaration
            order.
    """
    console.print(Panel(Text(core_ref, style="bold"), title="Core Release"))
    if not resolved:
        console.print("[dim]No tool dependencies.[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Tool", style="bold")
    table.add_column("Version")
    table.add_column("Package", style="dim")
    for edge, dep in resolved:
        table.add_row(
            Text(dep.tool_name), Text(dep.release.version), Text(edge.packager),
        )
    console.print(table)


def print_resolution_failure(core_ref: str, message: str) -> None:
    """Print a resolution failure with the broken identity."""
    console.print(
        Panel(Text("Resolution failed", style="bold red"),
              title="Dependency Resolution")
    )
    console.print(Text(f"  {core_ref}: {message}", style="red"))
    console.print("[dim]  The index may be out of date. Refresh it and retry.[/dim]")
