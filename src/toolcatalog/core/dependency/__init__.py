"""Exact-version resolution of core release tool dependencies.

Re-exports the resolver so callers can write
``from toolcatalog.core.dependency import DependencyResolver``.
"""

from toolcatalog.core.dependency.resolver import (
    DependencyResolver,
    resolve_dependencies,
    resolve_tool,
)

__all__ = [
    "DependencyResolver",
    "resolve_dependencies",
    "resolve_tool",
]
