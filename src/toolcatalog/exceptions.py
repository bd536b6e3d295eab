"""toolcatalog exception hierarchy.

All public exceptions inherit from ToolCatalogError, giving callers a single
base class to catch when they want to handle any catalog failure without
swallowing unrelated errors.
"""


class ToolCatalogError(Exception):
    """Base exception for all toolcatalog errors."""


class InvalidInputError(ToolCatalogError, ValueError):
    """Raised when an operation is called without a required argument.

    Resolving the dependencies of a release that does not exist is the
    typical case: the caller must look the release up first.
    """


class IndexFormatError(ToolCatalogError):
    """Raised when index data cannot be turned into catalog packages.

    Covers unreadable files, invalid JSON/YAML, and entries that are
    missing required keys or carry values of the wrong type.
    """


class ResolutionError(ToolCatalogError):
    """Raised when a tool dependency edge cannot be resolved.

    Subclasses name the lookup step that failed, and carry the identity
    of the missing package, tool, or version as attributes.
    """


class PackageNotFoundError(ResolutionError):
    """The dependency names a package that is not in the catalog."""

    def __init__(self, packager: str) -> None:
        self.packager = packager
        super().__init__(f"Package {packager} not found")


class ToolNotFoundError(ResolutionError):
    """The package exists but does not offer the named tool."""

    def __init__(self, packager: str, tool_name: str) -> None:
        self.packager = packager
        self.tool_name = tool_name
        super().__init__(f"Tool {tool_name} not found in package {packager}")


class ReleaseNotFoundError(ResolutionError):
    """The tool exists but does not offer the named version."""

    def __init__(self, packager: str, tool_name: str, version: str) -> None:
        self.packager = packager
        self.tool_name = tool_name
        self.version = version
        super().__init__(
            f"Tool version {version} not found for {packager}:{tool_name}"
        )
