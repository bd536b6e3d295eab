"""toolcatalog: Package catalog and tool dependency resolution for hardware cores."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
