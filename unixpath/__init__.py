"""Unix path parsing and joining on bytes and strings.

Submodules: component (single components and constants), scan (low-level
scanners), parser (two-ended parser), components (component iteration)
and encoding (joining, checked joining and hashing).
"""

__version__ = "0.10.0"

__all__ = ["component", "scan", "parser", "components", "encoding"]