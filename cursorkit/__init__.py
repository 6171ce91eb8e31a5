"""Position-based cursors, adaptors over them and conformance checks."""

__version__ = "0.1.0"

__all__ = [
    "traversal",
    "cursor",
    "counting",
    "filter",
    "indirect",
    "zip",
    "permutation",
    "conformance",
]