"""Utility for producing loader-compatible path separators."""

import os


def normalize_path(path: str, sep: str = os.sep) -> str:
    """Rewrite backslash separators to forward slashes on Windows-style hosts."""
    if sep == "\\":
        return path.replace("\\", "/")
    return path
