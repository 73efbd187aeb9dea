"""Filter for narrowing candidate files down to scripts."""

import os
from collections.abc import Sequence


def filter_scripts(paths: Sequence[str], extension: str = "js") -> list[str]:
    """Keep only the paths whose extension marks them as script files."""
    suffix = extension if extension.startswith(".") else f".{extension}"
    return [p for p in paths if os.path.splitext(p)[1] == suffix]
