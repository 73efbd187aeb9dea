"""Logic for deriving loader paths relative to the base directory."""

import os

from rjs_paths.normalize_path import normalize_path


def remove_extension(file_path: str, extension: str) -> str:
    """Remove an extension from the file name, leaving folder names alone."""
    if not extension.startswith("."):
        extension = f".{extension}"
    dirname, basename = os.path.split(file_path)
    # A file called exactly ".js" keeps its name
    if basename.endswith(extension) and basename != extension:
        basename = basename[: -len(extension)]
    return os.path.join(dirname, basename)


def derive_path(
    file_path: str,
    base_dir: str,
    extension: str = "js",
    sep: str = os.sep,
) -> str:
    """Return the extension-less path of ``file_path`` relative to ``base_dir``."""
    relative = os.path.relpath(remove_extension(file_path, extension), base_dir)
    return normalize_path(relative, sep)
