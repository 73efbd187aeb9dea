"""Decision rule for where a module name comes from."""

from enum import Enum


class NameSource(Enum):
    """Origin of a resolved module name."""

    FROM_FILENAME = "filename"
    FROM_PACKAGE_NAME = "package_name"


def choose_name_source(candidate_count: int) -> NameSource:
    """Pick the name source for a dependency with ``candidate_count`` files.

    Multi-file packages cannot share one name across their files, so each
    file is named after itself. A single-file package keeps its declared
    package name even when the file is called something else.
    """
    if candidate_count > 1:
        return NameSource.FROM_FILENAME
    return NameSource.FROM_PACKAGE_NAME
