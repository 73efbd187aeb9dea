"""Logic for deriving module names from dotted file or package names."""

import logging
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

DEFAULT_STRIP_TOKENS = ("js", "min")


def log_rename(message: str) -> None:
    """Default diagnostic sink: emit the rename notice as a warning."""
    logger.warning("%s", message)


def derive_name(
    dotted_name: str,
    strip_tokens: Iterable[str] = DEFAULT_STRIP_TOKENS,
    report: Callable[[str], None] | None = None,
) -> str:
    """Strip extension-like tokens such as ``js`` or ``min`` from a name.

    Every occurrence is removed, not only trailing ones:

    - ``typeahead.js`` -> ``typeahead``
    - ``foo.min.js`` -> ``foo``
    - ``handlebars.runtime.js`` -> ``handlebars.runtime``

    A name made up only of stripped tokens is returned unchanged. When the
    name changes, ``report`` receives a single ``Renaming <old> to <new>``
    notice.
    """
    stripped = set(strip_tokens)
    kept = [part for part in dotted_name.split(".") if part not in stripped]
    if not kept:
        return dotted_name

    new_name = ".".join(kept) if len(kept) > 1 else kept[0]

    if new_name != dotted_name:
        (report or log_rename)(f"Renaming {dotted_name} to {new_name}")

    return new_name
