"""Logic for building a single module name to path entry."""

import os
from collections.abc import Callable, Iterable, Sequence

from rjs_paths.derive_name import DEFAULT_STRIP_TOKENS, derive_name
from rjs_paths.derive_path import derive_path
from rjs_paths.name_source import NameSource, choose_name_source


def disambiguate(
    candidate: str,
    candidates: Sequence[str],
    package_name: str,
    base_dir: str,
    *,
    extension: str = "js",
    strip_tokens: Iterable[str] = DEFAULT_STRIP_TOKENS,
    report: Callable[[str], None] | None = None,
) -> dict[str, str]:
    """Build the ``{name: path}`` entry for one candidate file.

    The name comes from the candidate's own file name when the dependency has
    several candidates and from the package name otherwise. The path is
    always derived from the candidate.
    """
    source = choose_name_source(len(candidates))
    if source is NameSource.FROM_FILENAME:
        raw_name = os.path.basename(candidate)
    else:
        raw_name = package_name

    name = derive_name(raw_name, strip_tokens, report)
    return {name: derive_path(candidate, base_dir, extension)}
