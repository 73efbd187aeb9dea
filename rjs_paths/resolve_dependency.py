"""Resolve one manifest dependency into module loader path entries.

A dependency is declared as a single file, a list of files, or a package
directory. The result maps each module name to its extension-less path
relative to the loader's base directory, e.g.::

    >>> resolve_dependency("lib/foo.js", "foo", "lib").paths
    {'foo': 'foo'}
"""

import logging
import os
from collections.abc import Callable, Sequence
from typing import Any, Literal

from rjs_paths.disambiguate import disambiguate
from rjs_paths.filter_scripts import filter_scripts
from rjs_paths.find_primary import find_primary
from rjs_paths.load_config import DEFAULT_CONFIG
from rjs_paths.resolution_result import ResolutionResult

logger = logging.getLogger(__name__)

Descriptor = str | Sequence[str]
PrimaryLookup = Callable[[str, str], str | None]


def resolve_dependency(
    descriptor: Descriptor,
    package_name: str,
    base_dir: str,
    *,
    config: dict[str, Any] | None = None,
    lookup_primary: PrimaryLookup | None = None,
    is_dir: Callable[[str], bool] = os.path.isdir,
    report: Callable[[str], None] | None = None,
) -> ResolutionResult | Literal[False]:
    """Resolve a dependency descriptor to its module name to path entries.

    Returns ``False`` when the descriptor is a directory whose primary file
    cannot be found; callers should skip that dependency.
    """
    config = config or DEFAULT_CONFIG
    extension = config["extension"]

    dep: Any = descriptor
    if isinstance(dep, str) and is_dir(dep):
        lookup = lookup_primary or _default_lookup(config)
        dep = lookup(package_name, dep)
        # An empty string is as good as no file at all
        if not dep:
            logger.info("Skipping %s: no primary file found", package_name)
            return False

    if not isinstance(dep, str) and len(dep) > 1:
        kept = filter_scripts(dep, extension)
        if len(kept) != len(dep):
            logger.debug(
                "Dropped %d non-script file(s) from %s",
                len(dep) - len(kept),
                package_name,
            )
        dep = kept

    candidates = [dep] if isinstance(dep, str) else list(dep)

    paths: dict[str, str] = {}
    for candidate in candidates:
        paths.update(
            disambiguate(
                candidate,
                candidates,
                package_name,
                base_dir,
                extension=extension,
                strip_tokens=config["strip_tokens"],
                report=report,
            )
        )
    return ResolutionResult(paths=paths)


def _default_lookup(config: dict[str, Any]) -> PrimaryLookup:
    search_dirs = (config.get("primary") or {}).get("search_dirs") or []

    def lookup(package_name: str, directory: str) -> str | None:
        return find_primary(
            package_name, directory, search_dirs, config["extension"]
        )

    return lookup
