"""Default lookup for the primary script of a package directory."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

BUILD_SCRIPTS = {"gruntfile", "gulpfile"}


def find_primary(
    package_name: str,
    directory: str,
    search_dirs: Iterable[str] = ("dist",),
    extension: str = "js",
) -> str | None:
    """Find the entry-point script of a package directory.

    The directory itself is searched first, then each of ``search_dirs``
    below it. Each rule is tried across all of those folders before the
    next one:

    1. ``<package_name>.js``
    2. ``<folder name of directory>.js``
    3. the ``main`` entry of ``package.json``
    4. the only top-level script, if there is exactly one, ignoring build
       scripts (``Gruntfile.js``, ``gulpfile.js``) and minified copies
    """
    root = Path(directory)
    suffix = extension if extension.startswith(".") else f".{extension}"
    folders = [f for f in (root, *(root / d for d in search_dirs)) if f.is_dir()]

    found = None
    for folder in folders:
        found = _find_named(folder, package_name, root.name, suffix)
        if found:
            break
    else:
        for folder in folders:
            found = _find_single_script(folder, suffix)
            if found:
                break

    if found:
        logger.debug("Primary file for %s: %s", package_name, found)
        return str(found)

    logger.debug("No primary file for %s under %s", package_name, directory)
    return None


def _find_named(
    folder: Path, package_name: str, dir_name: str, suffix: str
) -> Path | None:
    for stem in (package_name, dir_name):
        candidate = folder / f"{stem}{suffix}"
        if candidate.is_file():
            return candidate

    main = _package_main(folder / "package.json")
    if main:
        candidate = folder / main
        if candidate.suffix == suffix and candidate.is_file():
            return candidate
    return None


def _find_single_script(folder: Path, suffix: str) -> Path | None:
    try:
        scripts = sorted(
            p
            for p in folder.iterdir()
            if p.suffix == suffix and p.is_file() and _is_candidate(p.stem)
        )
    except OSError as e:
        logger.warning("Could not list %s: %s", folder, e)
        return None
    if len(scripts) == 1:
        return scripts[0]
    return None


def _is_candidate(stem: str) -> bool:
    return stem.lower() not in BUILD_SCRIPTS and not stem.endswith(".min")


def _package_main(manifest: Path) -> str | None:
    """Read the ``main`` field of a package.json, if there is a usable one."""
    if not manifest.is_file():
        return None
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", manifest, e)
        return None
    main = data.get("main") if isinstance(data, dict) else None
    return main if isinstance(main, str) and main else None
