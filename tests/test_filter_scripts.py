"""Tests for the script extension filter."""

from rjs_paths.filter_scripts import filter_scripts


def test_keeps_only_scripts_in_order() -> None:
    """Verify non-script files are dropped and order is preserved."""
    assert filter_scripts(["a.js", "b.css", "c.js"]) == ["a.js", "c.js"]


def test_input_not_mutated() -> None:
    """Verify the caller's list is left untouched."""
    paths = ["a.js", "b.less"]
    filter_scripts(paths)
    assert paths == ["a.js", "b.less"]


def test_extension_is_last_suffix_of_basename() -> None:
    """Verify only the final suffix of the file name counts."""
    paths = ["lib.js/readme.md", "foo.js.map", "dist/foo.min.js", ".js"]
    assert filter_scripts(paths) == ["dist/foo.min.js"]


def test_custom_extension() -> None:
    """Verify a configured extension with or without a leading dot."""
    assert filter_scripts(["a.coffee", "b.js"], "coffee") == ["a.coffee"]
    assert filter_scripts(["a.coffee", "b.js"], ".coffee") == ["a.coffee"]
