"""Tests for module name derivation."""

import logging

import pytest

from rjs_paths.derive_name import derive_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("typeahead.js", "typeahead"),
        ("foo.min.js", "foo"),
        ("handlebars.runtime.js", "handlebars.runtime"),
        ("js.cookie", "cookie"),
        ("jquery", "jquery"),
    ],
)
def test_strips_tokens(raw: str, expected: str) -> None:
    """Verify js and min tokens are removed wherever they appear."""
    assert derive_name(raw, report=lambda _: None) == expected


def test_idempotent() -> None:
    """Verify deriving a derived name changes nothing."""
    notices: list[str] = []
    once = derive_name("foo.min.js", report=notices.append)
    assert derive_name(once, report=notices.append) == once
    assert len(notices) == 1


def test_rename_reported_once() -> None:
    """Verify a single notice is emitted for an altered name."""
    notices: list[str] = []
    derive_name("typeahead.js", report=notices.append)
    assert notices == ["Renaming typeahead.js to typeahead"]


def test_unchanged_name_not_reported() -> None:
    """Verify names without matching tokens produce no notice."""
    notices: list[str] = []
    assert derive_name("backbone", report=notices.append) == "backbone"
    assert notices == []


def test_only_strip_tokens_kept_unchanged() -> None:
    """Verify a name made only of stripped tokens is left alone."""
    notices: list[str] = []
    assert derive_name("min.js", report=notices.append) == "min.js"
    assert notices == []


def test_custom_strip_tokens() -> None:
    """Verify configured tokens replace the defaults."""
    assert derive_name("foo.debug.js", ["debug"], lambda _: None) == "foo.js"


def test_default_sink_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Verify the default sink writes the notice as a warning."""
    with caplog.at_level(logging.WARNING, logger="rjs_paths.derive_name"):
        derive_name("foo.min.js")
    assert "Renaming foo.min.js to foo" in caplog.text
