"""Tests for HTML/CSS snippet rendering."""

import pytest

from cdn_resolver import resolve
from cdn_resolver.snippets import css_import, link_tag, render, script_tag


def test_script_tag():
    assert script_tag("https://cdn.x/npm/a.js") == '<script src="https://cdn.x/npm/a.js"></script>'


def test_link_tag_escapes_ampersand():
    """Query strings are HTML-escaped inside the attribute."""
    url = "https://cdn.x/gfonts/css2?family=Inter&display=swap"
    assert link_tag(url) == '<link href="https://cdn.x/gfonts/css2?family=Inter&amp;display=swap" rel="stylesheet">'


def test_css_import():
    assert css_import("https://cdn.x/a.css") == "@import url('https://cdn.x/a.css');"


def test_css_import_encodes_quote():
    assert css_import("https://cdn.x/gh/o/r/main/it's.css") == "@import url('https://cdn.x/gh/o/r/main/it%27s.css');"


class TestRenderAuto:
    """Tests for render(style='auto')."""

    def test_fonts_use_link(self):
        result = resolve("https://fonts.googleapis.com/css2?family=Inter")
        assert render(result, "auto").startswith("<link ")

    def test_css_file_uses_link(self):
        result = resolve("bootstrap@5.3.0/dist/css/bootstrap.min.css")
        assert render(result, "auto").startswith("<link ")

    def test_js_file_uses_script(self):
        result = resolve("react@18.2.0/umd/react.production.min.js")
        assert render(result, "auto") == (
            '<script src="https://cdn.staticdelivr.com/npm/react@18.2.0/umd/react.production.min.js"></script>'
        )

    def test_other_files_use_url(self):
        result = resolve("user/repo/main/logo.svg")
        assert render(result, "auto") == "https://cdn.staticdelivr.com/gh/user/repo/main/logo.svg"


def test_render_url_default():
    result = resolve("lodash")
    assert render(result) == result.canonical_url


def test_render_unknown_style():
    with pytest.raises(ValueError):
        render(resolve("lodash"), "iframe")
