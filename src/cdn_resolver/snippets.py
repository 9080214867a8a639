"""HTML and CSS snippets wrapping a canonical CDN URL."""

from __future__ import annotations

import html

from .models import ResolutionResult, SourceFamily

_SCRIPT_EXTENSIONS = (".js", ".mjs", ".cjs")
_STYLE_EXTENSIONS = (".css",)


def script_tag(url: str) -> str:
    return f'<script src="{html.escape(url)}"></script>'


def link_tag(url: str) -> str:
    return f'<link href="{html.escape(url)}" rel="stylesheet">'


def css_import(url: str) -> str:
    # a quote would end the CSS string early
    quoted = url.replace("'", "%27")
    return f"@import url('{quoted}');"


def _auto_style(result: ResolutionResult) -> str:
    """Pick a snippet style from the source family and file extension."""
    ref = result.reference
    if ref.family == SourceFamily.GOOGLE_FONTS:
        return "link"
    file_path = (ref.file_path or "").lower()
    if file_path.endswith(_STYLE_EXTENSIONS):
        return "link"
    if file_path.endswith(_SCRIPT_EXTENSIONS):
        return "script"
    return "url"


def render(result: ResolutionResult, style: str = "url") -> str:
    """Render a resolved URL in the requested style.

    Args:
        result: Successful resolution.
        style: One of "url", "script", "link", "import" or "auto".

    Returns:
        Snippet text.

    Raises:
        ValueError: If style is not recognized.
    """
    if style == "auto":
        style = _auto_style(result)
    url = result.canonical_url
    if style == "url":
        return url
    if style == "script":
        return script_tag(url)
    if style == "link":
        return link_tag(url)
    if style == "import":
        return css_import(url)
    raise ValueError(f"Unknown snippet style: {style}")
