"""URL builders: assemble the canonical CDN URL for a parsed reference."""

from __future__ import annotations

from typing import Callable, Dict

from .constants import Constants
from .models import ParsedReference, ResolverOptions, SourceKind


def build_github_url(ref: ParsedReference, options: ResolverOptions) -> str:
    """https://{cdn_host}/gh/{owner}/{repo}/{ref}/{file_path}"""
    return (
        f"https://{options.cdn_host}/{Constants.CDN_GITHUB_PREFIX}/"
        f"{ref.owner}/{ref.repo}/{ref.ref}/{ref.file_path}"
    )


def build_npm_url(ref: ParsedReference, options: ResolverOptions) -> str:
    """https://{cdn_host}/npm/{package}[@{version}][/{file_path}]"""
    url = f"https://{options.cdn_host}/{Constants.CDN_NPM_PREFIX}/{ref.package_name}"
    if ref.package_version:
        url += f"@{ref.package_version}"
    if ref.file_path:
        url += f"/{ref.file_path}"
    return url


def _fonts_builder(endpoint: str) -> Callable[[ParsedReference, ResolverOptions], str]:
    def build(ref: ParsedReference, options: ResolverOptions) -> str:
        return f"https://{options.cdn_host}/{Constants.CDN_FONTS_PREFIX}/{endpoint}?{ref.querystring}"

    build.__name__ = f"build_fonts_{endpoint}_url"
    return build


build_fonts_css_url = _fonts_builder("css")
build_fonts_css2_url = _fonts_builder("css2")

BUILDERS: Dict[SourceKind, Callable[[ParsedReference, ResolverOptions], str]] = {
    SourceKind.GITHUB_BLOB: build_github_url,
    SourceKind.GITHUB_RAW: build_github_url,
    SourceKind.JSDELIVR_GITHUB: build_github_url,
    SourceKind.NPM_REGISTRY_SHORTHAND: build_npm_url,
    SourceKind.NPMJS_PAGE: build_npm_url,
    SourceKind.UNPKG_SHORTHAND: build_npm_url,
    SourceKind.JSDELIVR_NPM: build_npm_url,
    SourceKind.GOOGLE_FONTS_CSS: build_fonts_css_url,
    SourceKind.GOOGLE_FONTS_CSS2: build_fonts_css2_url,
}


def build_url(ref: ParsedReference, options: ResolverOptions) -> str:
    """Dispatch to the builder registered for ``ref.kind``.

    Raises:
        KeyError: If no builder exists for the kind (SourceKind.UNKNOWN).
    """
    return BUILDERS[ref.kind](ref, options)
