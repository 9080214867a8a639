"""Resolver facade: detection, extraction and URL building in one call."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .builders import build_url
from .detectors import detect, normalize_input
from .models import (
    ErrorKind,
    Resolution,
    ResolutionError,
    ResolutionResult,
    ResolverOptions,
    SourceFamily,
    SourceKind,
)

logger = logging.getLogger(__name__)

# Expected shape per kind, used in INCOMPLETE_REFERENCE messages
_EXPECTED_SHAPES = {
    SourceKind.GITHUB_BLOB: "github.com/{owner}/{repo}/blob/{ref}/{path}",
    SourceKind.GITHUB_RAW: "{owner}/{repo}/{ref}/{path}",
    SourceKind.JSDELIVR_GITHUB: "cdn.jsdelivr.net/gh/{owner}/{repo}[@{ref}]/{path}",
    SourceKind.JSDELIVR_NPM: "cdn.jsdelivr.net/npm/{package}[@{version}][/{path}]",
    SourceKind.UNPKG_SHORTHAND: "unpkg.com/{package}[@{version}][/{path}]",
    SourceKind.NPMJS_PAGE: "npmjs.com/package/{package}[/v/{version}]",
    SourceKind.NPM_REGISTRY_SHORTHAND: "registry.npmjs.org/{package}[/{version}]",
    SourceKind.GOOGLE_FONTS_CSS: "fonts.googleapis.com/css?{query}",
    SourceKind.GOOGLE_FONTS_CSS2: "fonts.googleapis.com/css2?{query}",
}

UNRECOGNIZED_MESSAGE = (
    "Unrecognized format: expected a GitHub, npm, unpkg, jsDelivr or Google Fonts reference"
)


class SourceResolver:
    """Resolve GitHub, npm and Google Fonts references to CDN URLs.

    The resolver is stateless apart from its options, so one instance can be
    shared freely between callers and threads.
    """

    def __init__(self, options: Optional[ResolverOptions] = None):
        """Initialize the resolver.

        Args:
            options: Resolver options; defaults to ResolverOptions().
        """
        self.options = options or ResolverOptions()

    def detect(self, text: str, hint: Optional[SourceFamily] = None) -> SourceKind:
        """Return the SourceKind an input is recognized as (UNKNOWN if none)."""
        _check_type(text)
        target = normalize_input(text)
        if target is None:
            return SourceKind.UNKNOWN
        return detect(target, self.options, hint).kind

    def resolve(self, text: str, hint: Optional[SourceFamily] = None) -> Resolution:
        """Resolve one input.

        Args:
            text: URL or shorthand string.
            hint: Restrict detection to a single source family.

        Returns:
            ResolutionResult on success, otherwise ResolutionError.

        Raises:
            TypeError: If text is not a string.
        """
        _check_type(text)
        if not text.strip():
            return ResolutionError(
                kind=ErrorKind.EMPTY_INPUT,
                message="Input is empty",
                input=text,
            )

        target = normalize_input(text)
        if target is None:
            logger.debug("Unsupported scheme in %r", text)
            return self._unrecognized(text)

        detection = detect(target, self.options, hint)
        if detection.incomplete:
            return ResolutionError(
                kind=ErrorKind.INCOMPLETE_REFERENCE,
                message=f"Incomplete reference: expected {_EXPECTED_SHAPES[detection.kind]}",
                input=text,
                source_kind=detection.kind,
            )
        if detection.reference is None:
            return self._unrecognized(text)

        return ResolutionResult(
            kind=detection.kind,
            canonical_url=build_url(detection.reference, self.options),
            reference=detection.reference,
            input=text,
        )

    def resolve_many(
        self, inputs: Iterable[str], hint: Optional[SourceFamily] = None
    ) -> List[Resolution]:
        """Resolve each input in order; failures do not stop the batch."""
        return [self.resolve(text, hint) for text in inputs]

    @staticmethod
    def _unrecognized(text: str) -> ResolutionError:
        logger.debug("No detector matched %r", text)
        return ResolutionError(
            kind=ErrorKind.UNRECOGNIZED_FORMAT,
            message=UNRECOGNIZED_MESSAGE,
            input=text,
        )


def _check_type(text) -> None:
    if not isinstance(text, str):
        raise TypeError(f"input must be str, not {type(text).__name__}")


def resolve(
    text: str,
    options: Optional[ResolverOptions] = None,
    hint: Optional[SourceFamily] = None,
) -> Resolution:
    """Resolve a URL or shorthand string to its canonical CDN URL.

    Args:
        text: Input such as "https://github.com/jquery/jquery/blob/3.6.4/dist/jquery.min.js"
            or "@babel/core@7.20.0/lib/index.js".
        options: Resolver options (cdn_host, default_github_ref).
        hint: Restrict detection to one SourceFamily.

    Returns:
        ResolutionResult or ResolutionError; never raises for str input.
    """
    return SourceResolver(options).resolve(text, hint)
