"""Format detection for resolver inputs.

Inputs are normalized into (host, path, query) and matched against an
ordered table of detectors. The first detector whose family pattern matches
owns the input: if its extractor cannot fully decompose the path, the
input is reported as incomplete instead of falling through to a looser
detector further down the table.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from . import extractors
from .constants import Hosts
from .models import ParsedReference, ResolverOptions, SourceFamily, SourceKind

logger = logging.getLogger(__name__)

_SCHEME_PATTERN = re.compile(r"([A-Za-z][A-Za-z0-9+.-]*)://")
_HOST_END_PATTERN = re.compile(r"[/?#]")
_SUPPORTED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class NormalizedInput:
    """Input split into a recognized host (None for bare shorthand), path and query."""

    text: str
    host: Optional[str] = None
    path: str = ""
    query: Optional[str] = None


@dataclass(frozen=True)
class Detector:
    """A family pattern plus the extractor that decomposes matching inputs."""

    kind: SourceKind
    host: Optional[str]
    family_pattern: re.Pattern
    extract: Callable[[Optional[str], ResolverOptions], Optional[ParsedReference]]
    use_query: bool = False

    def applies_to(self, target: NormalizedInput) -> bool:
        if self.host != target.host:
            return False
        return self.family_pattern.fullmatch(target.path) is not None


@dataclass(frozen=True)
class Detection:
    """Outcome of running the detector table over one input."""

    kind: SourceKind
    reference: Optional[ParsedReference] = None
    incomplete: bool = False


def normalize_input(text: str) -> Optional[NormalizedInput]:
    """Trim, strip trailing slashes and split off a known host.

    Hostnames are lower-cased and a leading ``www.`` is dropped. Without a
    scheme the first segment only counts as a host when it is one of the
    recognized upstream hosts; otherwise the whole text is bare shorthand.
    Fragments are always dropped for hosted inputs.

    Returns:
        NormalizedInput, or None when the input uses an unsupported scheme.
    """
    stripped = text.strip().rstrip("/")

    scheme = _SCHEME_PATTERN.match(stripped)
    if scheme:
        if scheme.group(1).lower() not in _SUPPORTED_SCHEMES:
            return None
        rest, explicit_host = stripped[scheme.end():], True
    elif stripped.startswith("//"):
        rest, explicit_host = stripped[2:], True
    else:
        rest, explicit_host = stripped, False

    host_end = _HOST_END_PATTERN.search(rest)
    split_at = host_end.start() if host_end else len(rest)
    host = rest[:split_at].lower()
    if host.startswith("www."):
        host = host[len("www."):]

    if not explicit_host and host not in Hosts.ALL:
        return NormalizedInput(text=stripped, path=stripped)

    remainder = rest[split_at:].split("#", 1)[0]
    path, sep, query = remainder.partition("?")
    if path.startswith("/"):
        path = path[1:]
    return NormalizedInput(
        text=stripped,
        host=host,
        path=path.rstrip("/"),
        query=query if sep else None,
    )


# Priority order matters: the first detector whose family pattern matches wins.
DETECTORS: Tuple[Detector, ...] = (
    Detector(
        SourceKind.GITHUB_RAW,
        Hosts.GITHUB_RAW,
        re.compile(r".*"),
        extractors.extract_raw_githubusercontent,
    ),
    Detector(
        SourceKind.GITHUB_BLOB,
        Hosts.GITHUB,
        re.compile(r"[^/]+/[^/]+/blob(?:/.*)?"),
        extractors.extract_github_blob,
    ),
    Detector(
        SourceKind.GITHUB_RAW,
        Hosts.GITHUB,
        re.compile(r"[^/]+/[^/]+/raw(?:/.*)?"),
        extractors.extract_github_raw_button,
    ),
    Detector(
        SourceKind.JSDELIVR_GITHUB,
        Hosts.JSDELIVR,
        re.compile(r"gh(?:/.*)?"),
        extractors.extract_jsdelivr_github,
    ),
    Detector(
        SourceKind.JSDELIVR_NPM,
        Hosts.JSDELIVR,
        re.compile(r"npm(?:/.*)?"),
        extractors.extract_jsdelivr_npm,
    ),
    Detector(
        SourceKind.UNPKG_SHORTHAND,
        Hosts.UNPKG,
        re.compile(r".*"),
        extractors.extract_unpkg,
    ),
    Detector(
        SourceKind.NPMJS_PAGE,
        Hosts.NPMJS,
        re.compile(r"package(?:/.*)?"),
        extractors.extract_npmjs_page,
    ),
    Detector(
        SourceKind.NPM_REGISTRY_SHORTHAND,
        Hosts.NPM_REGISTRY,
        re.compile(r".*"),
        extractors.extract_npm_registry,
    ),
    Detector(
        SourceKind.GOOGLE_FONTS_CSS2,
        Hosts.GOOGLE_FONTS,
        re.compile(r"css2"),
        extractors.extract_google_fonts_css2,
        use_query=True,
    ),
    Detector(
        SourceKind.GOOGLE_FONTS_CSS,
        Hosts.GOOGLE_FONTS,
        re.compile(r"css"),
        extractors.extract_google_fonts_css,
        use_query=True,
    ),
    # Bare shorthand; GitHub first so owner/repo/ref/path is never read as npm
    Detector(
        SourceKind.GITHUB_RAW,
        None,
        re.compile(r"\S+"),
        extractors.extract_bare_github,
    ),
    Detector(
        SourceKind.NPM_REGISTRY_SHORTHAND,
        None,
        re.compile(r"\S+"),
        extractors.extract_bare_package,
    ),
)


def detect(
    target: NormalizedInput,
    options: ResolverOptions,
    hint: Optional[SourceFamily] = None,
) -> Detection:
    """Run the detector table over a normalized input.

    Args:
        target: Normalized input.
        options: Resolver options (default refs).
        hint: Restrict detection to one source family.

    Returns:
        Detection with the parsed reference, an incomplete marker for the
        kind that claimed the input, or SourceKind.UNKNOWN.
    """
    for detector in DETECTORS:
        if hint is not None and detector.kind.family != hint:
            continue
        if not detector.applies_to(target):
            continue
        value = target.query if detector.use_query else target.path
        reference = detector.extract(value, options)
        if reference is not None:
            logger.debug("Detected %s for %r", reference.kind.value, target.text)
            return Detection(kind=reference.kind, reference=reference)
        if detector.host is not None:
            logger.debug("Incomplete %s reference: %r", detector.kind.value, target.text)
            return Detection(kind=detector.kind, incomplete=True)
    return Detection(kind=SourceKind.UNKNOWN)
