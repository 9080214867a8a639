"""Data models for source detection and CDN URL resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .constants import Constants
from .versions import VersionMode, classify_version, is_pinned_ref


class SourceFamily(Enum):
    """Upstream ecosystems an input can belong to."""

    GITHUB = "github"
    NPM = "npm"
    GOOGLE_FONTS = "fonts"


class SourceKind(Enum):
    """Recognized input formats."""

    GITHUB_BLOB = "github_blob"
    GITHUB_RAW = "github_raw"
    NPM_REGISTRY_SHORTHAND = "npm_registry_shorthand"
    NPMJS_PAGE = "npmjs_page"
    UNPKG_SHORTHAND = "unpkg_shorthand"
    JSDELIVR_NPM = "jsdelivr_npm"
    JSDELIVR_GITHUB = "jsdelivr_github"
    GOOGLE_FONTS_CSS = "google_fonts_css"
    GOOGLE_FONTS_CSS2 = "google_fonts_css2"
    UNKNOWN = "unknown"

    @property
    def family(self) -> Optional[SourceFamily]:
        """Family this kind belongs to (None for UNKNOWN)."""
        return _KIND_FAMILIES.get(self)


_KIND_FAMILIES = {
    SourceKind.GITHUB_BLOB: SourceFamily.GITHUB,
    SourceKind.GITHUB_RAW: SourceFamily.GITHUB,
    SourceKind.JSDELIVR_GITHUB: SourceFamily.GITHUB,
    SourceKind.NPM_REGISTRY_SHORTHAND: SourceFamily.NPM,
    SourceKind.NPMJS_PAGE: SourceFamily.NPM,
    SourceKind.UNPKG_SHORTHAND: SourceFamily.NPM,
    SourceKind.JSDELIVR_NPM: SourceFamily.NPM,
    SourceKind.GOOGLE_FONTS_CSS: SourceFamily.GOOGLE_FONTS,
    SourceKind.GOOGLE_FONTS_CSS2: SourceFamily.GOOGLE_FONTS,
}


class ErrorKind(Enum):
    """Why an input could not be resolved."""

    EMPTY_INPUT = "empty_input"
    UNRECOGNIZED_FORMAT = "unrecognized_format"
    INCOMPLETE_REFERENCE = "incomplete_reference"


@dataclass(frozen=True)
class ParsedReference:
    """Structural decomposition of an input.

    GitHub-family kinds fill owner/repo/ref/file_path, npm-family kinds fill
    package_name/package_version/file_path and Google Fonts kinds fill
    querystring. Unused fields stay None.
    """

    kind: SourceKind
    owner: Optional[str] = None
    repo: Optional[str] = None
    ref: Optional[str] = None
    file_path: Optional[str] = None
    package_name: Optional[str] = None
    package_version: Optional[str] = None
    querystring: Optional[str] = None

    @property
    def family(self) -> Optional[SourceFamily]:
        return self.kind.family

    @property
    def version_mode(self) -> Optional[VersionMode]:
        """npm version bucket; None outside the npm family."""
        if self.family != SourceFamily.NPM:
            return None
        return classify_version(self.package_version)

    @property
    def is_pinned(self) -> bool:
        """True when the reference always resolves to the same bytes."""
        if self.family == SourceFamily.NPM:
            return self.version_mode == VersionMode.EXACT
        if self.family == SourceFamily.GITHUB:
            return is_pinned_ref(self.ref)
        return self.family == SourceFamily.GOOGLE_FONTS


@dataclass(frozen=True)
class ResolutionResult:
    """Successful resolution of an input to a canonical CDN URL."""

    kind: SourceKind
    canonical_url: str
    reference: ParsedReference
    input: str = ""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ResolutionError:
    """Failed resolution; ``source_kind`` is set when a format was recognized."""

    kind: ErrorKind
    message: str
    input: str = ""
    source_kind: Optional[SourceKind] = None

    @property
    def ok(self) -> bool:
        return False


Resolution = Union[ResolutionResult, ResolutionError]


@dataclass(frozen=True)
class ResolverOptions:
    """Configuration for the resolver.

    Args:
        cdn_host: Host of the target CDN, e.g. "cdn.staticdelivr.com".
            A scheme prefix and trailing slashes are tolerated and stripped.
        default_github_ref: Ref used when a jsDelivr GitHub URL omits ``@ref``.

    Raises:
        ValueError: If cdn_host or default_github_ref is unusable.
    """

    cdn_host: str = Constants.DEFAULT_CDN_HOST
    default_github_ref: str = Constants.DEFAULT_GITHUB_REF

    def __post_init__(self):
        host = (self.cdn_host or "").strip()
        lowered = host.lower()
        for scheme in ("https://", "http://"):
            if lowered.startswith(scheme):
                host = host[len(scheme):]
                break
        host = host.rstrip("/").lower()
        if not host or any(ch in "/?#" or ch.isspace() for ch in host):
            raise ValueError(f"Invalid cdn_host: {self.cdn_host!r}")
        ref = (self.default_github_ref or "").strip()
        if not ref or "/" in ref or any(ch.isspace() for ch in ref):
            raise ValueError(f"Invalid default_github_ref: {self.default_github_ref!r}")
        # frozen dataclass: assign normalized values through object.__setattr__
        object.__setattr__(self, "cdn_host", host)
        object.__setattr__(self, "default_github_ref", ref)
