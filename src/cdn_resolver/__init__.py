"""cdn_resolver package.

Converts references to assets hosted on GitHub, npm (registry, npmjs.com,
unpkg, jsDelivr) and Google Fonts into URLs on a CDN's own path scheme
(``/gh/...``, ``/npm/...``, ``/gfonts/...``). Resolution is a pure string
transformation; nothing is fetched.
"""

from .models import (
    ErrorKind,
    ParsedReference,
    Resolution,
    ResolutionError,
    ResolutionResult,
    ResolverOptions,
    SourceFamily,
    SourceKind,
)
from .resolver import SourceResolver, resolve
from .versions import VersionMode, classify_version

__all__ = [
    "ErrorKind",
    "ParsedReference",
    "Resolution",
    "ResolutionError",
    "ResolutionResult",
    "ResolverOptions",
    "SourceFamily",
    "SourceKind",
    "SourceResolver",
    "VersionMode",
    "classify_version",
    "resolve",
]
