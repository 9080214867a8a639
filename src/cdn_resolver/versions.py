"""Version and ref classification for resolved references.

npm versions are sorted into the same buckets the npm CLI understands:
the ``latest`` dist-tag, an exact semver, a semver range, or some other
dist-tag. GitHub refs are considered pinned when they name a commit or
a semver-looking tag.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

import semantic_version

_COMMIT_SHA = re.compile(r"[0-9a-fA-F]{7,40}")


class VersionMode(Enum):
    """How specific an npm version reference is."""

    LATEST = "latest"
    EXACT = "exact"
    RANGE = "range"
    TAG = "tag"


def _strip_v(value: str) -> str:
    if len(value) > 1 and value[0] in ("v", "V") and value[1].isdigit():
        return value[1:]
    return value


def _is_semver(value: str) -> bool:
    try:
        semantic_version.Version(_strip_v(value))
    except ValueError:
        return False
    return True


def _is_npm_range(value: str) -> bool:
    # NpmSpec raises AttributeError on some malformed hyphen ranges
    try:
        semantic_version.NpmSpec(value)
    except (ValueError, AttributeError):
        return False
    return True


def classify_version(version: Optional[str]) -> VersionMode:
    """Classify an npm version string.

    Args:
        version: Version as written after the ``@`` (None when absent).

    Returns:
        VersionMode bucket for the version.
    """
    if version is None or version.strip() == "" or version.lower() == "latest":
        return VersionMode.LATEST
    if _is_semver(version):
        return VersionMode.EXACT
    if _is_npm_range(version):
        return VersionMode.RANGE
    return VersionMode.TAG


def is_pinned_ref(ref: Optional[str]) -> bool:
    """Return True when a GitHub ref names an immutable snapshot."""
    if not ref:
        return False
    if _COMMIT_SHA.fullmatch(ref):
        return True
    return _is_semver(ref)
