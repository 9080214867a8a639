"""Path extractors for each recognized source format.

Every extractor receives the part of the input after the host (path only,
without the leading slash) and returns a ParsedReference, or None when the
path cannot be fully decomposed. Path segments are taken verbatim: nothing
is percent-decoded or re-encoded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .constants import Constants
from .models import ParsedReference, ResolverOptions, SourceKind

# GitHub
# {owner}/{repo}/{ref}/{path} with a greedy trailing path
_GH_RAW_PATTERN = re.compile(r"([^/]+)/([^/]+)/([^/]+)/(.+)")
# github.com/{owner}/{repo}/blob|raw/{ref}/{path}
_GH_BLOB_PATTERN = re.compile(r"([^/]+)/([^/]+)/blob/([^/]+)/(.+)")
_GH_RAW_BUTTON_PATTERN = re.compile(r"([^/]+)/([^/]+)/raw/([^/]+)/(.+)")
# refs/heads/{branch}/{path} or refs/tags/{tag}/{path}
_GH_FULL_REF_PATTERN = re.compile(r"(?:heads|tags)/([^/]+)/(.+)")
# gh/{owner}/{repo}(@{ref})?/{path}
_JSDELIVR_GH_PATTERN = re.compile(r"gh/([^/@]+)/([^/@]+)(?:@([^/]+))?/(.+)")
# Bare shorthand: owner and repo must look like GitHub names
_BARE_GH_PATTERN = re.compile(
    r"([A-Za-z0-9][A-Za-z0-9-]*)/([A-Za-z0-9._-]+)/([^/\s]+)/(\S+)"
)

# npm
_PACKAGE_NAME_PATTERN = re.compile(
    r"(?:@[A-Za-z0-9~][A-Za-z0-9._~-]*/)?[A-Za-z0-9~][A-Za-z0-9._~-]*"
)
_VERSION_PATTERN = re.compile(r"[^/\s]+")
# package/{pkg}(/v/{version})?
_NPMJS_PAGE_PATTERN = re.compile(r"package/(@[^/]+/[^/]+|[^/@]+)(?:/v/([^/]+))?")
# {pkg}, {pkg}/{version} or {pkg}/-/{tarball}.tgz
_REGISTRY_PATTERN = re.compile(r"(@[^/]+/[^/]+|[^/@]+)(?:/(-/[^/]+\.tgz|[^/-][^/]*))?")
_NPM_TARBALL_PATTERN = re.compile(r"-/([^/]+)\.tgz")
_TARBALL_VERSION_PATTERN = re.compile(
    r"\d+\.\d+\.\d+(?:-[a-zA-Z0-9.-]+)?(?:\+[a-zA-Z0-9.-]+)?"
)
# npm caps package names at 214 characters and semver strings at 256
_MAX_TARBALL_BASENAME = 214 + 1 + 256
_ENCODED_SCOPE_SLASH = re.compile(r"%2[fF]")


@dataclass(frozen=True)
class PackageSpec:
    """A package name with an optional version and file path."""

    name: str
    version: Optional[str] = None
    file_path: Optional[str] = None


def is_package_name(name: str) -> bool:
    """Return True if name is shaped like an npm package name (scoped or not)."""
    return bool(name) and _PACKAGE_NAME_PATTERN.fullmatch(name) is not None


def split_package_spec(text: str) -> Optional[PackageSpec]:
    """Split ``name[@version][/path]`` into its parts.

    The version separator is the first ``@`` for plain names and the second
    ``@`` for scoped names, and only counts when it appears before the first
    slash that ends the name. The file path is everything after the slash that
    follows the name or version.

    Args:
        text: Package spec such as "@babel/core@7.20.0/lib/index.js".

    Returns:
        PackageSpec, or None when the name or version is malformed.
    """
    if not text:
        return None

    if text.startswith("@"):
        scope_slash = text.find("/")
        if scope_slash <= 1:
            return None
        name_end = text.find("/", scope_slash + 1)
        at = text.find("@", 1)
    else:
        name_end = text.find("/")
        at = text.find("@")
    if name_end == -1:
        name_end = len(text)

    version = None
    if at != -1 and at < name_end:
        name = text[:at]
        rest = text[at + 1:]
        slash = rest.find("/")
        if slash == -1:
            version, file_path = rest, None
        else:
            version, file_path = rest[:slash], rest[slash + 1:]
        if not _VERSION_PATTERN.fullmatch(version):
            return None
    else:
        name = text[:name_end]
        file_path = text[name_end + 1:] if name_end < len(text) else None

    if not is_package_name(name):
        return None
    if file_path is not None and (file_path == "" or any(ch.isspace() for ch in file_path)):
        return None
    return PackageSpec(name=name, version=version, file_path=file_path)


def tarball_version(tail: str) -> Optional[str]:
    """Return the version from a ``-/{name}-{version}.tgz`` registry path.

    The version starts after the rightmost ``-`` whose remainder is a full
    semver, so prerelease tags containing ``-`` stay intact.
    """
    match = _NPM_TARBALL_PATTERN.fullmatch(tail)
    if not match:
        return None
    basename = match.group(1)
    if len(basename) > _MAX_TARBALL_BASENAME:
        return None
    dash = basename.rfind("-")
    while dash > 0:
        candidate = basename[dash + 1:]
        if _TARBALL_VERSION_PATTERN.fullmatch(candidate):
            return candidate
        dash = basename.rfind("-", 0, dash)
    return None


def _github_reference(kind, owner, repo, ref, file_path) -> Optional[ParsedReference]:
    """Build a GitHub reference, unwrapping refs/heads/ and refs/tags/ paths."""
    if ref == "refs":
        match = _GH_FULL_REF_PATTERN.fullmatch(file_path)
        if not match:
            return None
        ref, file_path = match.groups()
    return ParsedReference(kind=kind, owner=owner, repo=repo, ref=ref, file_path=file_path)


def extract_raw_githubusercontent(path: str, options: ResolverOptions) -> Optional[ParsedReference]:
    match = _GH_RAW_PATTERN.fullmatch(path)
    if not match:
        return None
    return _github_reference(SourceKind.GITHUB_RAW, *match.groups())


def extract_github_blob(path: str, options: ResolverOptions) -> Optional[ParsedReference]:
    match = _GH_BLOB_PATTERN.fullmatch(path)
    if not match:
        return None
    return _github_reference(SourceKind.GITHUB_BLOB, *match.groups())


def extract_github_raw_button(path: str, options: ResolverOptions) -> Optional[ParsedReference]:
    match = _GH_RAW_BUTTON_PATTERN.fullmatch(path)
    if not match:
        return None
    return _github_reference(SourceKind.GITHUB_RAW, *match.groups())


def extract_jsdelivr_github(path: str, options: ResolverOptions) -> Optional[ParsedReference]:
    """gh/{owner}/{repo}(@{ref})?/{path}; a missing ref falls back to the configured default."""
    match = _JSDELIVR_GH_PATTERN.fullmatch(path)
    if not match:
        return None
    owner, repo, ref, file_path = match.groups()
    return ParsedReference(
        kind=SourceKind.JSDELIVR_GITHUB,
        owner=owner,
        repo=repo,
        ref=ref or options.default_github_ref,
        file_path=file_path,
    )


def _npm_passthrough(kind: SourceKind, spec_text: str) -> Optional[ParsedReference]:
    spec = split_package_spec(spec_text)
    if spec is None:
        return None
    return ParsedReference(
        kind=kind,
        package_name=spec.name,
        package_version=spec.version,
        file_path=spec.file_path,
    )


def extract_jsdelivr_npm(path: str, options: ResolverOptions) -> Optional[ParsedReference]:
    if not path.startswith("npm/"):
        return None
    return _npm_passthrough(SourceKind.JSDELIVR_NPM, path[len("npm/"):])


def extract_unpkg(path: str, options: ResolverOptions) -> Optional[ParsedReference]:
    # unpkg.com/browse/{spec} is the file browser for the same package
    if path.startswith("browse/"):
        path = path[len("browse/"):]
    return _npm_passthrough(SourceKind.UNPKG_SHORTHAND, path)


def extract_npmjs_page(path: str, options: ResolverOptions) -> Optional[ParsedReference]:
    match = _NPMJS_PAGE_PATTERN.fullmatch(path)
    if not match:
        return None
    name, version = match.groups()
    if not is_package_name(name):
        return None
    return ParsedReference(
        kind=SourceKind.NPMJS_PAGE,
        package_name=name,
        package_version=version,
    )


def extract_npm_registry(path: str, options: ResolverOptions) -> Optional[ParsedReference]:
    """registry.npmjs.org/{pkg}, /{pkg}/{version} or /{pkg}/-/{name}-{version}.tgz."""
    path = _ENCODED_SCOPE_SLASH.sub("/", path, count=1) if path.startswith("@") else path
    match = _REGISTRY_PATTERN.fullmatch(path)
    if not match:
        return None
    name, tail = match.groups()
    if not is_package_name(name):
        return None
    version = None
    if tail:
        if tail.startswith("-/"):
            version = tarball_version(tail)
            if version is None:
                return None
        else:
            version = tail
    return ParsedReference(
        kind=SourceKind.NPM_REGISTRY_SHORTHAND,
        package_name=name,
        package_version=version,
    )


def _google_fonts(kind: SourceKind, query: Optional[str]) -> Optional[ParsedReference]:
    # family=...&display=... is not re-parsed; multi-family requests depend on it
    if not query:
        return None
    return ParsedReference(kind=kind, querystring=query)


def extract_google_fonts_css2(query: Optional[str], options: ResolverOptions) -> Optional[ParsedReference]:
    return _google_fonts(SourceKind.GOOGLE_FONTS_CSS2, query)


def extract_google_fonts_css(query: Optional[str], options: ResolverOptions) -> Optional[ParsedReference]:
    return _google_fonts(SourceKind.GOOGLE_FONTS_CSS, query)


def extract_bare_github(text: str, options: ResolverOptions) -> Optional[ParsedReference]:
    match = _BARE_GH_PATTERN.fullmatch(text)
    if not match:
        return None
    return _github_reference(SourceKind.GITHUB_RAW, *match.groups())


def extract_bare_package(text: str, options: ResolverOptions) -> Optional[ParsedReference]:
    """``name[@version][/path]`` as written for an npm CDN.

    Bare specs without a version resolve to the ``latest`` dist-tag. Without
    a version the name must be lower-case, as npm requires for new packages.
    """
    spec = split_package_spec(text)
    if spec is None:
        return None
    if spec.version is None and spec.name != spec.name.lower():
        return None
    return ParsedReference(
        kind=SourceKind.NPM_REGISTRY_SHORTHAND,
        package_name=spec.name,
        package_version=spec.version or Constants.DEFAULT_NPM_VERSION,
        file_path=spec.file_path,
    )
