"""Tests for version classification and pin checks."""

import pytest

from cdn_resolver import ParsedReference, SourceKind, VersionMode, classify_version
from cdn_resolver.versions import is_pinned_ref


class TestClassifyVersion:
    """Tests for classify_version()."""

    @pytest.mark.parametrize("version", [None, "", "latest", "LATEST"])
    def test_latest(self, version):
        assert classify_version(version) == VersionMode.LATEST

    @pytest.mark.parametrize("version", ["18.2.0", "v3.6.4", "1.0.0-beta.1", "7.20.0"])
    def test_exact(self, version):
        assert classify_version(version) == VersionMode.EXACT

    @pytest.mark.parametrize("version", ["^18.0.0", "~1.2.3", "18", "1.x", ">=1.0.0"])
    def test_range(self, version):
        assert classify_version(version) == VersionMode.RANGE

    @pytest.mark.parametrize("version", ["next", "beta", "canary"])
    def test_tag(self, version):
        assert classify_version(version) == VersionMode.TAG

    def test_malformed_hyphen_range_is_tag(self):
        """Range strings the semver parser chokes on fall back to a tag."""
        assert classify_version("^V - -<~") == VersionMode.TAG


class TestPinned:
    """Tests for pinned-reference detection."""

    @pytest.mark.parametrize("ref", ["3.6.4", "v5.3.0", "a1b2c3d", "0123456789abcdef0123456789abcdef01234567"])
    def test_pinned_refs(self, ref):
        assert is_pinned_ref(ref) is True

    @pytest.mark.parametrize("ref", [None, "", "main", "master", "develop", "v5"])
    def test_moving_refs(self, ref):
        assert is_pinned_ref(ref) is False

    def test_npm_reference_pinned_only_when_exact(self):
        exact = ParsedReference(kind=SourceKind.JSDELIVR_NPM, package_name="react", package_version="18.2.0")
        ranged = ParsedReference(kind=SourceKind.JSDELIVR_NPM, package_name="react", package_version="^18")
        bare = ParsedReference(kind=SourceKind.JSDELIVR_NPM, package_name="react")
        assert exact.is_pinned is True
        assert ranged.is_pinned is False
        assert bare.is_pinned is False
        assert bare.version_mode == VersionMode.LATEST

    def test_github_reference_pinned_by_ref(self):
        pinned = ParsedReference(kind=SourceKind.GITHUB_BLOB, owner="o", repo="r", ref="v1.0.0", file_path="a")
        moving = ParsedReference(kind=SourceKind.GITHUB_BLOB, owner="o", repo="r", ref="main", file_path="a")
        assert pinned.is_pinned is True
        assert moving.is_pinned is False
        assert pinned.version_mode is None

    def test_fonts_always_pinned(self):
        assert ParsedReference(kind=SourceKind.GOOGLE_FONTS_CSS2, querystring="family=Inter").is_pinned is True
