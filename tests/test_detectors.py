"""Tests for input normalization and detector priority."""

import pytest

from cdn_resolver.detectors import DETECTORS, detect, normalize_input
from cdn_resolver.models import ResolverOptions, SourceFamily, SourceKind


class TestNormalizeInput:
    """Tests for normalize_input()."""

    def test_scheme_and_host_split(self):
        """Scheme is stripped and the host separated from the path."""
        target = normalize_input("https://github.com/user/repo/blob/main/a.js")
        assert target.host == "github.com"
        assert target.path == "user/repo/blob/main/a.js"
        assert target.query is None

    def test_host_lowercased_path_preserved(self):
        """Hostnames are case-insensitive; path case is kept."""
        target = normalize_input("HTTPS://GitHub.COM/User/Repo/blob/Main/A.js")
        assert target.host == "github.com"
        assert target.path == "User/Repo/blob/Main/A.js"

    def test_www_prefix_dropped(self):
        """A leading www. does not change the host."""
        assert normalize_input("https://www.npmjs.com/package/react").host == "npmjs.com"

    def test_protocol_relative(self):
        """//host/path is treated like https://host/path."""
        target = normalize_input("//unpkg.com/react@18.2.0")
        assert target.host == "unpkg.com"
        assert target.path == "react@18.2.0"

    def test_trailing_slashes_and_whitespace(self):
        """Whitespace and trailing slashes are stripped before detection."""
        target = normalize_input("  https://unpkg.com/react@18.2.0/umd///  ")
        assert target.path == "react@18.2.0/umd"

    def test_fragment_dropped_query_kept(self):
        """Fragments are dropped; the query is split off."""
        target = normalize_input("https://github.com/u/r/blob/main/a.js?plain=1#L10")
        assert target.path == "u/r/blob/main/a.js"
        assert target.query == "plain=1"

    def test_bare_input_has_no_host(self):
        """Without a scheme, unknown first segments are not hosts."""
        target = normalize_input("react@18.2.0/index.js")
        assert target.host is None
        assert target.path == "react@18.2.0/index.js"

    def test_known_host_without_scheme(self):
        """Recognized hosts are detected even without a scheme."""
        assert normalize_input("raw.githubusercontent.com/u/r/main/a.js").host == "raw.githubusercontent.com"

    def test_unsupported_scheme(self):
        """Only http and https schemes are accepted."""
        assert normalize_input("git://github.com/u/r") is None


class TestDetectorPriority:
    """Tests for detect() ordering and incompleteness."""

    def setup_method(self):
        """Set up test fixtures."""
        self.options = ResolverOptions()

    def _detect(self, text, hint=None):
        return detect(normalize_input(text), self.options, hint)

    def test_table_order(self):
        """The detector table follows the documented priority."""
        kinds = [d.kind for d in DETECTORS]
        assert kinds == [
            SourceKind.GITHUB_RAW,
            SourceKind.GITHUB_BLOB,
            SourceKind.GITHUB_RAW,
            SourceKind.JSDELIVR_GITHUB,
            SourceKind.JSDELIVR_NPM,
            SourceKind.UNPKG_SHORTHAND,
            SourceKind.NPMJS_PAGE,
            SourceKind.NPM_REGISTRY_SHORTHAND,
            SourceKind.GOOGLE_FONTS_CSS2,
            SourceKind.GOOGLE_FONTS_CSS,
            SourceKind.GITHUB_RAW,
            SourceKind.NPM_REGISTRY_SHORTHAND,
        ]

    def test_bare_github_before_npm(self):
        """Four-segment shorthand is read as GitHub, not npm."""
        detection = self._detect("lodash/lodash/main/dist/lodash.js")
        assert detection.kind == SourceKind.GITHUB_RAW
        assert detection.reference.owner == "lodash"

    def test_scoped_package_not_github(self):
        """Scoped package specs with deep paths stay npm."""
        detection = self._detect("@scope/pkg@1.0.0/dist/esm/index.js")
        assert detection.kind == SourceKind.NPM_REGISTRY_SHORTHAND
        assert detection.reference.package_name == "@scope/pkg"

    def test_versioned_package_with_four_segments(self):
        """An @ in the first segment keeps a four-segment spec out of the GitHub rule."""
        detection = self._detect("lodash@4.17.21/dist/fp/map.js")
        assert detection.kind == SourceKind.NPM_REGISTRY_SHORTHAND
        assert detection.reference.file_path == "dist/fp/map.js"

    @pytest.mark.parametrize("text,kind", [
        ("https://github.com/u/r/blob/main", SourceKind.GITHUB_BLOB),
        ("https://github.com/u/r/raw", SourceKind.GITHUB_RAW),
        ("https://raw.githubusercontent.com/u/r/main", SourceKind.GITHUB_RAW),
        ("https://cdn.jsdelivr.net/gh/u/r@v1", SourceKind.JSDELIVR_GITHUB),
        ("https://cdn.jsdelivr.net/npm", SourceKind.JSDELIVR_NPM),
        ("https://cdn.jsdelivr.net/npm/react@/index.js", SourceKind.JSDELIVR_NPM),
        ("https://unpkg.com", SourceKind.UNPKG_SHORTHAND),
        ("https://www.npmjs.com/package", SourceKind.NPMJS_PAGE),
        ("https://registry.npmjs.org/react/-/react.tgz", SourceKind.NPM_REGISTRY_SHORTHAND),
        ("https://fonts.googleapis.com/css?", SourceKind.GOOGLE_FONTS_CSS),
    ])
    def test_incomplete(self, text, kind):
        """A matching family with missing parts is incomplete, not a fallthrough."""
        detection = self._detect(text)
        assert detection.incomplete is True
        assert detection.kind == kind
        assert detection.reference is None

    def test_unclaimed_known_host(self):
        """A recognized host with an unsupported path is unknown."""
        detection = self._detect("https://github.com/jquery/jquery")
        assert detection.kind == SourceKind.UNKNOWN
        assert detection.incomplete is False

    def test_hint_skips_other_families(self):
        """With a fonts hint, GitHub URLs are not detected."""
        detection = self._detect("https://github.com/u/r/blob/main/a.js", SourceFamily.GOOGLE_FONTS)
        assert detection.kind == SourceKind.UNKNOWN
