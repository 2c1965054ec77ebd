"""Path key tests."""

import pytest
from roadroutes_core.errors import ConfigurationError
from roadroutes_core.routing.paths import ROOT, ancestors, normalize_path


SAMPLE_PATHS = [
    "/",
    "/foo",
    "/foo/",
    "foo/bar",
    "//foo///bar//",
    "/foo/./bar/../baz",
    "/a b/c%20d",
    "/%7Euser/docs",
    "/foo?query=1#frag",
    "http://Example.com:80/api/",
    "https://example.com:8443/api",
    "/../..",
    "/Mixed/Case",
    "/a/%2E%2E/b",
    "/a/%2e/b",
    "/x/%2E%2E",
]


class TestNormalizePath:
    """Test path normalization."""

    def test_root_inputs(self):
        """Test None, empty and separator all map to root."""
        assert normalize_path(None) == ROOT
        assert normalize_path("") == ROOT
        assert normalize_path("/") == ROOT

    def test_trailing_separator_dropped(self):
        """Test trailing separators are removed."""
        assert normalize_path("/foo/bar/") == "/foo/bar"

    def test_relative_path_rooted(self):
        """Test relative paths gain a leading separator."""
        assert normalize_path("foo/bar") == "/foo/bar"

    def test_duplicate_separators_collapsed(self):
        """Test empty segments are removed."""
        assert normalize_path("//foo///bar//") == "/foo/bar"

    def test_dot_segments_resolved(self):
        """Test . and .. segments."""
        assert normalize_path("/foo/./bar/../baz") == "/foo/baz"
        assert normalize_path("/../..") == ROOT

    def test_encoded_dot_segments_resolved(self):
        """Test percent-encoded . and .. behave like their literal forms."""
        assert normalize_path("/a/%2E%2E/b") == "/b"
        assert normalize_path("/a/%2e/b") == "/a/b"
        assert normalize_path("/x/%2E%2E") == ROOT

    def test_percent_encoding_consistent(self):
        """Test equivalent encodings map to one key."""
        assert normalize_path("/a b") == normalize_path("/a%20b") == "/a%20b"
        assert normalize_path("/%7Euser") == "/~user"

    def test_query_and_fragment_stripped(self):
        """Test query strings and fragments are not part of the key."""
        assert normalize_path("/foo?query=1#frag") == "/foo"

    def test_url_host_lowercased_and_default_port_dropped(self):
        """Test absolute URLs are keyed by host."""
        assert normalize_path("http://Example.com:80/api/") == "/example.com/api"
        assert normalize_path("https://example.com:8443/api") == "/example.com:8443/api"

    def test_path_case_preserved(self):
        """Test path segments keep their case."""
        assert normalize_path("/Mixed/Case") == "/Mixed/Case"

    def test_non_string_rejected(self):
        """Test non-string paths raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            normalize_path(42)

    @pytest.mark.parametrize("path", SAMPLE_PATHS)
    def test_idempotent(self, path):
        """Test normalizing twice changes nothing."""
        once = normalize_path(path)
        assert normalize_path(once) == once


class TestAncestors:
    """Test ancestor enumeration."""

    def test_ancestors_most_specific_first(self):
        """Test the documented example."""
        assert ancestors("/foo/bar/xyz") == ["/foo/bar/xyz", "/foo/bar", "/foo", "/"]

    def test_root_ancestors(self):
        """Test root yields only itself."""
        assert ancestors(ROOT) == [ROOT]

    def test_single_segment(self):
        """Test a top-level key."""
        assert ancestors("/foo") == ["/foo", "/"]

    @pytest.mark.parametrize("path", SAMPLE_PATHS)
    def test_ancestors_shrink_to_root(self, path):
        """Test ancestors are non-empty, strictly shorter and end at root."""
        keys = ancestors(normalize_path(path))
        assert keys
        assert keys[-1] == ROOT
        lengths = [len(k) for k in keys]
        assert lengths == sorted(lengths, reverse=True)
        assert len(set(lengths)) == len(lengths)
