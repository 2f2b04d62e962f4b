"""Tests for path resolution, headers and the error envelope."""

import pytest

from core.envelope import GENERIC_FAILURE, error_envelope
from core.exceptions import MalformedPrefixError
from core.headers import HeaderBuilder
from core.router import PathResolver


class TestPathResolver:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/tmdb/movie/550", "movie/550"),
            ("/tmdb/search/multi", "search/multi"),
            ("/tmdb/", ""),
            ("/tmdb", ""),
            ("/tmdb//movie/550", "movie/550"),
            ("/tmdb/search/tmdb/keyword", "search/tmdb/keyword"),
            ("/tmdb/tmdb/", "tmdb/"),
        ],
    )
    def test_resolve(self, path, expected):
        assert PathResolver("/tmdb").resolve(path) == expected

    @pytest.mark.parametrize("path", ["/movie/550", "/tmdbx/movie", "/api/tmdb/movie", ""])
    def test_missing_prefix_fails_closed(self, path):
        with pytest.raises(MalformedPrefixError) as exc_info:
            PathResolver("/tmdb").resolve(path)

        assert exc_info.value.path == path
        assert str(exc_info.value) == "Request path must start with /tmdb/"

    def test_prefix_normalized(self):
        assert PathResolver("tmdb/").prefix == "/tmdb"
        assert PathResolver("/api/tmdb").resolve("/api/tmdb/movie/1") == "movie/1"

    def test_root_prefix(self):
        assert PathResolver("/").resolve("/movie/550") == "movie/550"


class TestHeaderBuilder:
    def test_with_token(self):
        headers = HeaderBuilder().build_tmdb_headers("secret")

        assert headers == {"Accept": "application/json", "Authorization": "Bearer secret"}

    @pytest.mark.parametrize("token", ["", None])
    def test_without_token(self, token):
        assert HeaderBuilder().build_tmdb_headers(token) == {"Accept": "application/json"}


class TestErrorEnvelope:
    def test_wraps_body(self):
        assert error_envelope({"status_code": 34}) == {"success": False, "error": {"status_code": 34}}

    @pytest.mark.parametrize("body", [None, ""])
    def test_generic_fallback(self, body):
        assert error_envelope(body) == {"success": False, "error": GENERIC_FAILURE}

    def test_empty_object_kept(self):
        assert error_envelope({}) == {"success": False, "error": {}}
