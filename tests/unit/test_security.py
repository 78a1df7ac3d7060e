"""
Unit tests for origin validation.
"""

import pytest
from unittest.mock import Mock

from backend.app.config import Settings, DEFAULT_TRUSTED_ORIGINS
from backend.app.errors import AccessDenied, MethodNotAllowed
from backend.app.security import (
    origin_matches,
    is_origin_trusted,
    is_web_request,
    verify_request_method,
    verify_request_origin,
)


def make_request(method="POST", headers=None):
    """Minimal stand-in for a Starlette request."""
    request = Mock()
    request.method = method
    request.headers = {k.lower(): v for k, v in (headers or {}).items()}
    return request


class TestOriginMatching:
    """Wildcard pattern matching."""

    @pytest.mark.parametrize("origin", [
        "https://foo.workers.dev",
        "https://img2ggb.someone.workers.dev",
    ])
    def test_subdomain_wildcard_matches(self, origin):
        assert origin_matches(origin, "https://*.workers.dev")

    @pytest.mark.parametrize("origin", [
        "https://foo.workers.devx",
        "http://foo.workers.dev",
        "https://fooXworkers.dev",
        "https://workers.dev",
    ])
    def test_subdomain_wildcard_rejects(self, origin):
        assert not origin_matches(origin, "https://*.workers.dev")

    def test_port_wildcard(self):
        assert origin_matches("http://localhost:3000", "http://localhost:*")
        assert origin_matches("http://localhost:", "http://localhost:*")
        assert not origin_matches("http://localhost", "http://localhost:*")
        assert not origin_matches("https://localhost:3000", "http://localhost:*")

    def test_exact_pattern(self):
        assert origin_matches("https://example.com", "https://example.com")
        assert not origin_matches("https://example.com:443", "https://example.com")

    def test_trailing_newline_not_matched(self):
        assert not origin_matches("https://foo.workers.dev\n", "https://*.workers.dev")
        assert not origin_matches("http://localhost:3000\n", "http://localhost:*")

    def test_dot_is_literal(self):
        assert not origin_matches("http://127a0b0c1:8080", "http://127.0.0.1:*")

    def test_regex_metacharacters_are_literal(self):
        assert origin_matches("https://a+b.example.com", "https://a+b.*")
        assert not origin_matches("https://aab.example.com", "https://a+b.*")

    def test_is_origin_trusted(self):
        assert is_origin_trusted("http://127.0.0.1:8787", DEFAULT_TRUSTED_ORIGINS)
        assert not is_origin_trusted("https://evil.example", DEFAULT_TRUSTED_ORIGINS)
        assert not is_origin_trusted(None, DEFAULT_TRUSTED_ORIGINS)
        assert not is_origin_trusted("", DEFAULT_TRUSTED_ORIGINS)


class TestWebRequest:
    """Browser-origin classification."""

    def test_no_headers_rejected(self):
        assert not is_web_request(None, None, None)

    def test_requested_with_alone_accepted(self):
        assert is_web_request(None, None, "XMLHttpRequest")

    def test_other_requested_with_rejected(self):
        assert not is_web_request(None, None, "curl")

    def test_origin_alone_accepted(self):
        assert is_web_request("https://example.com", None, None)

    def test_referer_alone_accepted(self):
        assert is_web_request(None, "http://localhost:3000/page", None)

    def test_non_http_values_rejected(self):
        assert not is_web_request("null", "file:///tmp/index.html", None)


class TestVerifyRequest:
    """Request-level checks raising taxonomy errors."""

    @pytest.fixture
    def settings(self):
        return Settings(_env_file=None, trusted_origins=" https://geo.example.com , ,https://*.pages.dev")

    def test_options_denied(self):
        with pytest.raises(AccessDenied):
            verify_request_method(make_request("OPTIONS"))

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH", "HEAD"])
    def test_other_methods_not_allowed(self, method):
        with pytest.raises(MethodNotAllowed):
            verify_request_method(make_request(method))

    def test_post_allowed(self):
        verify_request_method(make_request("POST"))

    def test_non_web_request_denied(self, settings):
        with pytest.raises(AccessDenied) as exc_info:
            verify_request_origin(make_request(headers={"User-Agent": "curl/8.0"}), settings)
        assert "web browser" in exc_info.value.message

    def test_untrusted_origin_denied(self, settings):
        request = make_request(headers={"Origin": "https://evil.example"})
        with pytest.raises(AccessDenied) as exc_info:
            verify_request_origin(request, settings)
        assert exc_info.value.message == "Origin not trusted"

    def test_configured_origins_trusted(self, settings):
        verify_request_origin(make_request(headers={"Origin": "https://geo.example.com"}), settings)
        verify_request_origin(make_request(headers={"Origin": "https://preview.pages.dev"}), settings)

    def test_configured_list_skips_empty_entries(self, settings):
        assert settings.trusted_origin_list() == DEFAULT_TRUSTED_ORIGINS + [
            "https://geo.example.com",
            "https://*.pages.dev",
        ]

    def test_referer_without_origin_accepted(self, settings):
        request = make_request(headers={"Referer": "https://anything.example/page"})
        verify_request_origin(request, settings)

    def test_requested_with_and_untrusted_origin_denied(self, settings):
        request = make_request(headers={
            "X-Requested-With": "XMLHttpRequest",
            "Origin": "https://evil.example",
        })
        with pytest.raises(AccessDenied):
            verify_request_origin(request, settings)
