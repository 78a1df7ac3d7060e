"""
Security utilities for request origin validation.

The analysis endpoint is meant to be called from the web frontend only, so every
request is checked for browser-set headers and, when an Origin is declared, for
membership in the trusted origin list.
"""

import re
from typing import List, Optional
from fastapi import Request
from loguru import logger

from .config import Settings
from .errors import AccessDenied, MethodNotAllowed

# Header value set by XMLHttpRequest-based frontends
REQUESTED_WITH_TOKEN = "XMLHttpRequest"

ALLOWED_METHOD = "POST"


def _is_http_url(value: Optional[str]) -> bool:
    return bool(value) and (value.startswith("http://") or value.startswith("https://"))


def origin_pattern_to_regex(pattern: str) -> re.Pattern:
    """
    Translate a trusted origin pattern into a regular expression meant for
    ``fullmatch``.

    Every character is matched literally except ``*``, which matches any
    substring.

    Example:
        >>> bool(origin_pattern_to_regex("https://*.workers.dev").fullmatch("https://a.workers.dev"))
        True
    """
    parts = [re.escape(part) for part in pattern.split("*")]
    return re.compile(".*".join(parts))


def origin_matches(origin: str, pattern: str) -> bool:
    """Check a single origin against a single trusted pattern."""
    if "*" in pattern:
        return origin_pattern_to_regex(pattern).fullmatch(origin) is not None
    return origin == pattern


def is_origin_trusted(origin: Optional[str], trusted_origins: List[str]) -> bool:
    """
    Check whether an origin matches any entry of the trusted list.

    Args:
        origin: Value of the Origin header (may be None)
        trusted_origins: Exact origins or wildcard patterns

    Returns:
        True if at least one entry matches
    """
    if not origin:
        return False
    return any(origin_matches(origin, trusted) for trusted in trusted_origins)


def is_web_request(
    origin: Optional[str],
    referer: Optional[str],
    requested_with: Optional[str]
) -> bool:
    """
    Decide whether a request looks like it was sent by a web page.

    Command-line tools and scripts usually send none of these headers. A request
    qualifies if it carries the XMLHttpRequest marker, or an http(s) Origin, or
    an http(s) Referer.
    """
    if requested_with == REQUESTED_WITH_TOKEN:
        return True
    return _is_http_url(origin) or _is_http_url(referer)


def _log_rejection(reason: str, request: Request) -> None:
    logger.warning(
        f"Rejected request ({reason}): "
        f"origin={request.headers.get('origin')!r} "
        f"referer={request.headers.get('referer')!r} "
        f"user_agent={request.headers.get('user-agent')!r}"
    )


def verify_request_method(request: Request) -> None:
    """
    Validate the HTTP verb of an analysis request.

    Raises:
        AccessDenied: For CORS preflight (OPTIONS) requests
        MethodNotAllowed: For anything other than POST
    """
    if request.method == "OPTIONS":
        _log_rejection("preflight", request)
        raise AccessDenied("Preflight requests are not supported")

    if request.method != ALLOWED_METHOD:
        raise MethodNotAllowed(f"Method {request.method} is not allowed")


def verify_request_origin(request: Request, settings: Settings) -> None:
    """
    Validate that a request comes from a trusted web page.

    A request without an Origin header but with an http(s) Referer is accepted
    without checking the referer against the trusted list.

    Raises:
        AccessDenied: If the request is not web-originated or its origin is untrusted
    """
    origin = request.headers.get("origin")
    referer = request.headers.get("referer")
    requested_with = request.headers.get("x-requested-with")

    if not is_web_request(origin, referer, requested_with):
        _log_rejection("non-web request", request)
        raise AccessDenied("This API can only be called from a web browser")

    if origin and not is_origin_trusted(origin, settings.trusted_origin_list()):
        _log_rejection("untrusted origin", request)
        raise AccessDenied("Origin not trusted")
