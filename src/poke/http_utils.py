from __future__ import annotations

"""HTTP helper utilities used by the reload request handler."""

from urllib.parse import urlsplit

from .exceptions import RequestBuildError

_SUCCESS_MIN = 200
_SUCCESS_MAX = 300


def ensure_http_url(request_url: str) -> str:
    """Ensure the provided URL uses an allowed HTTP/HTTPS scheme and names a host."""
    try:
        parsed = urlsplit(request_url)
        parsed.port  # raises ValueError for an out-of-range port
    except ValueError as exc:
        raise RequestBuildError.malformed_url(request_url, str(exc)) from exc
    scheme = parsed.scheme.lower()
    if scheme not in {"http", "https"}:
        raise RequestBuildError.malformed_url(request_url, "unsupported URL scheme")
    if not parsed.hostname:
        raise RequestBuildError.malformed_url(request_url, "URL missing network location")
    return request_url


def is_success_status(status: int) -> bool:
    """Return True for status codes in the 2xx range."""
    return _SUCCESS_MIN <= status < _SUCCESS_MAX


__all__ = ["ensure_http_url", "is_success_status"]
