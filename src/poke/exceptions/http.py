"""HTTP reload exceptions."""

from . import PokeError


class HttpPokeError(PokeError):
    """Base HTTP poke error."""

    pass


class RequestBuildError(HttpPokeError):
    """Reload request could not be constructed."""

    @classmethod
    def malformed_url(cls, url: str, reason: str) -> "RequestBuildError":
        """Create error for a URL that cannot be requested."""
        return cls(f"failed to create request: {reason}: {url!r}", url=url)


class HttpTransportError(HttpPokeError):
    """Reload request never produced a response."""

    @classmethod
    def request_failed(cls, method: str, url: str, detail: object) -> "HttpTransportError":
        """Create error for a failed round trip."""
        return cls(f"request failed: {method} {url}: {detail}", url=url)


class RequestTimeoutError(HttpTransportError):
    """Reload request exceeded its timeout."""

    @classmethod
    def exceeded(cls, method: str, url: str, timeout_seconds: float) -> "RequestTimeoutError":
        """Create error for a request that ran past its deadline."""
        return cls(
            f"request failed: {method} {url}: timed out after {timeout_seconds:g}s",
            url=url,
            timeout_seconds=timeout_seconds,
        )


class ResponseReadError(HttpPokeError):
    """Reload response body could not be read."""

    @classmethod
    def unreadable(cls, url: str, detail: object) -> "ResponseReadError":
        """Create error for a response body that failed mid-read."""
        return cls(f"failed to read response from {url}: {detail}", url=url)


class HttpStatusError(HttpPokeError):
    """Reload endpoint answered with a non-2xx status."""

    def __init__(self, status: int, body: str, *, url: str = "") -> None:
        super().__init__(
            f"server returned error status {status}: {body}",
            status=status,
            body=body,
            url=url,
        )


__all__ = [
    "HttpPokeError",
    "HttpStatusError",
    "HttpTransportError",
    "RequestBuildError",
    "RequestTimeoutError",
    "ResponseReadError",
]
