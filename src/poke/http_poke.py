"""
HTTP reload handler.

Sends a single request to an application's reload endpoint and classifies
the outcome. A 2xx status is success; every other outcome raises a
subclass of HttpPokeError. No retries are attempted.

Usage:
    from poke.http_poke import poke_http

    poke_http("http://localhost:8080/-/reload", timeout=5.0)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import aiohttp

from .exceptions import (
    HttpStatusError,
    HttpTransportError,
    RequestBuildError,
    RequestTimeoutError,
    ResponseReadError,
)
from .http_utils import ensure_http_url, is_success_status

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "POST"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class HttpPokeTarget:
    """Reload request built from validated flags and consumed once."""

    url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    method: str = DEFAULT_METHOD
    body: str = ""


@dataclass(frozen=True)
class HttpPokeResult:
    url: str
    status: int
    body: str


async def poke_http_async(target: HttpPokeTarget, verbose: bool = False) -> HttpPokeResult:
    """
    Send the reload request described by *target*.

    The timeout covers the whole exchange: connecting, sending and reading
    the response body.

    Args:
        target: Request to send
        verbose: Log the outgoing request and the raw response body

    Returns:
        HttpPokeResult for a 2xx response

    Raises:
        RequestBuildError: The URL cannot be requested
        RequestTimeoutError: The exchange exceeded the timeout
        HttpTransportError: The connection failed before a response arrived
        ResponseReadError: The response body could not be read
        HttpStatusError: The endpoint answered with a non-2xx status
    """
    ensure_http_url(target.url)
    timeout = aiohttp.ClientTimeout(total=target.timeout_seconds)

    if verbose:
        logger.info("Sending %s request to %s", target.method, target.url)

    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.request(target.method, target.url, data=target.body or None) as response:
                status = response.status
                body = await _read_body(response, target.url)
    except asyncio.TimeoutError as exc:
        raise RequestTimeoutError.exceeded(target.method, target.url, target.timeout_seconds) from exc
    except aiohttp.InvalidURL as exc:
        raise RequestBuildError.malformed_url(target.url, str(exc)) from exc
    except (aiohttp.ClientError, OSError) as exc:
        raise HttpTransportError.request_failed(target.method, target.url, exc) from exc

    if verbose and body:
        logger.info("Response body: %s", body)

    if not is_success_status(status):
        raise HttpStatusError(status, body, url=target.url)

    logger.info("Successfully poked %s (status: %d)", target.url, status)
    return HttpPokeResult(url=target.url, status=status, body=body)


async def _read_body(response, url: str) -> str:
    """Read the full response body, keeping timeouts distinct from read failures."""
    try:
        raw = await response.read()
    except asyncio.TimeoutError:
        raise
    except (aiohttp.ClientError, OSError) as exc:
        raise ResponseReadError.unreadable(url, exc) from exc
    return raw.decode("utf-8", errors="replace")


def poke_http(
    url: str,
    method: str = DEFAULT_METHOD,
    body: str = "",
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    verbose: bool = False,
) -> HttpPokeResult:
    """Synchronously send one reload request; see :func:`poke_http_async`."""

    target = HttpPokeTarget(url=url, timeout_seconds=timeout, method=method, body=body)
    return asyncio.run(poke_http_async(target, verbose=verbose))


__all__ = [
    "DEFAULT_METHOD",
    "DEFAULT_TIMEOUT_SECONDS",
    "HttpPokeResult",
    "HttpPokeTarget",
    "poke_http",
    "poke_http_async",
]
