"""Validated per-invocation settings built from command line flags."""

from __future__ import annotations

from dataclasses import dataclass

from .runtime import parse_positive_duration, require_non_empty

DEFAULT_HTTP_TIMEOUT = "30s"


@dataclass(frozen=True)
class HttpPokeSettings:
    url: str
    timeout_seconds: float
    verbose: bool = False

    @classmethod
    def from_flags(cls, url: str | None, timeout: str = DEFAULT_HTTP_TIMEOUT, verbose: bool = False) -> "HttpPokeSettings":
        return cls(
            url=require_non_empty("url", url),
            timeout_seconds=parse_positive_duration(timeout, param_name="timeout"),
            verbose=bool(verbose),
        )


@dataclass(frozen=True)
class ProcessPokeSettings:
    name: str
    all_matches: bool = False
    verbose: bool = False

    @classmethod
    def from_flags(cls, name: str | None, all_matches: bool = False, verbose: bool = False) -> "ProcessPokeSettings":
        return cls(
            name=require_non_empty("name", name),
            all_matches=bool(all_matches),
            verbose=bool(verbose),
        )


__all__ = ["DEFAULT_HTTP_TIMEOUT", "HttpPokeSettings", "ProcessPokeSettings"]
