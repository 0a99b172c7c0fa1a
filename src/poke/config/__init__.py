"""Command line configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import parse_bool, parse_duration, parse_positive_duration, require_non_empty
from .settings import DEFAULT_HTTP_TIMEOUT, HttpPokeSettings, ProcessPokeSettings

__all__ = [
    "ConfigurationError",
    "DEFAULT_HTTP_TIMEOUT",
    "HttpPokeSettings",
    "ProcessPokeSettings",
    "parse_bool",
    "parse_duration",
    "parse_positive_duration",
    "require_non_empty",
]
