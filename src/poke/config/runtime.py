from __future__ import annotations

"""Helpers for validating values taken from the command line."""

import math
import re

from .errors import ConfigurationError

_DURATION_FORMAT = "a duration such as 500ms, 30s, 1m30s or 1h"

# Longer unit spellings come first so "ms" is not read as minutes.
_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_COMPONENT = r"(\d+(?:\.\d*)?|\.\d+)(" + "|".join(re.escape(unit) for unit in _UNIT_SECONDS) + ")"
_COMPONENT_RE = re.compile(_COMPONENT)
_DURATION_RE = re.compile(r"([+-]?)((?:" + _COMPONENT + r")+)")

# Largest span a signed 64-bit nanosecond counter can hold.
_MAX_DURATION_SECONDS = 9223372036.854775807

_TRUE_VALUES = {"1", "t", "true"}
_FALSE_VALUES = {"0", "f", "false"}


def parse_duration(text: str, *, param_name: str = "timeout") -> float:
    """
    Parse a duration expression into seconds.

    Accepts one or more ``<number><unit>`` components (``1m30s``, ``2.5s``,
    ``250ms``) with an optional leading sign. ``"0"`` is accepted on its own;
    any other bare number is rejected because its unit is ambiguous.

    Raises:
        ConfigurationError: If the expression is empty, malformed or out of range.
    """
    raw = (text or "").strip()
    if not raw:
        raise ConfigurationError.missing_value(param_name)
    if raw in {"0", "+0", "-0"}:
        return 0.0

    match = _DURATION_RE.fullmatch(raw)
    if match is None:
        raise ConfigurationError.invalid_format(param_name, raw, _DURATION_FORMAT)

    sign, body = match.group(1), match.group(2)
    total = sum(float(number) * _UNIT_SECONDS[unit] for number, unit in _COMPONENT_RE.findall(body))
    if not math.isfinite(total) or total > _MAX_DURATION_SECONDS:
        raise ConfigurationError.invalid_value(param_name, raw, "Duration out of range")
    return -total if sign == "-" else total


def parse_positive_duration(text: str, *, param_name: str = "timeout") -> float:
    """Parse a duration and require it to be strictly positive."""

    seconds = parse_duration(text, param_name=param_name)
    if seconds <= 0:
        raise ConfigurationError.invalid_value(param_name, text, "Duration must be positive")
    return seconds


def parse_bool(text: str, *, param_name: str) -> bool:
    """Parse a boolean flag value such as ``true``, ``false``, ``1`` or ``0``."""

    lowered = (text or "").strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_format(param_name, text, "true or false")


def require_non_empty(param_name: str, value: str | None) -> str:
    """Return *value* stripped, raising when it is missing or blank."""

    if value is None or not value.strip():
        raise ConfigurationError.missing_value(param_name)
    return value.strip()


__all__ = ["parse_bool", "parse_duration", "parse_positive_duration", "require_non_empty"]
