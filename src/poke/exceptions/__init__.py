"""Exception classes for poke.

Every failure raised by a handler inherits from PokeError so the CLI can
turn it into a single log line and a non-zero exit status.

Exception classes support two patterns:
1. No-argument raise: raise UsageError()
2. Contextual attributes: err = HttpStatusError("...", status=500, body="boom"); raise err
"""

from typing import Any


class PokeError(Exception):
    """Base exception for all poke errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Poke failed"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class UsageError(PokeError):
    """Command line usage is invalid."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Command line usage is invalid"
        super().__init__(message, **kwargs)

    @classmethod
    def unknown_command(cls, command: str) -> "UsageError":
        """Create error for an unrecognised sub-command."""
        return cls(f"Unknown command: {command}", command=command)

    @classmethod
    def missing_command(cls) -> "UsageError":
        """Create error for an invocation without any sub-command."""
        return cls("No command given")


from .http import (  # noqa: E402
    HttpPokeError,
    HttpStatusError,
    HttpTransportError,
    RequestBuildError,
    RequestTimeoutError,
    ResponseReadError,
)
from .process import (  # noqa: E402
    ProcessListError,
    ProcessNotFoundError,
    ProcessPokeError,
    SignalDeliveryError,
)

__all__ = [
    "HttpPokeError",
    "HttpStatusError",
    "HttpTransportError",
    "PokeError",
    "ProcessListError",
    "ProcessNotFoundError",
    "ProcessPokeError",
    "RequestBuildError",
    "RequestTimeoutError",
    "ResponseReadError",
    "SignalDeliveryError",
    "UsageError",
]
