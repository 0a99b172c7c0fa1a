from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from ..exceptions import SignalDeliveryError


@dataclass(frozen=True)
class ProcessMatch:
    """A running process whose name matched the requested target."""

    pid: int
    name: str
    cmdline: Tuple[str, ...] = ()

    @property
    def display_cmdline(self) -> str:
        return " ".join(self.cmdline)


@dataclass
class DeliveryTally:
    """Outcome counters for one batch of signal deliveries."""

    attempted: int = 0
    succeeded: int = 0
    last_error: Optional[SignalDeliveryError] = None

    def record_success(self) -> None:
        self.attempted += 1
        self.succeeded += 1

    def record_failure(self, error: SignalDeliveryError) -> None:
        self.attempted += 1
        self.last_error = error

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded


@dataclass(frozen=True)
class ProcessPokeResult:
    name: str
    all_matches: bool
    matches: Sequence[ProcessMatch] = field(default_factory=tuple)
    tally: DeliveryTally = field(default_factory=DeliveryTally)

    @property
    def pids(self) -> list[int]:
        return [match.pid for match in self.matches]

    @property
    def partial(self) -> bool:
        """True when fan-out reached some, but not all, matched processes."""
        return self.all_matches and 0 < self.tally.succeeded < len(self.matches)


__all__ = ["DeliveryTally", "ProcessMatch", "ProcessPokeResult"]
