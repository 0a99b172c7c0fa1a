"""Process signalling exceptions."""

from . import PokeError


class ProcessPokeError(PokeError):
    """Base process poke error."""

    pass


class ProcessListError(ProcessPokeError):
    """Process table could not be enumerated."""

    pass


class ProcessNotFoundError(ProcessPokeError):
    """No running process matched the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'no process found with name "{name}"', name=name)


class SignalDeliveryError(ProcessPokeError):
    """Reload signal could not be delivered."""

    @classmethod
    def lookup_failed(cls, pid: int, detail: object) -> "SignalDeliveryError":
        """Create error for a pid that no longer resolves to a process."""
        return cls(f"failed to find process {pid}: {detail}", pid=pid)

    @classmethod
    def send_failed(cls, pid: int, signal_name: str, detail: object) -> "SignalDeliveryError":
        """Create error for a signal the OS refused to deliver."""
        return cls(f"failed to send {signal_name} to PID {pid}: {detail}", pid=pid)

    @classmethod
    def none_delivered(cls, last_error: "SignalDeliveryError | None") -> "SignalDeliveryError":
        """Create error for a batch in which every delivery failed."""
        return cls(f"failed to send signal to any process: {last_error}", last_error=last_error)


__all__ = [
    "ProcessListError",
    "ProcessNotFoundError",
    "ProcessPokeError",
    "SignalDeliveryError",
]
