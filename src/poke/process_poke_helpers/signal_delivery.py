"""Deliver the reload signal to a single process."""

from __future__ import annotations

import logging
import signal

import psutil

from ..exceptions import SignalDeliveryError

logger = logging.getLogger(__name__)

RELOAD_SIGNAL_NAME = "SIGHUP"


def reload_signal() -> signal.Signals | None:
    """Return SIGHUP, or None on platforms that do not define it."""
    return getattr(signal, RELOAD_SIGNAL_NAME, None)


def deliver_reload_signal(pid: int) -> None:
    """
    Send SIGHUP to the process identified by *pid*.

    Raises:
        SignalDeliveryError: If the process cannot be resolved or refuses the signal
    """
    signum = reload_signal()
    if signum is None:
        raise SignalDeliveryError.send_failed(pid, RELOAD_SIGNAL_NAME, "signal not supported on this platform")

    try:
        proc = psutil.Process(pid)
    except (psutil.NoSuchProcess, psutil.AccessDenied, ValueError) as exc:
        raise SignalDeliveryError.lookup_failed(pid, exc) from exc

    try:
        proc.send_signal(signum)
    except (psutil.Error, OSError) as exc:
        raise SignalDeliveryError.send_failed(pid, RELOAD_SIGNAL_NAME, exc) from exc

    logger.debug("Delivered %s to PID %d", RELOAD_SIGNAL_NAME, pid)


__all__ = ["RELOAD_SIGNAL_NAME", "deliver_reload_signal", "reload_signal"]
