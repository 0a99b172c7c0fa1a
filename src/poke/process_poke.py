"""
Process reload handler.

Finds running processes by name and sends each selected one SIGHUP so it
reloads its configuration. Delivery failures on individual processes are
logged and the batch continues; the call only fails when nothing matched
or no delivery succeeded.

Usage:
    from poke.process_poke import poke_process

    # Signal the first process whose name contains "myapp"
    poke_process("myapp")

    # Signal every matching process
    poke_process("exporter", all_matches=True)
"""

from __future__ import annotations

import logging
from typing import Optional

from .exceptions import ProcessNotFoundError, SignalDeliveryError
from .process_poke_helpers.process_discovery import current_pid, discover_matching_processes
from .process_poke_helpers.process_models import DeliveryTally, ProcessPokeResult
from .process_poke_helpers.signal_delivery import RELOAD_SIGNAL_NAME, deliver_reload_signal

logger = logging.getLogger(__name__)


def poke_process(
    name: str,
    all_matches: bool = False,
    verbose: bool = False,
    *,
    exclude_pid: Optional[int] = None,
) -> ProcessPokeResult:
    """
    Send the reload signal to the first, or every, process matching *name*.

    Args:
        name: Exact process name or a substring of it
        all_matches: Signal every match instead of only the first found
        verbose: Log each discovered process
        exclude_pid: Pid never to signal; defaults to this process

    Returns:
        ProcessPokeResult describing the matches and delivery tally

    Raises:
        ProcessListError: The process table could not be read
        ProcessNotFoundError: No running process matched *name*
        SignalDeliveryError: Every delivery attempt failed
    """
    if exclude_pid is None:
        exclude_pid = current_pid()

    matches = discover_matching_processes(
        name,
        all_matches=all_matches,
        verbose=verbose,
        exclude_pid=exclude_pid,
    )
    if not matches:
        raise ProcessNotFoundError(name)

    tally = DeliveryTally()
    for match in matches:
        try:
            deliver_reload_signal(match.pid)
        except SignalDeliveryError as exc:
            tally.record_failure(exc)
            logger.warning("Warning: %s", exc)
            continue

        tally.record_success()
        logger.info("Successfully poked process %s (PID: %d) with %s", name, match.pid, RELOAD_SIGNAL_NAME)

    if tally.succeeded == 0:
        raise SignalDeliveryError.none_delivered(tally.last_error)

    result = ProcessPokeResult(name=name, all_matches=all_matches, matches=tuple(matches), tally=tally)
    if result.partial:
        logger.warning(
            "Warning: Only sent signal to %d out of %d processes",
            tally.succeeded,
            len(matches),
        )
    return result


__all__ = ["poke_process"]
