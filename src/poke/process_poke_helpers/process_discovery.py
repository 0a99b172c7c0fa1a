"""Process discovery by name."""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable, List, Optional

import psutil

from ..exceptions import ProcessListError
from .process_models import ProcessMatch

logger = logging.getLogger(__name__)

_PROCESS_ATTRS = ["pid", "name", "cmdline"]


def name_matches(candidate: str, target: str) -> bool:
    """Exact match or substring containment."""
    return candidate == target or target in candidate


def _resolve_name(proc: Any) -> Optional[str]:
    info = getattr(proc, "info", None) or {}
    name = info.get("name")
    if name:
        return name
    try:
        return proc.name() or None
    except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
        return None


def _resolve_cmdline(proc: Any) -> tuple[str, ...]:
    info = getattr(proc, "info", None) or {}
    cmdline = info.get("cmdline")
    if isinstance(cmdline, (list, tuple)) and all(isinstance(item, str) for item in cmdline):
        return tuple(cmdline)
    return ()


def _iter_process_table() -> Iterable[Any]:
    return psutil.process_iter(_PROCESS_ATTRS)


def discover_matching_processes(
    target: str,
    *,
    all_matches: bool = False,
    verbose: bool = False,
    exclude_pid: Optional[int] = None,
) -> List[ProcessMatch]:
    """
    Scan the live process table for processes whose name matches *target*.

    Processes are visited in psutil's enumeration order, which is platform
    defined and not stable between runs. In first-match mode the scan stops
    at the first hit, so which process is chosen depends on that order.
    Processes whose name cannot be resolved are skipped.

    Args:
        target: Exact name or substring to look for
        all_matches: Collect every match instead of stopping at the first
        verbose: Log each match as it is discovered
        exclude_pid: Pid to ignore, normally the caller's own

    Raises:
        ProcessListError: If the process table cannot be enumerated
    """
    matches: List[ProcessMatch] = []
    try:
        for proc in _iter_process_table():
            pid = getattr(proc, "pid", None)
            if pid is None or pid == exclude_pid:
                continue

            name = _resolve_name(proc)
            if name is None or not name_matches(name, target):
                continue

            match = ProcessMatch(pid=int(pid), name=name, cmdline=_resolve_cmdline(proc))
            matches.append(match)
            if verbose:
                logger.info(
                    "Found process: PID=%d, Name=%s, Cmdline=%s",
                    match.pid,
                    match.name,
                    match.display_cmdline,
                )
            if not all_matches:
                break
    except (psutil.Error, OSError) as exc:
        raise ProcessListError(f"failed to list processes: {exc}") from exc

    logger.debug("Discovered %d process(es) matching %r", len(matches), target)
    return matches


def current_pid() -> int:
    return os.getpid()


__all__ = ["current_pid", "discover_matching_processes", "name_matches"]
