"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from typing import Any, Iterable
from unittest.mock import patch

import pytest


class FakeProcess:
    """Stand-in for a psutil.Process yielded by ``process_iter``."""

    def __init__(self, pid: int, name: str | None, cmdline: list[str] | None = None, *, name_error: Exception | None = None):
        self.pid = pid
        self.info: dict[str, Any] = {"pid": pid, "name": name, "cmdline": cmdline}
        self._name = name
        self._name_error = name_error

    def name(self) -> str | None:
        if self._name_error is not None:
            raise self._name_error
        return self._name


class FakeProcessTable:
    """Installs a fixed process list behind ``psutil.process_iter``."""

    def __init__(self) -> None:
        self.processes: list[FakeProcess] = []
        self.iter_calls: list[Any] = []

    def add(self, pid: int, name: str | None, cmdline: list[str] | None = None, **kwargs: Any) -> FakeProcess:
        proc = FakeProcess(pid, name, cmdline if cmdline is not None else [name or ""], **kwargs)
        self.processes.append(proc)
        return proc

    def process_iter(self, attrs: Iterable[str] | None = None) -> Iterable[FakeProcess]:
        self.iter_calls.append(attrs)
        return iter(list(self.processes))


@pytest.fixture
def process_table():
    """Provide an empty fake process table patched into psutil."""
    table = FakeProcessTable()
    with patch("psutil.process_iter", side_effect=table.process_iter):
        yield table


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo handlers installed by setup_logging so tests stay isolated."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)
