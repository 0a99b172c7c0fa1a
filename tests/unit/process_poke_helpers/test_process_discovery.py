"""Tests for process discovery module."""

from __future__ import annotations

import logging
from unittest.mock import patch

import psutil
import pytest

from poke.exceptions import ProcessListError
from poke.process_poke_helpers.process_discovery import (
    current_pid,
    discover_matching_processes,
    name_matches,
)


class TestNameMatches:
    def test_exact_match(self) -> None:
        assert name_matches("myapp", "myapp")

    def test_substring_match(self) -> None:
        assert name_matches("node_exporter", "exporter")

    def test_no_match(self) -> None:
        assert not name_matches("nginx", "myapp")

    def test_match_is_case_sensitive(self) -> None:
        assert not name_matches("MyApp", "myapp")


class TestDiscoverMatchingProcesses:
    def test_requests_pid_name_and_cmdline(self, process_table) -> None:
        discover_matching_processes("anything")

        assert process_table.iter_calls == [["pid", "name", "cmdline"]]

    def test_returns_empty_when_nothing_matches(self, process_table) -> None:
        process_table.add(1, "init")
        process_table.add(2, "sshd")

        assert discover_matching_processes("myapp") == []

    def test_first_match_mode_stops_at_first_hit(self, process_table) -> None:
        process_table.add(10, "nginx")
        process_table.add(11, "node_exporter")
        process_table.add(12, "blackbox_exporter")

        matches = discover_matching_processes("exporter")

        assert [m.pid for m in matches] == [11]

    def test_all_mode_collects_every_match_in_enumeration_order(self, process_table) -> None:
        process_table.add(30, "blackbox_exporter")
        process_table.add(10, "nginx")
        process_table.add(20, "node_exporter")
        process_table.add(40, "exporter")

        matches = discover_matching_processes("exporter", all_matches=True)

        assert [m.pid for m in matches] == [30, 20, 40]
        assert [m.name for m in matches] == ["blackbox_exporter", "node_exporter", "exporter"]

    def test_skips_processes_without_resolvable_name(self, process_table) -> None:
        process_table.add(5, None, [], name_error=psutil.AccessDenied(5))
        process_table.add(6, None, [], name_error=psutil.NoSuchProcess(6))
        process_table.add(7, None, [], name_error=psutil.ZombieProcess(7))
        process_table.add(8, "myapp")

        matches = discover_matching_processes("myapp", all_matches=True)

        assert [m.pid for m in matches] == [8]

    def test_falls_back_to_name_method(self, process_table) -> None:
        proc = process_table.add(9, "myapp")
        proc.info["name"] = None

        matches = discover_matching_processes("myapp")

        assert [m.pid for m in matches] == [9]

    def test_excludes_given_pid(self, process_table) -> None:
        process_table.add(100, "python3")
        process_table.add(101, "python3")

        matches = discover_matching_processes("python", all_matches=True, exclude_pid=100)

        assert [m.pid for m in matches] == [101]

    def test_keeps_command_line(self, process_table) -> None:
        process_table.add(3, "myapp", ["/usr/bin/myapp", "--config", "/etc/myapp.yml"])

        (match,) = discover_matching_processes("myapp")

        assert match.cmdline == ("/usr/bin/myapp", "--config", "/etc/myapp.yml")
        assert match.display_cmdline == "/usr/bin/myapp --config /etc/myapp.yml"

    def test_unreadable_command_line_becomes_empty(self, process_table) -> None:
        proc = process_table.add(3, "myapp")
        proc.info["cmdline"] = None

        (match,) = discover_matching_processes("myapp")

        assert match.cmdline == ()

    def test_verbose_logs_each_match(self, process_table, caplog) -> None:
        caplog.set_level(logging.INFO)
        process_table.add(21, "node_exporter", ["node_exporter", "--web.listen-address=:9100"])
        process_table.add(22, "blackbox_exporter", ["blackbox_exporter"])

        discover_matching_processes("exporter", all_matches=True, verbose=True)

        assert "Found process: PID=21, Name=node_exporter, Cmdline=node_exporter --web.listen-address=:9100" in caplog.text
        assert "Found process: PID=22, Name=blackbox_exporter, Cmdline=blackbox_exporter" in caplog.text

    def test_quiet_mode_does_not_log_matches(self, process_table, caplog) -> None:
        caplog.set_level(logging.INFO)
        process_table.add(21, "node_exporter")

        discover_matching_processes("exporter")

        assert "Found process" not in caplog.text

    def test_enumeration_failure_raises(self) -> None:
        with patch("psutil.process_iter", side_effect=OSError("proc unavailable")):
            with pytest.raises(ProcessListError, match="failed to list processes: proc unavailable"):
                discover_matching_processes("myapp")


def test_current_pid_is_this_process() -> None:
    import os

    assert current_pid() == os.getpid()
