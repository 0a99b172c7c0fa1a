"""Command line entry point: ``poke http ...`` and ``poke sighup ...``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, NoReturn, Optional, Sequence, TextIO

from .config import DEFAULT_HTTP_TIMEOUT, ConfigurationError, HttpPokeSettings, ProcessPokeSettings, parse_bool
from .exceptions import PokeError, UsageError
from .http_poke import DEFAULT_METHOD, poke_http
from .logging_config import setup_logging
from .process_poke import poke_process
from .version import VERSION

logger = logging.getLogger(__name__)

PROG = "poke"
EXIT_OK = 0
EXIT_FAILURE = 1

_VERSION_FLAGS = {"-version", "--version"}
_HELP_FLAGS = {"-h", "-help", "--help"}

USAGE = f"""{PROG} - Poke your processes to reload them

Usage:
  {PROG} <command> [options]

Commands:
  http     Send POST request to reload endpoint
  sighup   Send SIGHUP signal to process by name

Options:
  -version  Show version information

Examples:
  {PROG} http -url=http://localhost:8080/-/reload
  {PROG} sighup -name=myapp

Use '{PROG} <command> -h' for more information about a command.
"""

HTTP_EPILOG = f"""Examples:
  {PROG} http -url=http://localhost:8080/-/reload
  {PROG} http -url=http://localhost:9090/-/reload -timeout=5s
"""

SIGHUP_EPILOG = f"""Examples:
  {PROG} sighup -name=myapp
  {PROG} sighup -name=custom-exporter -all
"""


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser that writes to the given streams and reports usage problems with exit status 1."""

    def __init__(self, *args, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def print_help(self, file: Optional[TextIO] = None) -> None:
        super().print_help(file if file is not None else self.stdout)

    def print_usage(self, file: Optional[TextIO] = None) -> None:
        super().print_usage(file if file is not None else self.stdout)

    def exit(self, status: int = 0, message: Optional[str] = None) -> NoReturn:
        if message:
            self.stderr.write(message)
        sys.exit(status)

    def error(self, message: str) -> NoReturn:  # type: ignore[override]
        self.print_help(self.stderr)
        self.exit(EXIT_FAILURE, f"\n{self.prog}: error: {message}\n")


def _flag_value(param_name: str) -> Callable[[str], bool]:
    def convert(text: str) -> bool:
        try:
            return parse_bool(text, param_name=param_name)
        except ConfigurationError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    return convert


def _add_bool_flag(parser: CommandParser, name: str, help_text: str, dest: Optional[str] = None) -> None:
    # Bare "-all" means true; "-all=false" is also accepted.
    parser.add_argument(
        f"-{name}",
        f"--{name}",
        dest=dest or name,
        nargs="?",
        const=True,
        default=False,
        type=_flag_value(name),
        metavar="BOOL",
        help=help_text,
    )


def _build_http_parser(stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> CommandParser:
    parser = CommandParser(
        prog=f"{PROG} http",
        description="Send POST request to reload application",
        epilog=HTTP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        stdout=stdout,
        stderr=stderr,
    )
    parser.add_argument("-url", "--url", default="", help="URL to send POST request to (required)")
    parser.add_argument(
        "-timeout",
        "--timeout",
        default=DEFAULT_HTTP_TIMEOUT,
        help=f"Request timeout as a duration, e.g. 500ms, 10s, 1m (default {DEFAULT_HTTP_TIMEOUT})",
    )
    _add_bool_flag(parser, "verbose", "Enable verbose output")
    return parser


def _build_sighup_parser(stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> CommandParser:
    parser = CommandParser(
        prog=f"{PROG} sighup",
        description="Send SIGHUP signal to process by name",
        epilog=SIGHUP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        stdout=stdout,
        stderr=stderr,
    )
    parser.add_argument("-name", "--name", default="", help="Process name to send SIGHUP to (required)")
    _add_bool_flag(parser, "all", "Send signal to all matching processes", dest="all_matches")
    _add_bool_flag(parser, "verbose", "Enable verbose output")
    return parser


def _reject_configuration(parser: CommandParser, exc: ConfigurationError) -> int:
    parser.print_help(parser.stderr)
    parser.stderr.write(f"\n{parser.prog}: error: {exc}\n")
    return EXIT_FAILURE


def run_http(argv: Sequence[str], stdout: TextIO, stderr: TextIO) -> int:
    parser = _build_http_parser(stdout, stderr)
    args = parser.parse_args(list(argv))
    try:
        settings = HttpPokeSettings.from_flags(args.url, args.timeout, args.verbose)
    except ConfigurationError as exc:
        return _reject_configuration(parser, exc)

    setup_logging(settings.verbose, stream=stderr)
    try:
        poke_http(settings.url, DEFAULT_METHOD, "", settings.timeout_seconds, settings.verbose)
    except PokeError as exc:
        logger.error("HTTP request failed: %s", exc)
        return EXIT_FAILURE
    return EXIT_OK


def run_sighup(argv: Sequence[str], stdout: TextIO, stderr: TextIO) -> int:
    parser = _build_sighup_parser(stdout, stderr)
    args = parser.parse_args(list(argv))
    try:
        settings = ProcessPokeSettings.from_flags(args.name, args.all_matches, args.verbose)
    except ConfigurationError as exc:
        return _reject_configuration(parser, exc)

    setup_logging(settings.verbose, stream=stderr)
    try:
        poke_process(settings.name, settings.all_matches, settings.verbose)
    except PokeError as exc:
        logger.error("SIGHUP failed: %s", exc)
        return EXIT_FAILURE
    return EXIT_OK


CommandHandler = Callable[[Sequence[str], TextIO, TextIO], int]

COMMANDS: Dict[str, CommandHandler] = {
    "http": run_http,
    "sighup": run_sighup,
}


def _resolve_command(argv: List[str]) -> CommandHandler:
    if not argv:
        raise UsageError.missing_command()
    handler = COMMANDS.get(argv[0])
    if handler is None:
        raise UsageError.unknown_command(argv[0])
    return handler


def main(argv: Optional[Sequence[str]] = None, *, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Dispatch to a sub-command and return the process exit status."""

    args = list(sys.argv[1:] if argv is None else argv)
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    if args and args[0] in _VERSION_FLAGS:
        out.write(f"{PROG} version {VERSION}\n")
        return EXIT_OK
    if args and args[0] in _HELP_FLAGS:
        out.write(USAGE)
        return EXIT_OK

    try:
        handler = _resolve_command(args)
    except UsageError as exc:
        if getattr(exc, "command", None) is not None:
            err.write(f"{exc}\n\n")
        err.write(USAGE)
        return EXIT_FAILURE

    try:
        return handler(args[1:], out, err)
    except SystemExit as exc:
        # argparse exits on -h and on malformed flags
        return exc.code if isinstance(exc.code, int) else EXIT_FAILURE


def run() -> None:
    sys.exit(main())


__all__ = ["COMMANDS", "USAGE", "main", "run", "run_http", "run_sighup"]
