"""CLI application entry point for cmdshell.

This module is the **sole error boundary** for the reference host.  It
catches :class:`~cmdshell.exceptions.CmdShellError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Input modes
-----------
* ``cmdshell -c "echo hi" -c "get prompt"``: run each line in order.
* ``cmdshell < script.txt``: run every line read from stdin.
* ``cmdshell`` on a terminal: prompt for lines until EOF or ``quit``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator

from cmdshell.cli import exit_codes
from cmdshell.cli.builtins import HostSession, install_builtins
from cmdshell.cli.console import console, escape_markup, output
from cmdshell.exceptions import CmdShellError
from cmdshell.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="cmdshell",
        description="Run text commands through the cmdshell interpreter.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        metavar="LINE",
        help="Run LINE instead of reading stdin.  May be repeated.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and dispatch details to stderr.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Line processing
# ---------------------------------------------------------------------------

def _report_error(message: str, hint: str | None = None) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape_markup(message)}")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {escape_markup(hint)}")


def run_lines(session: HostSession, lines: Iterable[str]) -> bool:
    """Run *lines* through the session's shell.

    Stops early when a ``quit`` command clears ``session.running``.
    Returns ``True`` when no line left a diagnostic.
    """
    all_ok = True
    for line in lines:
        if session.settings.echo_input:
            output.print(f"{session.settings.prompt}{line}", markup=False)
        try:
            session.shell.run_line(line)
        except CmdShellError as exc:
            _report_error(str(exc), exc.hint)
            all_ok = False
        else:
            error = session.shell.last_error
            if error is not None:
                _report_error(error)
                all_ok = False
        if not session.running:
            break
    return all_ok


def _iter_interactive(session: HostSession) -> Iterator[str]:
    while True:
        try:
            yield input(session.settings.prompt)
        except EOFError:
            return


def _iter_stream() -> Iterator[str]:
    for raw in sys.stdin:
        yield raw.rstrip("\r\n")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cmdshell CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    session = HostSession()
    install_builtins(session)

    if args.commands:
        ok = run_lines(session, args.commands)
        return exit_codes.SUCCESS if ok else exit_codes.GENERAL_ERROR

    if sys.stdin.isatty():
        run_lines(session, _iter_interactive(session))
        return exit_codes.SUCCESS

    ok = run_lines(session, _iter_stream())
    return exit_codes.SUCCESS if ok else exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CmdShellError as exc:
        _report_error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
