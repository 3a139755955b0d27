"""Regression tests for the optional Rich dependency.

The interpreter core never imports Rich, and the reference host must
keep working with plain ``print`` output when Rich is missing.
"""

from __future__ import annotations

import sys

import pytest

from cmdshell.cli import exit_codes
from cmdshell.cli.app import main
from cmdshell.cli.console import escape_markup, get_rich_console
from cmdshell.exceptions import DependencyError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_get_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(DependencyError, match="rich is not installed"):
        get_rich_console()


def test_escape_markup_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape_markup("[bold]x[/bold]") == "[bold]x[/bold]"


def test_commands_print_plainly_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["-c", "echo plain", "-c", "help"]) == exit_codes.SUCCESS
    out = capsys.readouterr().out
    assert "plain" in out
    echo_rows = [line for line in out.splitlines() if line.startswith("ECHO ")]
    assert len(echo_rows) == 1
    assert echo_rows[0].endswith("Print the arguments")


def test_diagnostics_print_plainly_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["-c", "missing"]) == exit_codes.GENERAL_ERROR
    assert "Command MISSING could not be found" in capsys.readouterr().err


def test_core_does_not_import_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    from cmdshell.core.shell import CommandShell

    shell = CommandShell()
    shell.run_line("anything")
    assert shell.last_error == "Command ANYTHING could not be found"
