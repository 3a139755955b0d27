"""Built-in commands of the reference ``cmdshell`` host.

These are ordinary host commands: they are declared with
:func:`~cmdshell.infra.discovery.shell_command` and registered through
:func:`~cmdshell.infra.discovery.discover_commands`, exactly as any
other host would wire its own commands.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from cmdshell.cli.console import escape_markup, output
from cmdshell.core.arguments import CommandArg
from cmdshell.core.models import Command
from cmdshell.core.shell import CommandShell
from cmdshell.infra.bindings import bind_attribute
from cmdshell.infra.discovery import discover_commands, shell_command


@dataclass
class HostSettings:
    """Host-owned values exposed to the user as shell variables."""

    prompt: str = "> "
    echo_input: bool = False


@dataclass
class HostSession:
    """State shared by the CLI loop and the built-in commands."""

    shell: CommandShell = field(default_factory=CommandShell)
    settings: HostSettings = field(default_factory=HostSettings)
    running: bool = True


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def format_value(value: Any) -> str:
    """Render a variable value the way a user would type it back."""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _print_plain_command_table(commands: Sequence[Command]) -> None:
    """Render the HELP listing without Rich."""
    width = max((len(command.name) for command in commands), default=0)
    for command in commands:
        print(f"{command.name:<{width}}  {command.help}", file=sys.stdout)


def _print_command_table(commands: Sequence[Command]) -> None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_command_table(commands)
        return

    table = Table(show_header=True, header_style="bold cyan", border_style="dim")
    table.add_column("Command", style="bold")
    table.add_column("Help")
    for command in commands:
        table.add_row(escape_markup(command.name), escape_markup(command.help))
    output.print(table)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class Builtins:
    """Handlers for HELP, ECHO, SET, GET, VARIABLES and QUIT."""

    def __init__(self, session: HostSession) -> None:
        self.session = session

    @property
    def shell(self) -> CommandShell:
        return self.session.shell

    @shell_command(max_args=1, help="List commands, or describe one", hint="help [command]")
    def command_help(self, args: Sequence[CommandArg]) -> None:
        if not args:
            _print_command_table(self.shell.list_commands())
            return

        command = self.shell.commands.lookup(args[0].string)
        if command is None or command.secret:
            self.shell.issue_error("Command {0} could not be found", args[0].string.upper())
            return
        output.print(f"{command.name}: {command.help}", markup=False)
        if command.hint is not None:
            output.print(f"Usage: {command.hint}", markup=False)

    @shell_command(min_args=1, help="Print the arguments", hint="echo <text>")
    def command_echo(self, args: Sequence[CommandArg]) -> None:
        output.print(" ".join(arg.string for arg in args), markup=False)

    @shell_command(
        min_args=2,
        help="Assign a value to a variable",
        hint="set <variable> <value>",
    )
    def command_set(self, args: Sequence[CommandArg]) -> None:
        name = args[0].string
        if name not in self.shell.variables:
            self.shell.issue_error("Variable {0} could not be found", name.upper())
            return
        value = " ".join(arg.string for arg in args[1:])
        self.shell.set_variable(name, value)

    @shell_command(min_args=1, max_args=1, help="Show a variable's value", hint="get <variable>")
    def command_get(self, args: Sequence[CommandArg]) -> None:
        name = args[0].string
        if name not in self.shell.variables:
            self.shell.issue_error("Variable {0} could not be found", name.upper())
            return
        value = self.shell.get_variable(name)
        output.print(f"{name.upper()} = {format_value(value)}", markup=False)

    @shell_command(max_args=0, help="List variables and their values")
    def command_variables(self, args: Sequence[CommandArg]) -> None:
        for name in self.shell.list_variable_names():
            value = self.shell.get_variable(name)
            output.print(f"{name} = {format_value(value)}", markup=False)

    @shell_command(max_args=0, help="Stop reading input")
    def command_quit(self, args: Sequence[CommandArg]) -> None:
        self.session.running = False


def install_builtins(session: HostSession) -> list[str]:
    """Register the built-in commands and host variables on *session*."""
    shell = session.shell
    shell.add_variable("prompt", bind_attribute(session.settings, "prompt"))
    shell.add_variable("echo_input", bind_attribute(session.settings, "echo_input"))
    return discover_commands(shell, Builtins(session))
