"""The command shell — registries, diagnostics and line dispatch.

A :class:`CommandShell` is one self-contained interpreter context.
Hosts usually create a single instance at startup, register commands and
variables, then call :meth:`CommandShell.run_line` for each line the
user submits.  Independent instances never share state, which keeps
tests (and hosts with several consoles) isolated.

Dispatch
--------
::

    "say hello world"
          ↓ tokenize
    ["say", "hello", "world"]
          ↓ first token, upper-cased
    lookup "SAY"  ──not found──►  "Command SAY could not be found"
          ↓
    arity check   ──failed────►  "SAY requires at least 1 argument"
          ↓                       "    -> Usage: say <text>"
    handler((CommandArg("hello"), CommandArg("world")))

Guarantees
----------
* No ``print()``; results are side effects on the diagnostic channel.
* Bad user input never raises; wiring bugs raise
  :class:`~cmdshell.exceptions.ShellConfigurationError` subclasses.
* Exceptions raised by a handler propagate unchanged.
* Single-threaded: the host must serialise calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from cmdshell.core.arguments import CommandArg
from cmdshell.core.command_registry import CommandRegistry
from cmdshell.core.diagnostics import DiagnosticChannel
from cmdshell.core.models import Command, VariableBinding
from cmdshell.core.naming import canonical_name
from cmdshell.core.protocols import CommandHandler, ValueGetter, ValueSetter
from cmdshell.core.tokenizer import tokenize
from cmdshell.core.variable_registry import VariableRegistry
from cmdshell.exceptions import ShellConfigurationError
from cmdshell.utils.constants import UNBOUNDED, USAGE_HINT_PREFIX

logger = logging.getLogger(__name__)


class CommandShell:
    """Interpreter context owning the registries and the diagnostic slot."""

    def __init__(self) -> None:
        self.diagnostics: DiagnosticChannel = DiagnosticChannel()
        self.commands: CommandRegistry = CommandRegistry(self.diagnostics)
        self.variables: VariableRegistry = VariableRegistry(self.diagnostics)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    @property
    def last_error(self) -> str | None:
        """Message left by the most recent run, or ``None``."""
        return self.diagnostics.last_error

    def issue_error(self, fmt: str, *args: object) -> None:
        """Let handlers report a problem in their own words."""
        self.diagnostics.issue(fmt, *args)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def run_line(self, line: str) -> None:
        """Parse *line* and run the command it names.

        Inspect :attr:`last_error` afterwards; it is ``None`` when the
        command ran without reporting anything.
        """
        logger.debug("input: %s", line)
        self.diagnostics.clear()

        tokens = [token for token in tokenize(line) if token]
        if not tokens:
            return

        name = canonical_name(tokens[0])
        arguments = tuple(CommandArg(token, self.diagnostics) for token in tokens[1:])

        command = self.commands.lookup(name)
        if command is None:
            self.diagnostics.issue("Command {0} could not be found", name)
            return

        self._run_command(command, arguments)

    def run_line_ok(self, line: str) -> bool:
        """Run *line* and return ``True`` when no diagnostic was left."""
        self.run_line(line)
        return self.last_error is None

    def _run_command(self, command: Command, arguments: Sequence[CommandArg]) -> None:
        if not self._check_arity(command, len(arguments)):
            return

        if command.handler is None:
            self.diagnostics.issue("{0} is missing a handler", command.name)
            return

        logger.debug("running %s with %d argument(s)", command.name, len(arguments))
        command.handler(arguments)

    def _check_arity(self, command: Command, arg_count: int) -> bool:
        """Issue the arity diagnostic and return ``False`` on a mismatch."""
        exact = command.min_arg_count == command.max_arg_count

        if arg_count < command.min_arg_count:
            label = "exactly" if exact else "at least"
            required = command.min_arg_count
        elif not command.is_unbounded and arg_count > command.max_arg_count:
            label = "exactly" if exact else "at most"
            required = command.max_arg_count
        else:
            return True

        self.diagnostics.issue(
            "{0} requires {1} {2} argument{3}",
            command.name,
            label,
            required,
            "" if required == 1 else "s",
        )
        if command.hint is not None:
            self.diagnostics.append(USAGE_HINT_PREFIX + command.hint)
        return False

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_command(
        self,
        name: str,
        handler: CommandHandler | None,
        min_args: int = 0,
        max_args: int = UNBOUNDED,
        help: str = "",
        hint: str | None = None,
        secret: bool = False,
    ) -> bool:
        """Register a command; see :meth:`CommandRegistry.register`."""
        return self.commands.register(
            name,
            handler,
            min_args=min_args,
            max_args=max_args,
            help=help,
            hint=hint,
            secret=secret,
        )

    def add_placeholder(
        self,
        name: str,
        min_args: int = 0,
        max_args: int = UNBOUNDED,
        help: str = "",
    ) -> bool:
        return self.commands.register_placeholder(name, min_args, max_args, help)

    def list_commands(self, *, include_secret: bool = False) -> list[Command]:
        """Commands for help and autocomplete; secret ones hidden by default."""
        return self.commands.list_commands(include_secret=include_secret)

    # ------------------------------------------------------------------
    # Variables
    # ------------------------------------------------------------------

    def add_variable(
        self,
        name: str,
        binding: VariableBinding | None = None,
        *,
        value_type: type | None = None,
        getter: ValueGetter | None = None,
        setter: ValueSetter | None = None,
    ) -> None:
        """Register a variable from a binding or from its parts.

        Either pass a ready :class:`VariableBinding`, or *value_type*,
        *getter* and *setter* together.

        Raises
        ------
        DuplicateVariableError
            If *name* is already registered.
        ShellConfigurationError
            If neither a binding nor all three parts are given, or if
            both are.
        """
        if binding is not None and (
            value_type is not None or getter is not None or setter is not None
        ):
            raise ShellConfigurationError(
                f"variable {canonical_name(name)} takes either a binding or "
                "its value_type, getter and setter, not both",
            )
        if binding is None:
            if value_type is None or getter is None or setter is None:
                raise ShellConfigurationError(
                    f"variable {canonical_name(name)} needs a binding, "
                    "or a value_type with a getter and a setter",
                )
            binding = VariableBinding(value_type=value_type, getter=getter, setter=setter)
        self.variables.register(name, binding)

    def get_variable(self, name: str) -> Any:
        return self.variables.get(name)

    def set_variable(self, name: str, value: str | CommandArg) -> None:
        self.variables.set(name, value)

    def list_variable_names(self) -> list[str]:
        return self.variables.names()
