"""Registry of named commands.

Registration never raises for a name conflict: the first registration
stays in place and the conflict is reported through the diagnostic
channel, so a host with one bad declaration still ends up with a usable
shell.

Placeholders
------------
A discovery layer may find a command whose handler cannot take the
argument sequence directly (it needs typed parameters bound by a
separate front command).  It registers the arity and help as a
handler-less *placeholder*.  When the real handler is registered under
the same name, in either order, the two records merge: handler, hint
and secret flag from the real registration, arity and help from the
placeholder.  Placeholders that never receive a handler are reported by
:meth:`CommandRegistry.report_missing_handlers`; a handler that arrives
after such a report withdraws it.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator

from cmdshell.core.diagnostics import DiagnosticChannel
from cmdshell.core.models import Command
from cmdshell.core.naming import canonical_name
from cmdshell.core.protocols import CommandHandler
from cmdshell.utils.constants import UNBOUNDED

logger = logging.getLogger(__name__)

_MISSING_HANDLER = "{0} is missing a handler"


class CommandRegistry:
    """Maps canonical command names to :class:`Command` records.

    Parameters
    ----------
    channel:
        Receives "already defined" and "missing a handler" reports.
    """

    def __init__(self, channel: DiagnosticChannel) -> None:
        self._channel: DiagnosticChannel = channel
        self._commands: dict[str, Command] = {}
        self._merged: set[str] = set()
        self._reported_missing: set[str] = set()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        handler: CommandHandler | None,
        min_args: int = 0,
        max_args: int = UNBOUNDED,
        help: str = "",
        hint: str | None = None,
        secret: bool = False,
    ) -> bool:
        """Register *handler* under *name*.

        Returns ``True`` when the command was added (or merged with a
        placeholder), ``False`` when the name was already taken.

        Raises
        ------
        InvalidArityError
            If *min_args* and *max_args* contradict each other.
        """
        return self.add(
            Command(
                name=name,
                handler=handler,
                min_arg_count=min_args,
                max_arg_count=max_args,
                help=help,
                hint=hint,
                secret=secret,
            ),
        )

    def register_placeholder(
        self,
        name: str,
        min_args: int = 0,
        max_args: int = UNBOUNDED,
        help: str = "",
    ) -> bool:
        """Record arity and help for a command whose handler comes later."""
        return self.add(
            Command(
                name=name,
                handler=None,
                min_arg_count=min_args,
                max_arg_count=max_args,
                help=help,
            ),
        )

    def add(self, command: Command) -> bool:
        """Insert a prepared :class:`Command`, canonicalising its name."""
        name = canonical_name(command.name)
        if name != command.name:
            command = dataclasses.replace(command, name=name)

        existing = self._commands.get(name)
        if existing is None:
            self._commands[name] = command
            logger.debug(
                "registered %s %s (args %d..%d)",
                "placeholder" if command.is_placeholder else "command",
                name,
                command.min_arg_count,
                command.max_arg_count,
            )
            return True

        if name not in self._merged and existing.is_placeholder != command.is_placeholder:
            self._commands[name] = self._merge(existing, command)
            self._merged.add(name)
            self._withdraw_missing_report(name)
            logger.debug("merged placeholder metadata into %s", name)
            return True

        self._channel.issue("Command {0} is already defined.", name)
        logger.debug("rejected duplicate command %s", name)
        return False

    @staticmethod
    def _merge(first: Command, second: Command) -> Command:
        placeholder, real = (first, second) if first.is_placeholder else (second, first)
        return dataclasses.replace(
            real,
            min_arg_count=placeholder.min_arg_count,
            max_arg_count=placeholder.max_arg_count,
            help=placeholder.help or real.help,
        )

    def report_missing_handlers(self) -> list[str]:
        """Report every placeholder still lacking a handler.

        Each name is issued to the diagnostic channel only the first
        time it is found missing.  Returns all names currently missing,
        in registration order.
        """
        missing = self.missing_handlers()
        for name in missing:
            if name in self._reported_missing:
                continue
            self._reported_missing.add(name)
            self._channel.issue(_MISSING_HANDLER, name)
            logger.warning("command %s is missing a handler", name)
        return missing

    def missing_handlers(self) -> list[str]:
        """Names of placeholders without a handler, without reporting them."""
        return [name for name, command in self._commands.items() if command.is_placeholder]

    def _withdraw_missing_report(self, name: str) -> None:
        """Forget an earlier report for *name* now that it has a handler."""
        if name not in self._reported_missing:
            return
        self._reported_missing.discard(name)
        if self._channel.last_error == _MISSING_HANDLER.format(name):
            self._channel.clear()
        logger.debug("handler for %s supplied after it was reported missing", name)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, name: str) -> Command | None:
        return self._commands.get(canonical_name(name))

    def list_commands(self, *, include_secret: bool = True) -> list[Command]:
        """Return commands in registration order, optionally hiding secret ones."""
        return [
            command
            for command in self._commands.values()
            if include_secret or not command.secret
        ]

    def names(self) -> list[str]:
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and canonical_name(name) in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
