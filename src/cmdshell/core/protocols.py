"""Protocols (interfaces) for the callables a host hands to the shell.

Handlers, getters and setters are plain callables; these protocols only
document the shapes the core relies on.  Any function or bound method
with a compatible signature satisfies them structurally.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from cmdshell.core.arguments import CommandArg


class CommandHandler(Protocol):
    """Contract for command handlers.

    The handler receives the arguments that followed the command name,
    in the order they were typed.  It reports user-facing problems by
    converting arguments (``to_int()`` and friends) or by issuing to the
    shell's diagnostic channel; its return value is ignored.
    """

    def __call__(self, args: Sequence[CommandArg]) -> None:
        ...  # pragma: no cover


class ValueGetter(Protocol):
    """Produces the current value of an externally owned variable."""

    def __call__(self) -> Any:
        ...  # pragma: no cover


class ValueSetter(Protocol):
    """Stores a value, already coerced to the declared type, externally."""

    def __call__(self, value: Any) -> None:
        ...  # pragma: no cover
