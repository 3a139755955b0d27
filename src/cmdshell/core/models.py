"""Domain models for cmdshell.

Both models are **frozen** dataclasses.  A :class:`Command` is replaced,
never mutated, when a placeholder merges with its real handler.  A
:class:`VariableBinding` only references the host's storage through its
getter and setter; it never holds the value itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from cmdshell.core.protocols import CommandHandler, ValueGetter, ValueSetter
from cmdshell.exceptions import InvalidArityError, UnsupportedVariableTypeError
from cmdshell.utils.constants import UNBOUNDED

SUPPORTED_VARIABLE_TYPES: tuple[type, ...] = (str, int, float, bool)
"""Primitive types a variable may declare (enum subclasses are also allowed)."""


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """A named, arity-constrained operation."""

    name: str
    """Canonical (upper-case) command name."""

    handler: CommandHandler | None
    """Callable receiving the arguments, or ``None`` for a placeholder."""

    min_arg_count: int = 0
    max_arg_count: int = UNBOUNDED
    """Upper bound on arguments; :data:`UNBOUNDED` (``-1``) means no limit."""

    help: str = ""
    hint: str | None = None
    """Usage line appended to arity diagnostics, e.g. ``"say <text>"``."""

    secret: bool = False
    """Hidden from listings but still invocable."""

    def __post_init__(self) -> None:
        if self.min_arg_count < 0:
            raise InvalidArityError(
                f"{self.name}: min_arg_count must not be negative "
                f"(got {self.min_arg_count})",
            )
        if self.max_arg_count < UNBOUNDED:
            raise InvalidArityError(
                f"{self.name}: max_arg_count must be {UNBOUNDED} or more "
                f"(got {self.max_arg_count})",
                hint=f"Use {UNBOUNDED} for an unbounded argument count.",
            )
        if not self.is_unbounded and self.min_arg_count > self.max_arg_count:
            raise InvalidArityError(
                f"{self.name}: min_arg_count {self.min_arg_count} exceeds "
                f"max_arg_count {self.max_arg_count}",
            )

    @property
    def is_placeholder(self) -> bool:
        return self.handler is None

    @property
    def is_unbounded(self) -> bool:
        return self.max_arg_count == UNBOUNDED


# ---------------------------------------------------------------------------
# Variables
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VariableBinding:
    """Get/set access to a value owned by the host."""

    value_type: type
    """``str``, ``int``, ``float``, ``bool`` or an :class:`~enum.Enum` subclass."""

    getter: ValueGetter
    setter: ValueSetter

    def __post_init__(self) -> None:
        if not is_supported_variable_type(self.value_type):
            raise UnsupportedVariableTypeError(
                f"variables of type {self.value_type!r} are not supported",
                hint="Declare str, int, float, bool or an Enum subclass.",
            )

    @property
    def is_enum(self) -> bool:
        return issubclass(self.value_type, Enum)


def is_supported_variable_type(value_type: Any) -> bool:
    """Return ``True`` when the shell can coerce text into *value_type*."""
    if value_type in SUPPORTED_VARIABLE_TYPES:
        return True
    return isinstance(value_type, type) and issubclass(value_type, Enum)
