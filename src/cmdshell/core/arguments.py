"""Command arguments with on-demand typed views.

A :class:`CommandArg` wraps one raw token.  Each ``to_*`` conversion is
repeatable and either returns the typed value or, when the token does
not parse, issues a diagnostic and returns the type's default so a
handler that ignores errors still behaves deterministically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from cmdshell.core import coercion
from cmdshell.core.diagnostics import DiagnosticChannel

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True, slots=True)
class CommandArg:
    """One raw token of user input.

    Parameters
    ----------
    string:
        The token exactly as typed.
    channel:
        Where conversion failures are reported.  Excluded from equality
        so two arguments with the same text compare equal.
    """

    string: str
    channel: DiagnosticChannel = field(compare=False, repr=False)

    def __str__(self) -> str:
        return self.string

    # ------------------------------------------------------------------
    # Typed views
    # ------------------------------------------------------------------

    def to_int(self) -> int:
        value = coercion.parse_int(self.string)
        if value is None:
            self._type_error("int")
            return 0
        return value

    def to_float(self) -> float:
        value = coercion.parse_float(self.string)
        if value is None:
            self._type_error("float")
            return 0.0
        return value

    def to_bool(self) -> bool:
        """Accept only ``true``/``false`` (any case); ``1`` or ``yes`` fail."""
        value = coercion.parse_bool(self.string)
        if value is None:
            self._type_error("bool")
            return False
        return value

    def to_enum(self, enum_type: type[E], *, ignore_case: bool = True) -> E:
        """Return the member of *enum_type* named by this argument.

        Raises
        ------
        NotAnEnumError
            If *enum_type* is not an :class:`~enum.Enum` subclass.
        """
        member = coercion.parse_enum(self.string, enum_type, ignore_case=ignore_case)
        if member is None:
            self.channel.issue(
                "value {0} not found in enum type {1}",
                self.string,
                coercion.enum_type_name(enum_type),
            )
            return coercion.default_member(enum_type)
        return member

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _type_error(self, expected_type: str) -> None:
        self.channel.issue(
            "Incorrect type for {0}, expected <{1}>",
            self.string,
            expected_type,
        )
