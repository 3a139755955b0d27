"""Pure string-to-value parsers used by arguments and variables.

Every parser returns ``None`` on failure and never touches the
diagnostic channel; reporting is the caller's job.  This keeps the
rules here deterministic and trivially unit-testable.

Accepted forms
--------------
* int:   optional sign followed by ASCII digits (``-12``, ``+7``).
* float: optional sign, digits with an optional decimal point, optional
  exponent (``1``, ``-2.5``, ``.5``, ``3.``, ``1e-3``).  ``nan`` and
  ``inf`` spellings are not numbers for this purpose.
* bool:  ``TRUE`` or ``FALSE`` in any letter case, nothing else.
* enum:  a member name of the requested :class:`~enum.Enum` subclass.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TypeVar

from cmdshell.exceptions import NotAnEnumError

E = TypeVar("E", bound=Enum)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# ---------------------------------------------------------------------------
# Primitive parsers
# ---------------------------------------------------------------------------

def parse_int(raw: str) -> int | None:
    """Parse a base-10 integer, or return ``None``."""
    if _INT_RE.fullmatch(raw) is None:
        return None
    return int(raw)


def parse_float(raw: str) -> float | None:
    """Parse a base-10 decimal number, or return ``None``."""
    if _FLOAT_RE.fullmatch(raw) is None:
        return None
    return float(raw)


def parse_bool(raw: str) -> bool | None:
    """Match the literals ``TRUE`` / ``FALSE`` case-insensitively."""
    upper = raw.upper()
    if upper == "TRUE":
        return True
    if upper == "FALSE":
        return False
    return None


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

def ensure_enum_type(enum_type: object) -> None:
    """Raise :class:`NotAnEnumError` unless *enum_type* is a usable enum.

    Requesting an enum conversion for anything else is caller misuse,
    not bad user input, so it fails fast.
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise NotAnEnumError(
            f"type {enum_type!r} is not an enum - arguments can't be read this way",
        )
    if not enum_type.__members__:
        raise NotAnEnumError(
            f"enum type {enum_type.__qualname__} has no members",
        )


def enum_type_name(enum_type: type[Enum]) -> str:
    """Return the name used for *enum_type* in diagnostics.

    The qualified name without the module (``Outer.Difficulty``), since
    the message is read by the person typing commands.
    """
    return enum_type.__qualname__


def default_member(enum_type: type[E]) -> E:
    """Return the first declared member of *enum_type*."""
    ensure_enum_type(enum_type)
    return next(iter(enum_type))


def parse_enum(
    raw: str,
    enum_type: type[E],
    *,
    ignore_case: bool = True,
) -> E | None:
    """Look up *raw* among the member names of *enum_type*.

    An exact match always wins.  With *ignore_case*, the first member
    whose name matches regardless of case is returned otherwise.
    """
    ensure_enum_type(enum_type)
    members = enum_type.__members__
    if raw in members:
        return members[raw]
    if ignore_case:
        upper = raw.upper()
        for name, member in members.items():
            if name.upper() == upper:
                return member
    return None
