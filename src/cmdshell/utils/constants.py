"""Constants shared across every cmdshell layer."""

from __future__ import annotations

UNBOUNDED: int = -1
"""``max_arg_count`` sentinel: the command accepts any number of arguments."""

TOKEN_SEPARATOR: str = " "
"""The only character that separates tokens on an input line."""

USAGE_HINT_PREFIX: str = "\n    -> Usage: "
"""Appended to an arity diagnostic when the command declares a hint."""

COMMAND_MARKER: str = "COMMAND"
"""Substring stripped from identifiers when inferring a command name."""

FRONT_MARKER: str = "FRONT"
"""Substring marking a front command that parses arguments for another."""
