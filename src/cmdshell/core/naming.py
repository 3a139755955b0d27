"""Command and variable name helpers.

Names are compared case-insensitively everywhere by upper-casing them
with :func:`canonical_name`.  The ``infer_*`` helpers derive a command
name from a Python identifier; discovery layers may apply them before
registering, the registries never do.
"""

from __future__ import annotations

import re

from cmdshell.utils.constants import COMMAND_MARKER, FRONT_MARKER

_UNDERSCORE_RUN_RE = re.compile(r"_+")


def canonical_name(name: str) -> str:
    return name.upper()


def _remove_marker(identifier: str, marker: str) -> str | None:
    """Drop the first case-insensitive *marker*; ``None`` if absent."""
    match = re.search(re.escape(marker), identifier, re.IGNORECASE)
    if match is None:
        return None
    stripped = identifier[:match.start()] + identifier[match.end():]
    return _UNDERSCORE_RUN_RE.sub("_", stripped).strip("_")


def infer_command_name(identifier: str) -> str:
    """Derive a command name from a function name.

    ``"command_say"``, ``"SayCommand"`` and ``"say"`` all yield ``"say"``
    (up to case).  Identifiers without ``command`` are returned as-is.
    """
    inferred = _remove_marker(identifier, COMMAND_MARKER)
    return identifier if inferred is None else inferred


def infer_front_command_name(identifier: str) -> str | None:
    """Strip ``front`` from a front-command identifier.

    Returns ``None`` when *identifier* is not a front command, so
    ``"front_command_teleport"`` gives ``"command_teleport"`` and
    ``"teleport"`` gives ``None``.
    """
    return _remove_marker(identifier, FRONT_MARKER)
