"""Infrastructure layer — adapters between host code and the shell.

This layer inspects host namespaces and objects so the core never needs
to.  It calls only the core's public registration API.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cmdshell.infra.bindings import bind_attribute
from cmdshell.infra.discovery import CommandSpec, discover_commands, shell_command

__all__: list[str] = [
    "CommandSpec",
    "bind_attribute",
    "discover_commands",
    "shell_command",
]
