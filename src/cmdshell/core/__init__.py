"""Core layer — the interpreter itself.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* User-input problems go to the diagnostic channel, never raise.
"""

from cmdshell.core.arguments import CommandArg
from cmdshell.core.command_registry import CommandRegistry
from cmdshell.core.diagnostics import DiagnosticChannel
from cmdshell.core.models import Command, VariableBinding
from cmdshell.core.protocols import CommandHandler, ValueGetter, ValueSetter
from cmdshell.core.shell import CommandShell
from cmdshell.core.tokenizer import tokenize
from cmdshell.core.variable_registry import VariableRegistry

__all__: list[str] = [
    "Command",
    "CommandArg",
    "CommandHandler",
    "CommandRegistry",
    "CommandShell",
    "DiagnosticChannel",
    "ValueGetter",
    "ValueSetter",
    "VariableBinding",
    "VariableRegistry",
    "tokenize",
]
