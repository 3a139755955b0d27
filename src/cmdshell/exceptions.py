"""Custom exception hierarchy for cmdshell.

Only *configuration* mistakes raise.  Anything caused by what the user
typed (unknown command, wrong argument count, bad value) is reported
through the shell's :class:`~cmdshell.core.diagnostics.DiagnosticChannel`
instead and never surfaces as an exception.

Hierarchy
---------
CmdShellError
├── ShellConfigurationError
│   ├── DuplicateVariableError
│   ├── UnknownVariableError
│   ├── NotAnEnumError
│   ├── UnsupportedVariableTypeError
│   └── InvalidArityError
└── DependencyError
"""

from __future__ import annotations


class CmdShellError(Exception):
    """Base exception for all cmdshell errors.

    The CLI error boundary renders any subclass as a clean message
    without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Host wiring -----------------------------------------------------------

class ShellConfigurationError(CmdShellError):
    """Raised when the host wires commands or variables incorrectly."""


class DuplicateVariableError(ShellConfigurationError):
    """Raised when a variable name is registered twice."""


class UnknownVariableError(ShellConfigurationError):
    """Raised when a variable is read or written before registration."""


class NotAnEnumError(ShellConfigurationError):
    """Raised when an enum conversion is requested for a non-enum type."""


class UnsupportedVariableTypeError(ShellConfigurationError):
    """Raised when a variable binding declares a type the shell cannot coerce."""


class InvalidArityError(ShellConfigurationError):
    """Raised when a command's min/max argument counts contradict each other."""


# --- Environment / tooling -------------------------------------------------

class DependencyError(CmdShellError):
    """Raised when an optional runtime dependency is not available."""
