"""Registry of externally owned variables.

Unlike commands, a duplicate or unknown variable name is a wiring bug
in the host and raises immediately.  The *value* written to a variable
comes from the user, so a value that does not parse is reported through
the diagnostic channel and the setter receives the type's default.
"""

from __future__ import annotations

import logging
from typing import Any

from cmdshell.core import coercion
from cmdshell.core.arguments import CommandArg
from cmdshell.core.diagnostics import DiagnosticChannel
from cmdshell.core.models import VariableBinding
from cmdshell.core.naming import canonical_name
from cmdshell.exceptions import DuplicateVariableError, UnknownVariableError

logger = logging.getLogger(__name__)


class VariableRegistry:
    """Maps canonical variable names to :class:`VariableBinding` records."""

    def __init__(self, channel: DiagnosticChannel) -> None:
        self._channel: DiagnosticChannel = channel
        self._bindings: dict[str, VariableBinding] = {}

    def register(self, name: str, binding: VariableBinding) -> None:
        """Add *binding* under *name*.

        Raises
        ------
        DuplicateVariableError
            If *name* is already registered (compared case-insensitively).
        """
        key = canonical_name(name)
        if key in self._bindings:
            raise DuplicateVariableError(f"there is already a variable called {key}")
        self._bindings[key] = binding
        logger.debug("registered variable %s (%s)", key, binding.value_type.__name__)

    def get(self, name: str) -> Any:
        """Return the variable's current value from its getter.

        Raises
        ------
        UnknownVariableError
            If no variable is registered under *name*.
        """
        return self._binding(name).getter()

    def set(self, name: str, value: str | CommandArg) -> None:
        """Coerce *value* to the declared type and pass it to the setter.

        Enum values must spell a member name exactly.  A
        :class:`CommandArg` is read for its text only; failures are
        reported to this registry's channel, not the argument's.

        Raises
        ------
        UnknownVariableError
            If no variable is registered under *name*.
        """
        binding = self._binding(name)
        arg = CommandArg(str(value), self._channel)
        coerced = self._coerce(binding, arg)
        logger.debug("setting variable %s to %r", canonical_name(name), coerced)
        binding.setter(coerced)

    def names(self) -> list[str]:
        return list(self._bindings)

    def binding(self, name: str) -> VariableBinding:
        return self._binding(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and canonical_name(name) in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _binding(self, name: str) -> VariableBinding:
        key = canonical_name(name)
        try:
            return self._bindings[key]
        except KeyError:
            raise UnknownVariableError(f"no variable registered with name {key}") from None

    @staticmethod
    def _coerce(binding: VariableBinding, arg: CommandArg) -> Any:
        value_type = binding.value_type
        if value_type is str:
            return arg.string
        if value_type is bool:
            return arg.to_bool()
        if value_type is int:
            return arg.to_int()
        if value_type is float:
            return arg.to_float()
        if binding.is_enum:
            return arg.to_enum(value_type, ignore_case=False)
        # VariableBinding rejects every other type at construction.
        raise AssertionError(f"unreachable variable type {value_type!r}")  # pragma: no cover
