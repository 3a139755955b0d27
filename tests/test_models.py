"""Tests for domain models (core/models.py).

Both models are frozen dataclasses. These tests verify validation,
immutability and the convenience properties.
"""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from cmdshell.core.models import Command, VariableBinding, is_supported_variable_type
from cmdshell.exceptions import InvalidArityError, UnsupportedVariableTypeError
from cmdshell.utils.constants import UNBOUNDED
from conftest import Difficulty


def _noop(args: Any) -> None:
    return None


def _make_command(**overrides: object) -> Command:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "name": "SAY",
        "handler": _noop,
        "min_arg_count": 1,
        "max_arg_count": UNBOUNDED,
        "help": "Say something",
    }
    defaults.update(overrides)
    return Command(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class TestCommand:
    def test_defaults(self) -> None:
        c = Command(name="X", handler=_noop)
        assert c.min_arg_count == 0
        assert c.max_arg_count == UNBOUNDED
        assert c.help == ""
        assert c.hint is None
        assert c.secret is False

    def test_unbounded(self) -> None:
        assert _make_command().is_unbounded
        assert not _make_command(max_arg_count=3).is_unbounded

    def test_placeholder(self) -> None:
        assert _make_command(handler=None).is_placeholder
        assert not _make_command().is_placeholder

    def test_exact_arity_allowed(self) -> None:
        c = _make_command(min_arg_count=2, max_arg_count=2)
        assert c.min_arg_count == c.max_arg_count == 2

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(InvalidArityError):
            _make_command(min_arg_count=3, max_arg_count=1)

    def test_negative_min_rejected(self) -> None:
        with pytest.raises(InvalidArityError):
            _make_command(min_arg_count=-1)

    def test_max_below_sentinel_rejected(self) -> None:
        with pytest.raises(InvalidArityError) as exc_info:
            _make_command(min_arg_count=0, max_arg_count=-2)
        assert exc_info.value.hint is not None

    def test_unbounded_ignores_min(self) -> None:
        assert _make_command(min_arg_count=10).min_arg_count == 10

    def test_frozen(self) -> None:
        c = _make_command()
        with pytest.raises(AttributeError):
            c.name = "OTHER"  # type: ignore[misc]

    def test_replace_revalidates(self) -> None:
        with pytest.raises(InvalidArityError):
            dataclasses.replace(_make_command(max_arg_count=2), min_arg_count=5)


# ---------------------------------------------------------------------------
# VariableBinding
# ---------------------------------------------------------------------------

class TestVariableBinding:
    @pytest.mark.parametrize("value_type", [str, int, float, bool, Difficulty])
    def test_supported_types(self, value_type: type) -> None:
        binding = VariableBinding(value_type=value_type, getter=lambda: None, setter=_noop)
        assert binding.value_type is value_type

    @pytest.mark.parametrize("value_type", [list, dict, bytes, complex, type(None)])
    def test_unsupported_types_rejected(self, value_type: type) -> None:
        with pytest.raises(UnsupportedVariableTypeError):
            VariableBinding(value_type=value_type, getter=lambda: None, setter=_noop)

    def test_is_enum(self) -> None:
        assert VariableBinding(Difficulty, lambda: None, _noop).is_enum
        assert not VariableBinding(int, lambda: None, _noop).is_enum

    def test_helper_rejects_non_types(self) -> None:
        assert not is_supported_variable_type("int")
        assert not is_supported_variable_type(Difficulty.EASY)
