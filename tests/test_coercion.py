"""Tests for the pure string parsers (core/coercion.py).

No diagnostics are involved here; every parser returns ``None`` on
failure and the caller decides how to report it.
"""

from __future__ import annotations

from enum import Enum

import pytest

from cmdshell.core.coercion import (
    default_member,
    ensure_enum_type,
    enum_type_name,
    parse_bool,
    parse_enum,
    parse_float,
    parse_int,
)
from cmdshell.exceptions import NotAnEnumError
from conftest import Difficulty


class Empty(Enum):
    pass


# ---------------------------------------------------------------------------
# int
# ---------------------------------------------------------------------------

class TestParseInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0", 0), ("42", 42), ("-7", -7), ("+3", 3), ("007", 7)],
    )
    def test_valid(self, raw: str, expected: int) -> None:
        assert parse_int(raw) == expected

    def test_large_values_are_not_truncated(self) -> None:
        n = 2**70
        assert parse_int(str(n)) == n

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "1_000", "0x10", "--1", "1e3", " 1"])
    def test_invalid(self, raw: str) -> None:
        assert parse_int(raw) is None


# ---------------------------------------------------------------------------
# float
# ---------------------------------------------------------------------------

class TestParseFloat:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1", 1.0),
            ("-2.5", -2.5),
            (".5", 0.5),
            ("3.", 3.0),
            ("1e-3", 0.001),
            ("+6.02E23", 6.02e23),
        ],
    )
    def test_valid(self, raw: str, expected: float) -> None:
        assert parse_float(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", ".", "abc", "1.2.3", "nan", "inf", "1e", "1_0.0"])
    def test_invalid(self, raw: str) -> None:
        assert parse_float(raw) is None


# ---------------------------------------------------------------------------
# bool
# ---------------------------------------------------------------------------

class TestParseBool:
    @pytest.mark.parametrize("raw", ["true", "TRUE", "True", "tRuE"])
    def test_true(self, raw: str) -> None:
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["false", "FALSE", "False"])
    def test_false(self, raw: str) -> None:
        assert parse_bool(raw) is False

    @pytest.mark.parametrize("raw", ["1", "0", "yes", "no", "t", ""])
    def test_truthy_spellings_rejected(self, raw: str) -> None:
        assert parse_bool(raw) is None


# ---------------------------------------------------------------------------
# enum
# ---------------------------------------------------------------------------

class TestParseEnum:
    def test_exact_name(self) -> None:
        assert parse_enum("EASY", Difficulty) is Difficulty.EASY

    def test_case_insensitive_by_default(self) -> None:
        assert parse_enum("normal", Difficulty) is Difficulty.NORMAL
        assert parse_enum("HARD", Difficulty) is Difficulty.Hard

    def test_case_sensitive_when_requested(self) -> None:
        assert parse_enum("easy", Difficulty, ignore_case=False) is None
        assert parse_enum("Hard", Difficulty, ignore_case=False) is Difficulty.Hard

    def test_unknown_member(self) -> None:
        assert parse_enum("nightmare", Difficulty) is None

    def test_values_are_not_names(self) -> None:
        assert parse_enum("1", Difficulty) is None


class TestEnumHelpers:
    def test_default_member_is_first_declared(self) -> None:
        assert default_member(Difficulty) is Difficulty.EASY

    def test_type_name(self) -> None:
        assert enum_type_name(Difficulty) == "Difficulty"

    def test_type_name_keeps_nesting_but_not_module(self) -> None:
        class Outer:
            class Mode(Enum):
                ON = 1

        assert enum_type_name(Outer.Mode).endswith("Outer.Mode")
        assert Outer.Mode.__module__ not in enum_type_name(Outer.Mode)

    @pytest.mark.parametrize("not_enum", [int, str, "Difficulty", Difficulty.EASY])
    def test_rejects_non_enum(self, not_enum: object) -> None:
        with pytest.raises(NotAnEnumError):
            ensure_enum_type(not_enum)

    def test_rejects_empty_enum(self) -> None:
        with pytest.raises(NotAnEnumError, match="no members"):
            ensure_enum_type(Empty)
