"""Tests for the single-slot diagnostic channel (core/diagnostics.py)."""

from __future__ import annotations

import logging

import pytest

from cmdshell.core.diagnostics import DiagnosticChannel


class TestDiagnosticChannel:
    def test_starts_empty(self, channel: DiagnosticChannel) -> None:
        assert channel.last_error is None
        assert not channel

    def test_issue_formats_positional_args(self, channel: DiagnosticChannel) -> None:
        channel.issue("{0} requires {1}", "SAY", 2)
        assert channel.last_error == "SAY requires 2"
        assert channel

    def test_issue_without_args_keeps_braces(self, channel: DiagnosticChannel) -> None:
        channel.issue("literal {braces}")
        assert channel.last_error == "literal {braces}"

    def test_last_write_wins(self, channel: DiagnosticChannel) -> None:
        channel.issue("first")
        channel.issue("second")
        assert channel.last_error == "second"

    def test_append_concatenates(self, channel: DiagnosticChannel) -> None:
        channel.issue("primary")
        channel.append("\nsecondary")
        assert channel.last_error == "primary\nsecondary"

    def test_clear(self, channel: DiagnosticChannel) -> None:
        channel.issue("x")
        channel.clear()
        assert channel.last_error is None

    def test_issue_is_logged(
        self, channel: DiagnosticChannel, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="cmdshell.core.diagnostics"):
            channel.issue("logged {0}", 1)
        assert "logged 1" in caplog.text
