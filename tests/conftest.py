"""Shared pytest fixtures and configuration for the cmdshell test suite.

Guidelines
----------
* Every test builds its own :class:`CommandShell`; nothing is global.
* Core tests must be pure: no console output, no stdin.
* CLI tests drive ``main(argv)`` with ``-c`` or a patched stdin.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import pytest

from cmdshell.core.arguments import CommandArg
from cmdshell.core.diagnostics import DiagnosticChannel
from cmdshell.core.shell import CommandShell


class Difficulty(Enum):
    EASY = 1
    NORMAL = 2
    Hard = 3


class Recorder:
    """Command handler that remembers every call's raw arguments."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def __call__(self, args: Sequence[CommandArg]) -> None:
        self.calls.append([arg.string for arg in args])


@pytest.fixture()
def shell() -> CommandShell:
    return CommandShell()


@pytest.fixture()
def channel() -> DiagnosticChannel:
    return DiagnosticChannel()


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()
