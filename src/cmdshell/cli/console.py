"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``) and plain line processing
keep working when Rich is not installed.

Two proxies are exported: :data:`console` writes diagnostics to stderr,
:data:`output` writes command output to stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from cmdshell.exceptions import DependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in user-supplied *text*; identity without Rich."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except DependencyError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, markup=markup, highlight=False)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
