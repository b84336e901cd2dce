"""CLI console helpers with optional Rich support.

Rich is imported lazily so ``--help`` and ``--version`` keep working
even when it is not installed.  User-entered text must pass through
:func:`escape` before being printed, otherwise ``[bold]`` in a company
name would be read as markup.
"""

from __future__ import annotations

import sys
from typing import Any

from internity.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stdout."""
	console_class = _load_rich_console_class()
	return console_class()


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``/``input`` proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stdout print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stdout)
			return
		rich_console.print(*objects)

	def input(self, prompt: str = "") -> str:
		"""Read one line; raises ``EOFError`` when input is exhausted."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			return input(prompt)
		return rich_console.input(prompt)


console = _ConsoleProxy()
