"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

The ``info``/``warn``/``error``/``done`` helpers are the CLI's logger:
each prefixes the message with a level tag.
"""

from __future__ import annotations

import sys
from typing import Any

from haul_cli.exceptions import EnvironmentError


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
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def print_exception(self, exc: BaseException) -> None:
		"""Render a traceback for *exc*."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			import traceback

			traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)
			return
		from rich.traceback import Traceback

		rich_console.print(
			Traceback.from_exception(type(exc), exc, exc.__traceback__),
		)

	def clear(self) -> None:
		"""Clear the terminal; a no-op when stderr is not a terminal."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			return
		rich_console.clear()


console = _ConsoleProxy()


# ---------------------------------------------------------------------------
# Level-tagged logging helpers
# ---------------------------------------------------------------------------

def _escape(message: str) -> str:
	"""Escape Rich markup in *message*; identity when Rich is missing."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return message
	return escape(message)


def info(message: str) -> None:
	console.print(f"[bold blue] INFO [/bold blue] {_escape(message)}")


def warn(message: str) -> None:
	console.print(f"[bold yellow] WARN [/bold yellow] {_escape(message)}")


def error(message: str) -> None:
	console.print(f"[bold red] ERROR [/bold red] {_escape(message)}")


def done(message: str) -> None:
	console.print(f"[bold green] DONE [/bold green] {_escape(message)}")
