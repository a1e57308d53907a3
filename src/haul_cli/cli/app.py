"""CLI application entry point and command dispatch for haul.

This module is the **sole error boundary** for the entire application.
Every failure raised while resolving, tokenizing, validating or running
a command is caught exactly once, in :func:`run`, and mapped to an exit
code:

* :class:`~haul_cli.exceptions.MessageError` (missing or invalid
  options, cancelled prompts): message shown verbatim, exit 1.
* anything else: "command failed" with a traceback, exit 2.

Architecture notes
------------------
* Resolution, tokenizing and validation are pure core functions; this
  module only sequences them and reports.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence

from haul_cli.cli import exit_codes, messages
from haul_cli.cli.commands import REGISTRY
from haul_cli.cli.console import console, error, info
from haul_cli.core.models import CommandDefinition, CommandRegistry, OutcomeKind, Resolution
from haul_cli.core.resolver import resolve_command
from haul_cli.core.tokenizer import tokenize
from haul_cli.core.validator import validate_options
from haul_cli.exceptions import HaulError, MessageError
from haul_cli.version import __version__


# ---------------------------------------------------------------------------
# Terminal outcomes
# ---------------------------------------------------------------------------

def _report_terminal(resolution: Resolution, registry: CommandRegistry) -> None:
    """Print version, help or the not-implemented notice."""
    if resolution.kind is OutcomeKind.SHOW_VERSION:
        print(f"v{__version__}")
    elif resolution.kind is OutcomeKind.SHOW_GLOBAL_HELP:
        messages.show_global_help(registry.commands)
    elif resolution.kind is OutcomeKind.SHOW_COMMAND_HELP:
        assert resolution.command is not None
        messages.show_command_help(resolution.command)
    elif resolution.kind is OutcomeKind.NOT_IMPLEMENTED:
        assert resolution.name is not None
        info(messages.command_not_implemented(resolution.name))


# ---------------------------------------------------------------------------
# Failure reporting
# ---------------------------------------------------------------------------

def _report_failure(command: CommandDefinition, exc: Exception) -> int:
    console.clear()
    if isinstance(exc, MessageError):
        error(str(exc))
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        return exit_codes.GENERAL_ERROR

    error(messages.command_failed(command.display_name, exc))
    if isinstance(exc, HaulError) and exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
    console.print_exception(exc)
    return exit_codes.UNEXPECTED_ERROR


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

async def run(
    argv: Sequence[str],
    registry: CommandRegistry = REGISTRY,
) -> int:
    """Resolve, validate and run the command named by *argv*.

    Never raises for ``Exception`` subclasses; returns the process exit
    code instead.
    """
    resolution = resolve_command(argv, registry)
    if resolution.is_terminal:
        _report_terminal(resolution, registry)
        return exit_codes.SUCCESS

    command = resolution.command
    assert command is not None
    try:
        flags = tokenize(resolution.argv, command.options)
        config = validate_options(command.options, flags, command.display_name)
        await command.action(config)
    except Exception as exc:  # noqa: BLE001
        return _report_failure(command, exc)
    return exit_codes.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the haul CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    return asyncio.run(run(argv))


def cli() -> None:
    """Console-script entry point; turns the exit code into ``sys.exit``."""
    try:
        code = main()
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    sys.exit(code)
