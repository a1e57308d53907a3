"""User-facing message text and help rendering.

Text builders are pure and return strings.  The ``show_*_help``
functions render a Rich table when Rich is installed and fall back to
plain aligned text on stderr otherwise.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from haul_cli.cli.console import console
from haul_cli.core.models import CommandDefinition, OptionDefinition


# ---------------------------------------------------------------------------
# Text builders
# ---------------------------------------------------------------------------

def command_not_implemented(name: str) -> str:
    return (
        f"'haul {name}' is not implemented. "
        f"Use the react-native CLI for '{name}' instead."
    )


def command_failed(command: str, exc: BaseException) -> str:
    return f"Command '{command}' failed with: {type(exc).__name__}: {exc}"


def _option_flag(option: OptionDefinition) -> str:
    return "--" + option.name.replace("_", "-")


def _option_default(option: OptionDefinition) -> str:
    if option.default is None:
        return ""
    if callable(option.default):
        return "(computed)"
    return str(option.default)


def _option_details(option: OptionDefinition) -> str:
    parts = [option.description] if option.description else []
    if option.choices:
        parts.append("one of: " + ", ".join(c.value for c in option.choices))
    if option.required:
        parts.append("required")
    return "; ".join(parts)


def _plain_table(title: str, rows: Sequence[tuple[str, ...]]) -> None:
    print(f"\n{title}", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        print("  ".join(cells).rstrip(), file=sys.stderr)
    print(file=sys.stderr)


def _rich_table(title: str, headers: Sequence[str], rows: Sequence[tuple[str, ...]]) -> None:
    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*row)
    console.print()
    console.print(table)
    console.print()


def _render_table(title: str, headers: Sequence[str], rows: Sequence[tuple[str, ...]]) -> None:
    try:
        import rich.table  # noqa: F401
    except ModuleNotFoundError:
        _plain_table(title, [tuple(headers), *rows])
        return
    _rich_table(title, headers, rows)


# ---------------------------------------------------------------------------
# Help screens
# ---------------------------------------------------------------------------

def show_global_help(commands: Sequence[CommandDefinition]) -> None:
    """List every registered command."""
    rows = [(cmd.display_name, cmd.description) for cmd in commands]
    _render_table("Usage: haul <command> <options>", ("Command", "Description"), rows)
    console.print("Run 'haul COMMAND --help' for more information on a command.")


def show_command_help(command: CommandDefinition) -> None:
    """Describe *command* and each of its options."""
    if not command.options:
        console.print(f"\n{command.display_name}: {command.description}\n")
        console.print("This command takes no options.")
        return
    rows = [
        (_option_flag(opt), _option_details(opt), _option_default(opt))
        for opt in command.options
    ]
    _render_table(
        f"{command.display_name}: {command.description}",
        ("Option", "Description", "Default"),
        rows,
    )
