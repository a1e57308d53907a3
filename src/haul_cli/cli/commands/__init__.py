"""The command registry: known commands, the default and retired names."""

from __future__ import annotations

from haul_cli.cli.commands import bundle, init, start
from haul_cli.core.models import CommandDefinition, CommandRegistry

COMMANDS: tuple[CommandDefinition, ...] = (
    init.COMMAND,
    start.COMMAND,
    bundle.COMMAND,
)

DEFAULT_COMMAND: CommandDefinition = start.COMMAND

# Commands of the react-native CLI that haul deliberately does not provide.
RETIRED_COMMANDS: frozenset[str] = frozenset({
    "run-ios",
    "run-android",
    "library",
    "unbundle",
    "link",
    "unlink",
    "install",
    "uninstall",
    "upgrade",
    "log-android",
    "log-ios",
    "dependencies",
})

REGISTRY = CommandRegistry(
    commands=COMMANDS,
    default=DEFAULT_COMMAND,
    retired=RETIRED_COMMANDS,
)

__all__: list[str] = ["COMMANDS", "DEFAULT_COMMAND", "REGISTRY", "RETIRED_COMMANDS"]
