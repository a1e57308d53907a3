"""Domain models for haul-cli.

All models are **frozen** dataclasses — immutable value objects built
once at import time (schemas, the command registry) or once per
invocation (resolution outcomes).  The only behaviour they carry is the
pure ``default``/``parse`` callables supplied by the schema author.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

Config = Mapping[str, Any]
"""Resolved configuration: option name → validated, parsed value."""

DefaultFactory = Callable[[Config], Any]
"""Computes a default from the configuration resolved so far."""

Action = Callable[[Config], Awaitable[None]]
"""Coroutine function a command runs with its resolved configuration."""


# ---------------------------------------------------------------------------
# Option schema
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Choice:
    """One accepted value of an option with a closed value set."""

    value: str
    """Raw value the flag must equal (compared before parsing)."""

    description: str = ""
    """Shown next to the value in command help."""


@dataclass(frozen=True, slots=True)
class OptionDefinition:
    """Declarative description of one accepted flag."""

    name: str
    """Unique key within the schema; also the key in the resolved config."""

    description: str = ""

    required: bool = False
    """When true, a value must be present after default resolution."""

    default: Union[DefaultFactory, Any] = None
    """Literal default, or a callable receiving the config resolved so far."""

    choices: tuple[Choice, ...] | None = None

    parse: Callable[[Any], Any] | None = None
    """Applied to non-empty values, after choice validation."""

    def resolve_default(self, config: Config) -> Any:
        """Return the literal default or evaluate the default factory."""
        if callable(self.default):
            return self.default(config)
        return self.default


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandDefinition:
    """A named subcommand, its option schema and its action."""

    name: str
    action: Action
    description: str = ""
    options: tuple[OptionDefinition, ...] = ()

    @property
    def display_name(self) -> str:
        return f"haul {self.name}"


@dataclass(frozen=True, slots=True)
class CommandRegistry:
    """Everything the command resolver consults, expressed as data.

    ``commands`` are scanned in order; ``default`` is used when the first
    token names none of them; ``retired`` names short-circuit to an
    informational outcome.
    """

    commands: tuple[CommandDefinition, ...]
    default: CommandDefinition
    retired: frozenset[str] = field(default_factory=frozenset)

    def find(self, name: str | None) -> CommandDefinition | None:
        """Return the first registered command called *name*, if any."""
        return next((cmd for cmd in self.commands if cmd.name == name), None)


# ---------------------------------------------------------------------------
# Resolution outcome
# ---------------------------------------------------------------------------

class OutcomeKind(Enum):
    SHOW_VERSION = "version"
    SHOW_GLOBAL_HELP = "global-help"
    SHOW_COMMAND_HELP = "command-help"
    NOT_IMPLEMENTED = "not-implemented"
    RUN = "run"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving an argument vector against a registry.

    Every kind except :attr:`OutcomeKind.RUN` is terminal: processing
    stops after the outcome has been reported.
    """

    kind: OutcomeKind
    command: CommandDefinition | None = None
    """The selected command for ``RUN`` and ``SHOW_COMMAND_HELP``."""

    name: str | None = None
    """The retired command name for ``NOT_IMPLEMENTED``."""

    argv: tuple[str, ...] = ()
    """Tokens handed to the tokenizer for ``RUN``."""

    @property
    def is_terminal(self) -> bool:
        return self.kind is not OutcomeKind.RUN
