"""Core layer — option schemas, validation and command resolution.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or subprocess I/O.
* No imports from ``cli``, ``commands`` or ``infra``.
* Everything here is deterministic for identical inputs.
"""

from haul_cli.core.bundler import build_runner_args
from haul_cli.core.models import (
    Choice,
    CommandDefinition,
    CommandRegistry,
    Config,
    OptionDefinition,
    OutcomeKind,
    Resolution,
)
from haul_cli.core.resolver import resolve_command
from haul_cli.core.tokenizer import tokenize
from haul_cli.core.validator import validate_options

__all__: list[str] = [
    "Choice",
    "CommandDefinition",
    "CommandRegistry",
    "Config",
    "OptionDefinition",
    "OutcomeKind",
    "Resolution",
    "build_runner_args",
    "resolve_command",
    "tokenize",
    "validate_options",
]
