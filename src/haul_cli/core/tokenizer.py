"""Schema-aware argument tokenizer built on :mod:`argparse`.

Turns the raw argument vector into a flat ``{option name: raw string}``
mapping.  Only options declared in the command's schema are recognised;
positional tokens (including the command name itself) and unknown flags
are ignored.

Spelling normalisation
----------------------
An option declared as ``assets_dest`` is accepted as ``--assets_dest``,
``--assets-dest`` and ``--assetsDest``.  The resulting key is always the
declared name.

Value rules
-----------
* ``--name value`` / ``--name=value`` → ``"value"``
* ``--name`` with no value → ``""`` (treated as empty by the validator)
* ``--no-name`` → ``"false"``
* repeated flags → the last occurrence wins
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import NoReturn

from haul_cli.core.models import OptionDefinition
from haul_cli.exceptions import TokenizationError


class _TokenizerParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting the process."""

    def error(self, message: str) -> NoReturn:
        raise TokenizationError(message)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def option_spellings(name: str) -> list[str]:
    """Return the accepted ``--`` spellings for option *name*, deduplicated."""
    candidates = [name, name.replace("_", "-"), _camel_case(name)]
    return [f"--{spelling}" for spelling in dict.fromkeys(candidates)]


def _build_parser(options: Sequence[OptionDefinition]) -> _TokenizerParser:
    parser = _TokenizerParser(
        prog="haul",
        add_help=False,
        allow_abbrev=False,
    )
    for option in options:
        parser.add_argument(
            *option_spellings(option.name),
            dest=option.name,
            nargs="?",
            const="",
            default=None,
        )
        parser.add_argument(
            f"--no-{option.name.replace('_', '-')}",
            dest=option.name,
            action="store_const",
            const="false",
        )
    return parser


def tokenize(
    argv: Sequence[str],
    options: Sequence[OptionDefinition],
) -> dict[str, str]:
    """Tokenize *argv* against the option schema *options*.

    Raises
    ------
    TokenizationError
        When argparse rejects the token sequence.
    """
    parser = _build_parser(options)
    namespace, _unknown = parser.parse_known_args(list(argv))
    return {
        name: value
        for name, value in vars(namespace).items()
        if value is not None
    }
