"""Option validation — turns tokenized flags into a resolved config.

The validator is a strict left fold over a command's option schema in
declaration order.  Each step sees only the options resolved before it,
so a default factory can derive its value from earlier options (for
example ``bundle_output`` from ``platform``) and never from later ones.

Every step produces a **new** read-only snapshot; the snapshot handed to
a default factory is never modified afterwards.

Failures are fail-fast: the first missing or invalid option in
declaration order is raised and no further options are looked at.
Exceptions raised by an option's ``parse`` callable are not caught.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from haul_cli.core.models import Config, OptionDefinition
from haul_cli.exceptions import InvalidChoiceError, MissingOptionError

UNSET: Any = object()
"""Marker for an optional option that resolved to nothing."""


def is_empty(value: Any) -> bool:
    """Return ``True`` for values treated as "not given".

    Only ``None`` and the empty string count as empty.  ``False``, ``0``
    and other falsy values are legitimate explicit input.
    """
    return value is None or value == ""


def _flag(option: OptionDefinition) -> str:
    return option.name.replace("_", "-")


def _missing_message(option: OptionDefinition, command: str) -> str:
    return f"Option '--{_flag(option)}' is required for '{command}'."


def _invalid_choice_message(
    option: OptionDefinition, value: Any, command: str,
) -> str:
    allowed = ", ".join(f"'{choice.value}'" for choice in option.choices or ())
    return (
        f"Invalid value '{value}' for option '--{_flag(option)}' "
        f"of '{command}'. Expected one of: {allowed}."
    )


def resolve_option(
    option: OptionDefinition,
    flags: Mapping[str, Any],
    config: Config,
    command: str,
) -> Any:
    """Resolve a single option against *flags* and the config so far.

    The default is evaluated exactly once, before the flag is consulted.
    Returns :data:`UNSET` when the option is optional and ends up empty.

    Raises
    ------
    MissingOptionError
        When the option is required and no value is available.
    InvalidChoiceError
        When the value is not one of ``option.choices``.
    """
    default = option.resolve_default(config)
    value = flags.get(option.name)
    if is_empty(value):
        value = default

    if is_empty(value):
        if option.required:
            raise MissingOptionError(
                _missing_message(option, command),
                option=option,
                command=command,
            )
        return UNSET

    if option.choices is not None and not any(
        choice.value == value for choice in option.choices
    ):
        raise InvalidChoiceError(
            _invalid_choice_message(option, value, command),
            option=option,
            command=command,
            value=value,
        )

    if option.parse is not None:
        value = option.parse(value)
    return value


def validate_options(
    options: Sequence[OptionDefinition],
    flags: Mapping[str, Any],
    command: str,
) -> Config:
    """Fold *options* over *flags* into a resolved configuration.

    Parameters
    ----------
    options:
        The command's option schema, in declaration order.
    flags:
        Tokenized flags keyed by option name.  Keys not in *options* are
        ignored.
    command:
        Display name of the command, used in error messages.

    Returns
    -------
    Config
        A read-only mapping holding only options that resolved to a
        non-empty value.
    """
    config: Config = MappingProxyType({})
    for option in options:
        value = resolve_option(option, flags, config, command)
        if value is UNSET:
            continue
        config = MappingProxyType({**config, option.name: value})
    return config
