"""Command resolution — pick what an argument vector asks for.

:func:`resolve_command` is a pure function of the raw argument vector
and a :class:`~haul_cli.core.models.CommandRegistry`.  Checks run in a
fixed priority order against the *raw* tokens, before any tokenizing:

1. Version request (``version`` as first token, ``-v``/``--version``
   anywhere).
2. Help request as first token (``help``, ``-h``, ``--help``).  With a
   known command name as second token this is command help, otherwise
   global help.
3. Retired command name as first token.
4. Registered command named by the first token, else the default.
5. ``-h``/``--help`` anywhere else turns the run into command help.
"""

from __future__ import annotations

from collections.abc import Sequence

from haul_cli.core.models import CommandRegistry, OutcomeKind, Resolution

VERSION_TOKENS: frozenset[str] = frozenset({"-v", "--version"})
HELP_TOKENS: frozenset[str] = frozenset({"-h", "--help"})


def _wants_version(argv: Sequence[str]) -> bool:
    if argv and argv[0] == "version":
        return True
    return any(token in VERSION_TOKENS for token in argv)


def _wants_help_first(argv: Sequence[str]) -> bool:
    return bool(argv) and (argv[0] == "help" or argv[0] in HELP_TOKENS)


def resolve_command(
    argv: Sequence[str],
    registry: CommandRegistry,
) -> Resolution:
    """Resolve *argv* (program name excluded) against *registry*.

    Never raises: an unknown first token selects ``registry.default``.
    """
    if _wants_version(argv):
        return Resolution(OutcomeKind.SHOW_VERSION)

    if _wants_help_first(argv):
        target = registry.find(argv[1]) if len(argv) > 1 else None
        if target is None:
            return Resolution(OutcomeKind.SHOW_GLOBAL_HELP)
        return Resolution(OutcomeKind.SHOW_COMMAND_HELP, command=target)

    first = argv[0] if argv else None

    if first is not None and first in registry.retired:
        return Resolution(OutcomeKind.NOT_IMPLEMENTED, name=first)

    command = registry.find(first) or registry.default

    if any(token in HELP_TOKENS for token in argv):
        return Resolution(OutcomeKind.SHOW_COMMAND_HELP, command=command)

    return Resolution(OutcomeKind.RUN, command=command, argv=tuple(argv))
