"""Custom exception hierarchy for haul-cli.

Every failure that reaches the dispatcher boundary is either a
:class:`MessageError` (rendered verbatim, user-facing) or an
unclassified exception (rendered with its traceback).  Nothing below
the CLI layer catches these; they propagate untouched to
:func:`haul_cli.cli.app.run`.

Hierarchy
---------
HaulError
├── MessageError
│   └── OptionValidationError
│       ├── MissingOptionError
│       └── InvalidChoiceError
├── TokenizationError
├── EnvironmentError
│   └── NodeNotFoundError
└── BundlerFailedError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from haul_cli.core.models import OptionDefinition


class HaulError(Exception):
    """Base exception for all haul-cli errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- User-facing messages --------------------------------------------------

class MessageError(HaulError):
    """An error whose message is meant to be shown to the user as-is."""


class OptionValidationError(MessageError):
    """Raised when a command option fails validation.

    Attributes
    ----------
    option:
        The failing option definition.
    command:
        Display name of the command (e.g. ``"haul bundle"``).
    value:
        The offending raw value, when there is one.
    """

    def __init__(
        self,
        message: str,
        *,
        option: OptionDefinition,
        command: str,
        value: object = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.option = option
        self.command = command
        self.value = value


class MissingOptionError(OptionValidationError):
    """A required option ended up without a value."""


class InvalidChoiceError(OptionValidationError):
    """A resolved value is not one of the option's declared choices."""


# --- Argument vector -------------------------------------------------------

class TokenizationError(HaulError):
    """Raised when the argument vector cannot be tokenized."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(HaulError):
    """Raised when a required runtime dependency is not available."""


class NodeNotFoundError(EnvironmentError):
    """Raised when the ``node`` executable cannot be located on PATH."""


# --- Bundler ---------------------------------------------------------------

class BundlerFailedError(HaulError):
    """Raised when the webpack runner process exits unsuccessfully."""
