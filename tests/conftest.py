"""Shared pytest fixtures and configuration for the haul-cli test suite.

Guidelines
----------
* No network access and no real subprocesses in any test.
* ``node`` and the webpack runner are mocked at the infra boundary.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from haul_cli.core.models import CommandDefinition, CommandRegistry, Config


class RecordingAction:
    """Async command action that records every config it receives."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[Config] = []
        self._error = error

    async def __call__(self, config: Config) -> None:
        self.calls.append(config)
        if self._error is not None:
            raise self._error


@pytest.fixture
def make_action() -> type[RecordingAction]:
    """Factory for recording actions that optionally raise *error*."""
    return RecordingAction


@pytest.fixture
def recording_action() -> RecordingAction:
    return RecordingAction()


@pytest.fixture
def make_registry() -> Callable[..., CommandRegistry]:
    """Build a registry from command definitions; the first is the default."""

    def _make(*commands: CommandDefinition, retired: Any = ()) -> CommandRegistry:
        return CommandRegistry(
            commands=tuple(commands),
            default=commands[0],
            retired=frozenset(retired),
        )

    return _make
