"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
default evaluation and registry lookup.
"""

from __future__ import annotations

import dataclasses
from types import MappingProxyType

import pytest

from haul_cli.core.models import (
    Choice,
    CommandDefinition,
    CommandRegistry,
    OptionDefinition,
    OutcomeKind,
    Resolution,
)


async def _noop(_config: object) -> None:
    return None


class TestOptionDefinition:
    def test_defaults(self) -> None:
        option = OptionDefinition(name="x")
        assert option.required is False
        assert option.default is None
        assert option.choices is None
        assert option.parse is None

    def test_literal_default(self) -> None:
        assert OptionDefinition(name="x", default="8081").resolve_default({}) == "8081"

    def test_callable_default_receives_config(self) -> None:
        option = OptionDefinition(name="x", default=lambda cfg: cfg["y"] + 1)
        assert option.resolve_default(MappingProxyType({"y": 1})) == 2

    def test_frozen(self) -> None:
        option = OptionDefinition(name="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            option.name = "y"  # type: ignore[misc]

    def test_choice_equality(self) -> None:
        assert Choice("ios") == Choice("ios")
        assert Choice("ios") != Choice("android")


class TestCommandRegistry:
    def test_find(self) -> None:
        a = CommandDefinition(name="a", action=_noop)
        b = CommandDefinition(name="b", action=_noop)
        registry = CommandRegistry(commands=(a, b), default=a)
        assert registry.find("b") is b
        assert registry.find("c") is None
        assert registry.find(None) is None

    def test_retired_defaults_to_empty(self) -> None:
        a = CommandDefinition(name="a", action=_noop)
        assert CommandRegistry(commands=(a,), default=a).retired == frozenset()


class TestResolution:
    @pytest.mark.parametrize(
        "kind",
        [
            OutcomeKind.SHOW_VERSION,
            OutcomeKind.SHOW_GLOBAL_HELP,
            OutcomeKind.SHOW_COMMAND_HELP,
            OutcomeKind.NOT_IMPLEMENTED,
        ],
    )
    def test_terminal_kinds(self, kind: OutcomeKind) -> None:
        assert Resolution(kind).is_terminal

    def test_run_is_not_terminal(self) -> None:
        assert not Resolution(OutcomeKind.RUN).is_terminal
