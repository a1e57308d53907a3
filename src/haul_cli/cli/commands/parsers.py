"""Parse callables and shared option definitions for the commands."""

from __future__ import annotations

from typing import Any

from haul_cli.core.models import Choice, Config, OptionDefinition

_FALSE_STRINGS: frozenset[str] = frozenset({"false", "0", "no", "off"})


def parse_bool(value: Any) -> bool:
    """Parse a flag value into a bool.

    Anything other than ``false``/``0``/``no``/``off`` (case-insensitive)
    is true.  Real bools, such as computed defaults, pass through.
    """
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in _FALSE_STRINGS


def parse_port(value: Any) -> int:
    """Parse a TCP port number.

    Raises
    ------
    ValueError
        When *value* is not an integer in ``1..65535``.
    """
    port = int(value)
    if not 1 <= port <= 65535:
        raise ValueError(f"port must be between 1 and 65535, got {port}")
    return port


def minify_default(config: Config) -> bool:
    """Minify exactly when not building for development."""
    return not config.get("dev", True)


DEV_OPTION = OptionDefinition(
    name="dev",
    description="Whether to build in development mode",
    default="true",
    parse=parse_bool,
)

MINIFY_OPTION = OptionDefinition(
    name="minify",
    description="Whether to minify the bundle (defaults to the opposite of --dev)",
    default=minify_default,
    parse=parse_bool,
)

CONFIG_OPTION = OptionDefinition(
    name="config",
    description="Path to the webpack config, relative to the project root",
    default="webpack.haul.js",
)

IOS = Choice("ios", "Serve/bundle for iOS")
ANDROID = Choice("android", "Serve/bundle for Android")
