"""``haul start`` — run the development server (the default command)."""

from __future__ import annotations

from haul_cli.cli.console import info
from haul_cli.cli.commands.parsers import (
    ANDROID,
    CONFIG_OPTION,
    DEV_OPTION,
    IOS,
    MINIFY_OPTION,
    parse_port,
)
from haul_cli.core.bundler import build_runner_args
from haul_cli.core.models import Choice, CommandDefinition, Config, OptionDefinition
from haul_cli.infra.webpack_runner import WebpackRunner

OPTIONS: tuple[OptionDefinition, ...] = (
    OptionDefinition(
        name="port",
        description="Port to run the packager server on",
        default="8081",
        parse=parse_port,
    ),
    DEV_OPTION,
    MINIFY_OPTION,
    OptionDefinition(
        name="platform",
        description="Platform to serve bundles for",
        default="all",
        choices=(IOS, ANDROID, Choice("all", "Serve both platforms")),
    ),
    CONFIG_OPTION,
)


async def start(config: Config) -> None:
    """Serve bundles with the webpack dev server until interrupted."""
    info(
        f"Starting packager on port {config['port']} "
        f"for platform '{config['platform']}'"
    )
    await WebpackRunner().run(build_runner_args("start", config))


COMMAND = CommandDefinition(
    name="start",
    description="Starts a new webpack server",
    action=start,
    options=OPTIONS,
)
