"""``haul bundle`` — build a static bundle for one platform."""

from __future__ import annotations

from haul_cli.cli.console import done, info
from haul_cli.cli.commands.parsers import (
    ANDROID,
    CONFIG_OPTION,
    DEV_OPTION,
    IOS,
    MINIFY_OPTION,
)
from haul_cli.core.bundler import build_runner_args
from haul_cli.core.models import CommandDefinition, Config, OptionDefinition
from haul_cli.infra.webpack_runner import WebpackRunner


def bundle_output_default(config: Config) -> str:
    """Name the bundle after the already-resolved platform."""
    return f"index.{config['platform']}.bundle"


OPTIONS: tuple[OptionDefinition, ...] = (
    DEV_OPTION,
    MINIFY_OPTION,
    OptionDefinition(
        name="platform",
        description="Platform to bundle for",
        required=True,
        choices=(IOS, ANDROID),
    ),
    CONFIG_OPTION,
    OptionDefinition(
        name="assets_dest",
        description="Directory to store assets referenced in the bundle",
    ),
    OptionDefinition(
        name="bundle_output",
        description="File where the bundle is written",
        default=bundle_output_default,
    ),
    OptionDefinition(
        name="sourcemap_output",
        description="File where the source map is written",
    ),
)


async def bundle(config: Config) -> None:
    """Build the bundle described by *config*."""
    mode = "development" if config["dev"] else "production"
    info(f"Bundling for '{config['platform']}' in {mode} mode")
    await WebpackRunner().run(build_runner_args("bundle", config))
    done(f"Bundle written to {config['bundle_output']}")


COMMAND = CommandDefinition(
    name="bundle",
    description="Builds the app bundle for packaging",
    action=bundle,
    options=OPTIONS,
)
