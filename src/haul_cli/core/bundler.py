"""Pure translation of a resolved config into webpack runner arguments.

No I/O happens here: the infra layer's
:class:`~haul_cli.infra.webpack_runner.WebpackRunner` executes whatever
this module builds.
"""

from __future__ import annotations

from typing import Any, Literal

from haul_cli.core.models import Config

RunnerMode = Literal["start", "bundle"]

# Config key → runner flag, in the order flags are emitted.
_FLAG_ORDER: tuple[tuple[str, str], ...] = (
    ("port", "--port"),
    ("dev", "--dev"),
    ("minify", "--minify"),
    ("platform", "--platform"),
    ("config", "--config"),
    ("assets_dest", "--assets-dest"),
    ("bundle_output", "--bundle-output"),
    ("sourcemap_output", "--sourcemap-output"),
)


def _render(value: Any) -> str:
    """Render a config value as a runner argument."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_runner_args(mode: RunnerMode, config: Config) -> list[str]:
    """Build the runner's argument list for *mode* from *config*.

    Keys absent from *config* are omitted; unknown keys are ignored.
    """
    args = ["--mode", mode]
    for key, flag in _FLAG_ORDER:
        if key in config:
            args.extend((flag, _render(config[key])))
    return args
