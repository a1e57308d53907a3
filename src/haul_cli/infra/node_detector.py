"""Infrastructure: Node.js detection and platform guidance.

The webpack runner is a Node.js script, so ``start`` and ``bundle``
need a ``node`` executable on PATH.

Rules
-----
* Detection via :func:`shutil.which` only, no subprocess.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from haul_cli.exceptions import NodeNotFoundError


@dataclass(frozen=True, slots=True)
class NodeStatus:
    """Result of a ``node`` detection probe.

    Attributes
    ----------
    found : bool
        Whether node was located on PATH.
    path : Path | None
        Absolute path to the node binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing Node.js on the current
        platform.  Empty when node is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_node() -> NodeStatus:
    """Probe the system for a ``node`` binary."""
    result = shutil.which("node")
    if result is not None:
        return NodeStatus(found=True, path=Path(result).resolve(), install_commands=())
    return NodeStatus(
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


def require_node() -> Path:
    """Locate node or raise :class:`NodeNotFoundError`."""
    status = detect_node()
    if not status.found or status.path is None:
        hint_lines = ["Install Node.js using one of:"]
        hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise NodeNotFoundError(
            "node is not installed or not on PATH.",
            hint="\n".join(hint_lines),
        )
    return status.path


def _platform_install_commands() -> tuple[str, ...]:
    system = platform.system().lower()
    if system == "windows":
        return ("winget install OpenJS.NodeJS.LTS", "choco install nodejs-lts")
    if system == "linux":
        return (
            "sudo apt install nodejs",
            "sudo dnf install nodejs",
            "sudo pacman -S nodejs",
        )
    if system == "darwin":
        return ("brew install node",)
    return ("Download Node.js from https://nodejs.org/",)
