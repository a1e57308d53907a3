"""Infrastructure: spawn the Haul webpack runner as a Node.js process.

The runner's stdout/stderr are inherited so webpack's own output reaches
the terminal unchanged.  A non-zero exit status is mapped to
:class:`~haul_cli.exceptions.BundlerFailedError`; nothing else is
caught here.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from haul_cli.exceptions import BundlerFailedError
from haul_cli.infra.node_detector import require_node

DEFAULT_RUNNER_SCRIPT = Path("node_modules", "haul", "bin", "runner.js")


class WebpackRunner:
    """Runs ``node <script> *args`` and waits for it to finish.

    Parameters
    ----------
    cwd:
        Project root.  Defaults to the current working directory.
    script:
        Runner script, relative to *cwd* unless absolute.
    """

    def __init__(
        self,
        cwd: Path | None = None,
        script: Path = DEFAULT_RUNNER_SCRIPT,
    ) -> None:
        self._cwd: Path = cwd if cwd is not None else Path.cwd()
        self._script: Path = script if script.is_absolute() else self._cwd / script

    @property
    def script(self) -> Path:
        return self._script

    def command(self, args: Sequence[str]) -> list[str]:
        """Return the full command line for *args*."""
        return [str(require_node()), str(self._script), *args]

    async def run(self, args: Sequence[str]) -> None:
        """Run the runner with *args*.

        Raises
        ------
        NodeNotFoundError
            When ``node`` is not on PATH.
        BundlerFailedError
            When the runner script is missing or exits non-zero.
        """
        if not self._script.exists():
            raise BundlerFailedError(
                f"Webpack runner not found at {self._script}.",
                hint="Install haul in this project: npm install --save-dev haul",
            )

        process = await asyncio.create_subprocess_exec(
            *self.command(args),
            cwd=str(self._cwd),
        )
        returncode = await process.wait()
        if returncode != 0:
            raise BundlerFailedError(
                f"Webpack runner exited with status {returncode}.",
            )
