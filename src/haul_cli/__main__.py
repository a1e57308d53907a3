"""Allow ``python -m haul_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m haul_cli`` behaves identically to the ``haul``
console script.
"""

from __future__ import annotations

from haul_cli.cli.app import cli

if __name__ == "__main__":
    cli()
