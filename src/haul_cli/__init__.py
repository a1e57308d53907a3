"""haul-cli — command-line front-end for the Haul bundler.

Maps an argument vector to a subcommand, validates its options and
invokes the subcommand with a clean configuration object.
"""

from haul_cli.version import __version__

__all__: list[str] = ["__version__"]
