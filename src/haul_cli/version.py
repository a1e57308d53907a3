"""Single source of truth for the haul-cli version string."""

__version__ = "0.1.0"
