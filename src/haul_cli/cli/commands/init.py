"""``haul init`` — generate ``webpack.haul.js`` for an existing project.

Interactive: the user confirms the entry file with a questionary
prompt, and is asked before an existing config file is overwritten.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from haul_cli.cli.console import done, warn
from haul_cli.core.models import CommandDefinition, Config
from haul_cli.exceptions import EnvironmentError, MessageError

CONFIG_FILENAME = "webpack.haul.js"
ENTRY_CANDIDATES: tuple[str, ...] = ("index.js", "index.ios.js", "index.android.js")
OTHER = "Other..."

CONFIG_TEMPLATE = """module.exports = ({{ platform }}) => ({{
  entry: `./{entry}`,
}});
"""


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def find_entry_candidates(cwd: Path) -> list[str]:
    """Return the entry candidates that exist in *cwd*, in preference order."""
    return [name for name in ENTRY_CANDIDATES if (cwd / name).is_file()]


def render_config(entry: str) -> str:
    return CONFIG_TEMPLATE.format(entry=entry)


def _ask_entry(questionary: Any, candidates: list[str]) -> str:
    entry: str | None = OTHER
    if candidates:
        # None means the prompt was cancelled (Ctrl+C / Esc).
        entry = questionary.select(
            "Which file is the entry point of your app?",
            choices=[*candidates, OTHER],
            default=candidates[0],
        ).ask()
    if entry == OTHER:
        entry = questionary.text("Path to the entry file:").ask()
    if not entry:
        raise MessageError(
            "No entry file selected.",
            hint="Run 'haul init' again and pick or type the entry file.",
        )
    return entry


async def init(config: Config) -> None:
    """Write ``webpack.haul.js`` into the current directory."""
    questionary = _import_questionary()
    cwd = Path.cwd()
    target = cwd / CONFIG_FILENAME

    if target.exists():
        overwrite = questionary.confirm(
            f"{CONFIG_FILENAME} already exists. Overwrite it?",
            default=False,
        ).ask()
        if not overwrite:
            warn(f"Kept the existing {CONFIG_FILENAME}.")
            return

    entry = _ask_entry(questionary, find_entry_candidates(cwd))
    target.write_text(render_config(entry), encoding="utf-8")
    done(f"Generated {CONFIG_FILENAME} with entry '{entry}'")


COMMAND = CommandDefinition(
    name="init",
    description="Generates the Haul config file in an existing project",
    action=init,
)
