"""Editor command rendering and launching."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path

from rp.config import PlaygroundConfig
from rp.errors import ExternalProcessError
from rp.exec import run_command
from rp.types import EditorCommand, LaunchResult

logger = logging.getLogger(__name__)


def build_editor_commands(project_path: Path, config: PlaygroundConfig) -> tuple[EditorCommand, ...]:
    """Return one command per configured editor for ``project_path``."""
    entry = project_path.joinpath(*config.entry_file.split("/"))
    commands: list[EditorCommand] = []
    for editor in config.editors:
        argv = [*editor.command, str(project_path)]
        if editor.goto:
            argv.extend(["--goto", f"{entry}:1"])
        commands.append(EditorCommand(label=editor.label, argv=tuple(argv)))
    return tuple(commands)


def render_command(command: EditorCommand) -> str:
    return shlex.join(command.argv)


def launch_editor(command: EditorCommand) -> LaunchResult:
    """Run ``command`` attached to the terminal; failures are reported, never raised."""
    try:
        run_command(list(command.argv), capture=False)
    except ExternalProcessError as exc:
        logger.debug("editor launch failed: %s", exc)
        return LaunchResult(command=command, ok=False, message=str(exc))
    return LaunchResult(command=command, ok=True, message=f"opened in {command.label}")
