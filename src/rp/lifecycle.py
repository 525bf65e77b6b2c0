"""Create / list / clean / open orchestration over the project registry."""

from __future__ import annotations

import logging
from pathlib import Path

from rp.config import PlaygroundConfig
from rp.editors import build_editor_commands, launch_editor
from rp.errors import StorageError, ValidationError
from rp.paths import category_dir
from rp.registry import clear_temporary, collect_entries, filter_entries, generate_name, scan_category
from rp.scaffold import run_scaffold
from rp.types import (
    CATEGORY_ORDER,
    CleanReport,
    CreateResult,
    EditorCommand,
    LaunchResult,
    OpenResult,
    ProjectCategory,
    ProjectEntry,
)

logger = logging.getLogger(__name__)


def create_project(
    name: str | None,
    *,
    keep: bool,
    git: bool,
    root: Path,
    config: PlaygroundConfig,
    launch: bool = False,
) -> CreateResult:
    """Scaffold a new project in the temp or keep category."""
    category = ProjectCategory.KEEP if keep else ProjectCategory.TEMP
    target_dir = category_dir(category, root)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(
            f"cannot create directory {target_dir}: {exc}",
            hint="Check permissions on the playground directory.",
        ) from exc

    project_name = generate_name(name, target_dir, keep)
    project_path = target_dir / project_name
    logger.debug("creating %s project at %s", category.value, project_path)

    run_scaffold(project_path, git, config)

    commands = build_editor_commands(project_path, config)
    return CreateResult(
        name=project_name,
        category=category,
        path=project_path,
        editor_commands=commands,
        launch=_maybe_launch(commands, launch),
    )


def list_projects(root: Path) -> list[tuple[ProjectCategory, list[str] | None]]:
    """Return sorted project names per category, temp first; None marks an unreadable directory."""
    return [(category, scan_category(category, root)) for category in CATEGORY_ORDER]


def clean_temporary(root: Path) -> CleanReport:
    return clear_temporary(root)


def find_projects(keyword: str | None, root: Path) -> list[ProjectEntry]:
    """Collect projects from both categories narrowed by ``keyword``.

    Returns an empty list when no project exists at all; raises
    ValidationError when projects exist but none match ``keyword``.
    """
    entries = collect_entries(root)
    if not entries:
        return []
    matches = filter_entries(entries, keyword)
    if not matches:
        raise ValidationError(f'no project matches "{keyword}"')
    return matches


def select_project(entries: list[ProjectEntry], raw: str) -> ProjectEntry | None:
    """Resolve one line of 1-based menu input; None for empty input."""
    text = raw.strip()
    if not text:
        return None
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(f"invalid selection: {text}")
    number = int(text)
    if not 1 <= number <= len(entries):
        raise ValidationError(f"invalid selection: {text} (expected 1-{len(entries)})")
    return entries[number - 1]


def open_project(
    entry: ProjectEntry,
    *,
    root: Path,
    config: PlaygroundConfig,
    launch: bool = False,
) -> OpenResult:
    """Build editor commands for an existing project."""
    project_path = entry.path(root)
    commands = build_editor_commands(project_path, config)
    return OpenResult(
        entry=entry,
        path=project_path,
        editor_commands=commands,
        launch=_maybe_launch(commands, launch),
    )


def _maybe_launch(commands: tuple[EditorCommand, ...], launch: bool) -> LaunchResult | None:
    if not launch or not commands:
        return None
    return launch_editor(commands[0])
