"""Types for rp playground projects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal


class ProjectCategory(str, Enum):
    """Storage category; the value doubles as the subdirectory name."""

    TEMP = "temp"
    KEEP = "keep"


CATEGORY_ORDER: tuple[ProjectCategory, ...] = (ProjectCategory.TEMP, ProjectCategory.KEEP)


@dataclass(frozen=True)
class ProjectEntry:
    """One project directory inside a category directory."""

    name: str
    category: ProjectCategory

    def path(self, root: Path) -> Path:
        return root / self.category.value / self.name


@dataclass(frozen=True)
class CleanReport:
    """Outcome of clearing the temporary category."""

    status: Literal["missing", "empty", "cleaned"]
    directory: Path
    removed: int = 0
    warning: str | None = None


@dataclass(frozen=True)
class EditorCommand:
    """Editor invocation offered for a project."""

    label: str
    argv: tuple[str, ...]


@dataclass(frozen=True)
class LaunchResult:
    """Result of trying to start an editor."""

    command: EditorCommand
    ok: bool
    message: str


@dataclass(frozen=True)
class OpenResult:
    """Project selected for opening plus its editor commands."""

    entry: ProjectEntry
    path: Path
    editor_commands: tuple[EditorCommand, ...]
    launch: LaunchResult | None = None


@dataclass(frozen=True)
class CreateResult:
    """Project created by the scaffolding command."""

    name: str
    category: ProjectCategory
    path: Path
    editor_commands: tuple[EditorCommand, ...]
    launch: LaunchResult | None = None
