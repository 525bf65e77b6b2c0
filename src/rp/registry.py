"""Directory-backed project registry.

The playground tree is the registry: every direct subdirectory of a category
directory is a project. Temporary projects are auto-numbered with a ``pNNN_``
prefix; the next number is derived by scanning the existing names.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import TypeVar

from rp.errors import StorageError, ValidationError
from rp.paths import category_dir
from rp.types import CATEGORY_ORDER, CleanReport, ProjectCategory, ProjectEntry

logger = logging.getLogger(__name__)

INDEX_PREFIX = "p"
INDEX_WIDTH = 3
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

_E = TypeVar("_E", str, ProjectEntry)


def parse_index(name: str) -> int | None:
    """Return the sequence number encoded in ``name`` or None."""
    if not name.startswith(INDEX_PREFIX) or len(name) < INDEX_WIDTH + 1:
        return None
    digits = name[1 : INDEX_WIDTH + 1]
    # A single leading "+" is accepted, so "p+12_x" reads as 12.
    if digits.startswith("+"):
        digits = digits[1:]
    if not (digits and digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


def next_index(directory: Path) -> int:
    """Return ``max(existing indices) + 1``, or 1 for a missing/empty directory."""
    if not directory.exists():
        return 1
    try:
        names = [child.name for child in directory.iterdir()]
    except OSError as exc:
        logger.debug("cannot scan %s: %s", directory, exc)
        return 1

    indices = [idx for idx in (parse_index(name) for name in names) if idx is not None]
    result = max(indices, default=0) + 1
    logger.debug("next index in %s: %d", directory, result)
    return result


def format_name(index: int, suffix: str) -> str:
    return f"{INDEX_PREFIX}{index:0{INDEX_WIDTH}d}_{suffix}"


def generate_name(
    user_name: str | None,
    directory: Path,
    keep: bool,
    *,
    now: datetime | None = None,
) -> str:
    """Derive the directory name for a new project.

    Kept projects use ``user_name`` verbatim. Temporary projects get the next
    ``pNNN_`` prefix followed by ``user_name`` or a local timestamp.
    """
    if keep:
        if not user_name:
            raise ValidationError("a name is required for kept projects", hint="Usage: rp --keep NAME")
        return user_name

    index = next_index(directory)
    if user_name:
        return format_name(index, user_name)
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return format_name(index, stamp)


def scan_category(category: ProjectCategory, root: Path | None = None) -> list[str] | None:
    """Return sorted project directory names, or None if the directory is unreadable."""
    directory = category_dir(category, root)
    if not directory.is_dir():
        return []
    try:
        return sorted(child.name for child in directory.iterdir() if child.is_dir())
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return None


def list_category(category: ProjectCategory, root: Path | None = None) -> list[str]:
    """Return sorted project directory names for ``category``."""
    return scan_category(category, root) or []


def collect_entries(root: Path | None = None) -> list[ProjectEntry]:
    """Return all projects, temporary first, each category sorted by name."""
    entries: list[ProjectEntry] = []
    for category in CATEGORY_ORDER:
        entries.extend(ProjectEntry(name=name, category=category) for name in list_category(category, root))
    return entries


def filter_entries(entries: Sequence[_E], keyword: str | None) -> list[_E]:
    """Keep entries whose name contains ``keyword`` (case-sensitive)."""
    if not keyword:
        return list(entries)
    return [entry for entry in entries if keyword in _entry_name(entry)]


def _entry_name(entry: str | ProjectEntry) -> str:
    return entry.name if isinstance(entry, ProjectEntry) else entry


def count_entries(directory: Path) -> int:
    """Count direct children of ``directory`` (files included)."""
    try:
        return sum(1 for _ in directory.iterdir())
    except OSError:
        return 0


def clear_temporary(root: Path | None = None) -> CleanReport:
    """Remove every temporary project and recreate the empty directory."""
    directory = category_dir(ProjectCategory.TEMP, root)
    if not directory.exists():
        return CleanReport(status="missing", directory=directory)

    removed = count_entries(directory)
    if removed == 0:
        return CleanReport(status="empty", directory=directory)

    logger.debug("removing %d entries under %s", removed, directory)
    try:
        shutil.rmtree(directory)
    except OSError as exc:
        raise StorageError(
            f"failed to delete {directory}: {exc}",
            hint="Some files may be in use; close editors that have these projects open and retry.",
        ) from exc

    warning: str | None = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        warning = f"could not recreate {directory}: {exc}"

    return CleanReport(status="cleaned", directory=directory, removed=removed, warning=warning)
