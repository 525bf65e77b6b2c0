"""Playground directory layout."""

from __future__ import annotations

import logging
from pathlib import Path

from rp.errors import HomeDirectoryError
from rp.types import ProjectCategory

logger = logging.getLogger(__name__)

PLAYGROUND_DIRNAME = "rust-playground"


def playground_root(home: Path | None = None) -> Path:
    """Return ``<home>/rust-playground``."""
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise HomeDirectoryError(
                f"unable to determine the home directory: {exc}",
                hint="Set HOME (or USERPROFILE on Windows) and retry.",
            ) from exc
    root = home / PLAYGROUND_DIRNAME
    logger.debug("playground root: %s", root)
    return root


def category_dir(category: ProjectCategory, root: Path | None = None) -> Path:
    """Return the storage directory for ``category``."""
    base = root if root is not None else playground_root()
    return base / category.value
