"""Optional playground configuration loaded from ``rp.yaml``.

The file lives in the playground root. Keys that are present replace the
defaults; missing keys keep them::

    scaffold:
      command: [cargo, new]
      no_vcs_args: [--vcs, none]
    entry_file: src/main.rs
    auto_open: false
    editors:
      - label: VS Code
        command: [code]
        goto: true
      - label: RustRover
        command: [rustrover]
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from rp.errors import ConfigError

CONFIG_FILENAME = "rp.yaml"


@dataclass(frozen=True)
class EditorSpec:
    """Editor definition; ``goto`` appends ``--goto <entry_file>:1``."""

    label: str
    command: tuple[str, ...]
    goto: bool = False


DEFAULT_EDITORS: tuple[EditorSpec, ...] = (
    EditorSpec(label="VS Code", command=("code",), goto=True),
    EditorSpec(label="RustRover", command=("rustrover",)),
)


@dataclass(frozen=True)
class PlaygroundConfig:
    """Resolved configuration for scaffolding and editor launching."""

    scaffold_command: tuple[str, ...] = ("cargo", "new")
    no_vcs_args: tuple[str, ...] = ("--vcs", "none")
    entry_file: str = "src/main.rs"
    editors: tuple[EditorSpec, ...] = field(default=DEFAULT_EDITORS)
    auto_open: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlaygroundConfig:
        """Overlay ``data`` on the defaults and validate types."""
        defaults = cls()

        scaffold = data.get("scaffold") or {}
        if not isinstance(scaffold, dict):
            raise ConfigError("`scaffold` must be a mapping")

        editors = defaults.editors
        if "editors" in data:
            raw_editors = data["editors"]
            if not isinstance(raw_editors, list) or not raw_editors:
                raise ConfigError("`editors` must be a non-empty list")
            editors = tuple(_parse_editor(item, i) for i, item in enumerate(raw_editors))

        auto_open = data.get("auto_open", defaults.auto_open)
        if not isinstance(auto_open, bool):
            raise ConfigError("`auto_open` must be true or false")

        entry_file = data.get("entry_file", defaults.entry_file)
        if not isinstance(entry_file, str) or not entry_file:
            raise ConfigError("`entry_file` must be a non-empty string")

        return cls(
            scaffold_command=_argv(scaffold.get("command", defaults.scaffold_command), "scaffold.command"),
            no_vcs_args=_argv(scaffold.get("no_vcs_args", defaults.no_vcs_args), "scaffold.no_vcs_args", allow_empty=True),
            entry_file=entry_file,
            editors=editors,
            auto_open=auto_open,
        )


def _argv(value: Any, key: str, *, allow_empty: bool = False) -> tuple[str, ...]:
    if isinstance(value, str):
        value = shlex.split(value)
    if not isinstance(value, (list, tuple)) or not all(isinstance(part, str) for part in value):
        raise ConfigError(f"`{key}` must be a list of strings")
    if not value and not allow_empty:
        raise ConfigError(f"`{key}` must not be empty")
    return tuple(value)


def _parse_editor(item: Any, position: int) -> EditorSpec:
    if not isinstance(item, dict):
        raise ConfigError(f"`editors[{position}]` must be a mapping")
    command = _argv(item.get("command", ()), f"editors[{position}].command")
    label = item.get("label") or command[0]
    goto = item.get("goto", False)
    if not isinstance(goto, bool):
        raise ConfigError(f"`editors[{position}].goto` must be true or false")
    return EditorSpec(label=str(label), command=command, goto=goto)


def load_config(root: Path) -> PlaygroundConfig:
    """Load ``<root>/rp.yaml``; defaults when the file is absent.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    path = root / CONFIG_FILENAME
    if not path.exists():
        return PlaygroundConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML config at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read config {path}: {exc}") from exc

    if data is None:
        return PlaygroundConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config structure in {path}: expected a mapping")

    try:
        return PlaygroundConfig.from_dict(data)
    except ConfigError as exc:
        raise ConfigError(f"Invalid config structure in {path}: {exc}") from exc
