"""Unit tests for rp.yaml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from rp.config import DEFAULT_EDITORS, EditorSpec, PlaygroundConfig, load_config
from rp.errors import ConfigError


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config == PlaygroundConfig()
    assert config.scaffold_command == ("cargo", "new")
    assert config.no_vcs_args == ("--vcs", "none")
    assert config.editors == DEFAULT_EDITORS
    assert config.auto_open is False


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "rp.yaml").write_text("", encoding="utf-8")
    assert load_config(tmp_path) == PlaygroundConfig()


def test_config_overlays_defaults(tmp_path: Path) -> None:
    (tmp_path / "rp.yaml").write_text(
        "scaffold:\n"
        "  command: cargo new --lib\n"
        "auto_open: true\n"
        "editors:\n"
        "  - label: Zed\n"
        "    command: [zed]\n"
        "  - command: [nvim]\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.scaffold_command == ("cargo", "new", "--lib")
    assert config.no_vcs_args == ("--vcs", "none")
    assert config.entry_file == "src/main.rs"
    assert config.auto_open is True
    assert config.editors == (
        EditorSpec(label="Zed", command=("zed",)),
        EditorSpec(label="nvim", command=("nvim",)),
    )


def test_config_allows_empty_no_vcs_args(tmp_path: Path) -> None:
    (tmp_path / "rp.yaml").write_text("scaffold:\n  no_vcs_args: []\n", encoding="utf-8")
    assert load_config(tmp_path).no_vcs_args == ()


def test_malformed_yaml_raises(tmp_path: Path) -> None:
    (tmp_path / "rp.yaml").write_text("editors: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Malformed YAML"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "auto_open: sometimes\n",
        "editors: []\n",
        "editors:\n  - label: broken\n",
        "scaffold: cargo\n",
        "entry_file: 3\n",
    ],
)
def test_invalid_structure_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / "rp.yaml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid config structure"):
        load_config(tmp_path)


def test_command_string_honours_quotes(tmp_path: Path) -> None:
    (tmp_path / "rp.yaml").write_text(
        "editors:\n"
        "  - label: Custom\n"
        "    command: '\"/opt/My Editor/bin/edit\" --new-window'\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.editors == (
        EditorSpec(label="Custom", command=("/opt/My Editor/bin/edit", "--new-window")),
    )
