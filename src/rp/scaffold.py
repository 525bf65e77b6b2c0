"""Scaffolding command wrapper (``cargo new`` by default)."""

from __future__ import annotations

import shutil
from pathlib import Path

from rp.config import PlaygroundConfig
from rp.errors import ExternalProcessError
from rp.exec import ExecError, ExecResult, run_command


def build_scaffold_argv(project_path: Path, git: bool, config: PlaygroundConfig) -> list[str]:
    """Build the scaffolding argv; VCS init is skipped unless ``git``."""
    argv = [*config.scaffold_command, str(project_path)]
    if not git:
        argv.extend(config.no_vcs_args)
    return argv


def run_scaffold(project_path: Path, git: bool, config: PlaygroundConfig) -> ExecResult:
    """Run the scaffolding command with inherited stdio."""
    argv = build_scaffold_argv(project_path, git, config)
    tool = argv[0]
    if shutil.which(tool) is None:
        raise ExternalProcessError(
            f"{tool} not found on PATH",
            hint="Install the Rust toolchain (https://rustup.rs) and retry.",
        )
    try:
        return run_command(argv, capture=False)
    except ExecError as exc:
        raise ExternalProcessError(
            f"{' '.join(argv[:2])} failed with exit code {exc.result.returncode}",
            hint="Check that the project name is a valid package name.",
        ) from exc
