"""rp CLI - create, list, clean and open Rust playground projects."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from rp import __version__
from rp.config import load_config
from rp.editors import render_command
from rp.errors import RpError, ValidationError
from rp.lifecycle import (
    clean_temporary,
    create_project,
    find_projects,
    list_projects,
    open_project,
    select_project,
)
from rp.paths import playground_root
from rp.types import EditorCommand, LaunchResult, ProjectEntry

cli = typer.Typer(
    name="rp",
    help="Rust Playground - scaffold and manage practice projects.",
    add_completion=False,
)
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _version_option_callback(value: bool) -> None:
    """Handle eager --version option."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _fail(exc: RpError) -> None:
    err_console.print(f"[red]{escape(str(exc))}[/red]")
    if exc.hint:
        err_console.print(f"[yellow]hint:[/yellow] {escape(exc.hint)}")
    raise typer.Exit(exc.exit_code) from exc


@cli.command()
def run(
    name: str | None = typer.Argument(
        None,
        metavar="NAME",
        help="Project name. Temporary projects without a name get pNNN_<timestamp>. "
        "With --open, a filter keyword.",
    ),
    keep: bool = typer.Option(False, "--keep", "-k", help="Create a kept project under keep/ (requires NAME)."),
    list_: bool = typer.Option(False, "--list", "-l", help="List temporary and kept projects."),
    clean: bool = typer.Option(False, "--clean", "-c", help="Delete every temporary project."),
    git: bool = typer.Option(False, "--git", "-g", help="Initialize a git repository (skipped by default)."),
    open_: bool = typer.Option(False, "--open", "-o", help="Pick an existing project and show how to open it."),
    edit: bool = typer.Option(False, "--edit", "-e", help="Also launch the first configured editor."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show rp version and exit.",
        is_eager=True,
        callback=_version_option_callback,
    ),
) -> None:
    """Create a practice project, or list / clean / open existing ones.

    Action priority: --list, then --clean, then --open, otherwise create.
    """
    _configure_logging(verbose)
    try:
        root = playground_root()
        if list_:
            _list(root)
        elif clean:
            _clean(root)
        elif open_:
            _open(name, root, edit)
        else:
            if keep and not name:
                raise ValidationError("a name is required for kept projects", hint="Usage: rp --keep NAME")
            _create(name, root, keep=keep, git=git, edit=edit)
    except RpError as exc:
        _fail(exc)


def _list(root: Path) -> None:
    for i, (category, names) in enumerate(list_projects(root)):
        if i:
            console.print()
        console.print(f"=== {category.value} ===", style="bold")
        if names is None:
            console.print("  (cannot read)")
            continue
        if not names:
            console.print("  (empty)")
        for project_name in names:
            console.print(f"  {escape(project_name)}")


def _clean(root: Path) -> None:
    report = clean_temporary(root)
    if report.status == "missing":
        console.print("Temporary directory does not exist; nothing to clean.")
        return
    if report.status == "empty":
        console.print("Temporary directory is already empty.")
        return
    console.print(f"Removed {report.removed} temporary project(s).")
    if report.warning:
        err_console.print(f"[yellow]warning:[/yellow] {escape(report.warning)}")
    console.print("[green]✓ Clean complete[/green]")


def _create(name: str | None, root: Path, *, keep: bool, git: bool, edit: bool) -> None:
    config = load_config(root)
    result = create_project(
        name,
        keep=keep,
        git=git,
        root=root,
        config=config,
        launch=edit or config.auto_open,
    )
    console.print(f"[green]✓ Project created:[/green] {escape(str(result.path))}")
    _print_editor_commands(result.editor_commands, result.launch)


def _open(keyword: str | None, root: Path, edit: bool) -> None:
    entries = find_projects(keyword, root)
    if not entries:
        console.print("No projects found.")
        console.print("hint: run `rp` to create your first practice project.")
        return

    _print_menu(entries)
    try:
        raw = typer.prompt(f"\nSelect a project (1-{len(entries)})", default="", show_default=False)
    except click.exceptions.Abort:
        # closed input is treated like an empty line
        return
    entry = select_project(entries, raw)
    if entry is None:
        return

    config = load_config(root)
    result = open_project(entry, root=root, config=config, launch=edit or config.auto_open)
    console.print(f"\nSelected: {escape(result.entry.name)}")
    _print_editor_commands(result.editor_commands, result.launch)


def _print_menu(entries: list[ProjectEntry]) -> None:
    console.print("Select a project to open:\n")
    for i, entry in enumerate(entries, start=1):
        console.print(escape(f"  [{i:2}] [{entry.category.value}] {entry.name}"))


def _print_editor_commands(commands: tuple[EditorCommand, ...], launch: LaunchResult | None) -> None:
    console.print("\nOpen the project:")
    width = max((len(command.label) for command in commands), default=0)
    for command in commands:
        console.print(f"  {escape(command.label.ljust(width))} : {escape(render_command(command))}")
    if launch is None:
        return
    if launch.ok:
        console.print(f"[green]✓ {escape(launch.message)}[/green]")
    else:
        err_console.print(f"[yellow]Could not launch {escape(launch.command.label)}:[/yellow] {escape(launch.message)}")
        err_console.print("hint: run one of the commands above manually.")


def main() -> None:
    cli()
