"""Main CLI for Project Picker."""

import typer
from pathlib import Path
from rich.console import Console
from typing import Optional

from . import __version__
from .config import resolve_config
from .projects import ProjectListError, list_projects

app = typer.Typer(
    name="project-picker",
    help="Pick a project directory and open it in tmux",
    add_completion=False,
)
console = Console()

ROOT_HELP = "Directory whose subdirectories are listed (default: $PROJECT_PICKER_ROOT or ~/repo)"


def load_projects(root: Optional[Path]) -> tuple:
    """Resolve config and list projects, or exit with an error.

    Returns:
        Tuple of (PickerConfig, project names).
    """
    config = resolve_config(root)
    try:
        projects = list_projects(config.root)
    except ProjectListError as e:
        console.print(f"[red]Error:[/red] {e}")
        if config.root_source == "default":
            console.print("")
            console.print("Point the picker at your projects with one of:")
            console.print("   [cyan]project-picker --root ~/code[/cyan]")
            console.print("   [cyan]export PROJECT_PICKER_ROOT=~/code[/cyan]")
        raise typer.Exit(1)
    return config, projects


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"project-picker {__version__}")
        raise typer.Exit(0)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(None, "--root", "-r", help=ROOT_HELP),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit",
    ),
):
    """Open the interactive project picker.

    Use arrow keys or j/k to move, enter to open the project in tmux
    and q to quit.
    """
    ctx.obj = root
    if ctx.invoked_subcommand is not None:
        return

    config, projects = load_projects(root)

    from .tui import run_tui

    run_tui(config, projects)


@app.command("list")
def list_command(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(None, "--root", "-r", help=ROOT_HELP),
):
    """Print the projects the picker would show, one per line."""
    if root is None:
        root = ctx.obj
    _, projects = load_projects(root)
    for project in projects:
        console.print(project, highlight=False, markup=False)


if __name__ == "__main__":
    app()
