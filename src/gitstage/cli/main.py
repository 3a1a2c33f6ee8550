"""Main CLI entry point for gitstage."""

import asyncio
from pathlib import Path, PurePosixPath
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from gitstage import GitStageError
from gitstage.backends import create_backend
from gitstage.config import GitStageConfig, load_config
from gitstage.constants import EXIT_USER_ERROR
from gitstage.core import CoordinatorState, DualChannelReporter, StagingCoordinator
from gitstage.core.paths import is_prefix_of
from gitstage.logconfig import configure_logging
from gitstage.ui import (
    InMemoryOutputRegistry,
    PathSelection,
    RichNotifier,
    RichOutputConsoleFactory,
    TerminalConfirmationView,
)

console = Console()
app = typer.Typer(
    name="gitstage",
    help="Stage selected files and folders into the git index",
    add_completion=False,
)

_FAILED_STATES = {CoordinatorState.STAGE_FAILED, CoordinatorState.STATUS_FAILED}


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", style="red")
    raise typer.Exit(EXIT_USER_ERROR)


def _resolve_project(project: Optional[Path]) -> Path:
    project_root = (project or Path.cwd()).resolve()
    if not project_root.is_dir():
        _fail(f"Project directory not found: {project_root}")
    return project_root


def _load_config(project_root: Path) -> GitStageConfig:
    try:
        return load_config(project_root)
    except GitStageError as e:
        _fail(str(e))


@app.command()
def version() -> None:
    """Show gitstage version."""
    from gitstage import __version__
    typer.echo(f"gitstage version {__version__}")


@app.command()
def add(
    paths: List[str] = typer.Argument(..., help="Files or directories to add"),
    update: bool = typer.Option(
        False,
        "--update",
        "-u",
        help="Only stage files already tracked by git",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Stage without checking status or asking for confirmation",
    ),
    project: Optional[Path] = typer.Option(
        None,
        "--project",
        "-C",
        help="Project root (defaults to the current directory)",
    ),
    show_output: bool = typer.Option(
        False,
        "--show-output",
        help="Print the operation's output console",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Add changes of the selected files and folders to the git index."""
    configure_logging(verbose)
    project_root = _resolve_project(project)
    config = _load_config(project_root)

    try:
        backend = create_backend(config)
    except GitStageError as e:
        _fail(str(e))

    selected = [Path(p) if Path(p).is_absolute() else Path.cwd() / p for p in paths]
    selection = PathSelection(project_root, selected)

    # Reject paths outside the project before the coordinator asserts on them
    for resource in selection.resources:
        if not is_prefix_of(selection.project_root, resource.location):
            _fail(f"Path {resource.location} is outside project root {project_root}")

    view = TerminalConfirmationView(console)
    registry = InMemoryOutputRegistry()
    reporter = DualChannelReporter(
        console_factory=RichOutputConsoleFactory(),
        output_registry=registry,
        notifier=RichNotifier(console),
        session_id=config.session_id,
        label=config.console_label,
    )
    coordinator = StagingCoordinator(
        view=view,
        selection=selection,
        status_source=backend,
        stage_executor=backend,
        reporter=reporter,
        messages=config.messages,
    )

    if yes:
        state = asyncio.run(coordinator.on_add_clicked(update_only=update))
    else:
        state = asyncio.run(coordinator.show_dialog())
        if state is CoordinatorState.PENDING_CONFIRMATION:
            if view.confirm():
                view.set_update_only(update)
                state = asyncio.run(coordinator.on_add_clicked())
            else:
                coordinator.on_cancel_clicked()
                state = coordinator.state
                console.print("[dim]Cancelled[/dim]")

    if show_output:
        for output in registry.consoles_for(config.session_id):
            console.print(output.render())

    if state in _FAILED_STATES:
        raise typer.Exit(EXIT_USER_ERROR)


@app.command()
def status(
    project: Optional[Path] = typer.Option(
        None,
        "--project",
        "-C",
        help="Project root (defaults to the current directory)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Show modified and untracked files of the project."""
    configure_logging(verbose)
    project_root = _resolve_project(project)
    config = _load_config(project_root)

    try:
        backend = create_backend(config)
        snapshot = asyncio.run(
            backend.get_status(PurePosixPath(project_root.as_posix()))
        )
    except GitStageError as e:
        _fail(str(e))

    if snapshot.is_clean():
        console.print("[dim]Nothing to add (working tree clean)[/dim]")
        return

    if snapshot.modified:
        console.print("[bold yellow]Modified:[/bold yellow]")
        for path in snapshot.modified:
            console.print(f"  [yellow]*[/yellow] {escape(path)}", highlight=False)

    if snapshot.untracked:
        if snapshot.modified:
            console.print()
        console.print("[bold green]Untracked:[/bold green]")
        for path in snapshot.untracked:
            console.print(f"  [green]+[/green] {escape(path)}", highlight=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
