"""Command line interface for play-cli."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from playcli.catalog import ProjectCatalog, Resolution
from playcli.config import AppConfig
from playcli.errors import (
    ConfigurationError,
    EmptyResultError,
    LaunchError,
    NoMatchError,
    PlayCliError,
)
from playcli.launcher import launch_project
from playcli.models import Page, ProjectRecord
from playcli.web.app import app as web_app


console = Console()
app = typer.Typer(
    name="play-cli",
    help="play-cli - DSA/LLD practice project manager",
    no_args_is_help=True,
)

LIST_ALIASES = ["ls", "l", "show", "display", "all"]
RUN_ALIASES = ["exec", "execute", "start", "r", "do"]
INFO_ALIASES = ["i", "about"]

HELP_TEXT = """
play-cli - DSA/LLD Practice Project Manager

USAGE:
  play-cli <command> [options]

COMMANDS:
  list      List all projects (latest to earliest)
  run       Run a specific project
  info      Show this help message
  names     Print project names, one per line
  web       Serve the project listing as a JSON API

OPTIONS FOR LIST:
  --page <number>        Page number for pagination (default: 1)
  --page-size <number>   Number of projects per page (default: 10)

OPTIONS FOR RUN:
  --latest              Run the latest project
  --project-name <name> Run project by name (fuzzy matching enabled)
  -- <args>             Additional arguments to pass to the project

EXAMPLES:
  play-cli list --page 2 --page-size 5
  play-cli run --latest
  play-cli run --project-name "Sample" -- --some-arg value

FUZZY MATCHING:
  Project names are matched case-insensitively, and partial names work:
  "alg" finds "My Test Algorithm". The closest match is run.

CONFIGURATION:
  PLAYCLI_PROJECTS_DIR   Directory whose subdirectories are the projects
  PLAYCLI_RUNTIME        Command used to run a project (default: bun)
  PLAYCLI_ENTRY_POINT    File run inside the project (default: index.ts)
"""


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_config(projects_dir: Optional[Path]) -> AppConfig:
    if projects_dir is None:
        return AppConfig()
    return AppConfig(projects_dir=projects_dir)


def _build_catalog(config: AppConfig) -> ProjectCatalog:
    return ProjectCatalog(
        config.resolve_projects_dir(Path.cwd()),
        threshold=config.match_threshold,
        substring_score=config.substring_score,
    )


def _complete_project_names(incomplete: str) -> List[str]:
    names = _build_catalog(AppConfig()).project_names()
    prefix = incomplete.casefold()
    return [name for name in names if name.casefold().startswith(prefix)]


def _report_error(error: Optional[PlayCliError]) -> None:
    if isinstance(error, ConfigurationError):
        console.print(f"[yellow]{escape(str(error))}.[/yellow]")
        console.print("Set PLAYCLI_PROJECTS_DIR or pass --projects-dir.")
    elif error is not None and not isinstance(error, EmptyResultError):
        console.print(f"[yellow]{escape(str(error))}[/yellow]")


def _render_listing(page: Page[ProjectRecord]) -> None:
    console.print(f"\n[bold]=== Projects ({page.total_items} total) ===[/bold]")
    console.print(f"Page {page.current_page} of {page.total_pages}\n")

    if not page.items:
        console.print("No projects found.")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Project")
    table.add_column("Modified")
    for offset, project in enumerate(page.items, start=page.start_index + 1):
        table.add_row(str(offset), escape(project.name), project.modified_date)
    console.print(table)

    if page.is_paginated:
        console.print(f"\nUse --page <number> to navigate (1-{page.total_pages})")


def list_projects(
    page: int = typer.Option(1, "--page", "-p", help="Page number for pagination"),
    page_size: int = typer.Option(
        AppConfig().page_size, "--page-size", "-s", min=1, help="Number of projects per page"
    ),
    projects_dir: Path = typer.Option(None, "--projects-dir", help="Projects directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List all projects (latest to earliest)."""
    _setup_logging(verbose)
    catalog = _build_catalog(_load_config(projects_dir))

    listing = catalog.list_page(page, page_size)
    _report_error(listing.error)
    _render_listing(listing.page)


def _announce_alternatives(resolution: Resolution, query: str, limit: int) -> None:
    if len(resolution.alternatives) <= 1:
        return
    console.print(f'Multiple projects found matching "{escape(query)}":')
    for index, match in enumerate(resolution.alternatives[:limit], start=1):
        console.print(f"{index}. {escape(match.project.name)} ({match.score:.2f} match)")
    console.print(f"Using the closest match: {escape(resolution.alternatives[0].project.name)}")


def run_project(
    project_args: Optional[List[str]] = typer.Argument(
        None, help="Additional arguments to pass to the project (after --)"
    ),
    latest: bool = typer.Option(False, "--latest", "-l", help="Run the latest project"),
    project_name: Optional[str] = typer.Option(
        None,
        "--project-name",
        "-n",
        help="Run project by name (fuzzy matching enabled)",
        autocompletion=_complete_project_names,
    ),
    projects_dir: Path = typer.Option(None, "--projects-dir", help="Projects directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Run a specific project."""
    _setup_logging(verbose)
    if latest and project_name:
        raise typer.BadParameter("Cannot use both --latest and --project-name together")
    if not latest and not project_name:
        raise typer.BadParameter("Either --latest or --project-name must be provided")

    config = _load_config(projects_dir)
    catalog = _build_catalog(config)

    if latest:
        resolution = catalog.latest()
        if not resolution.ok:
            _report_error(resolution.error)
            console.print("[red]No projects found to run.[/red]")
            raise typer.Exit(code=1)
    else:
        resolution = catalog.resolve(project_name)
        if not resolution.ok:
            if isinstance(resolution.error, (EmptyResultError, NoMatchError)):
                console.print(f'[red]No project found matching "{escape(project_name)}".[/red]')
            else:
                _report_error(resolution.error)
            raise typer.Exit(code=1)
        _announce_alternatives(resolution, project_name, config.max_alternatives)

    target = resolution.project
    console.print(f"Running [bold]{escape(target.name)}[/bold]...")
    try:
        exit_code = launch_project(
            target,
            project_args or [],
            runtime=config.runtime,
            entry_point=config.entry_point,
        )
    except LaunchError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if exit_code != 0:
        console.print(f"\n{escape(target.name)} exited with code {exit_code}")
    raise typer.Exit(code=exit_code)


def show_info() -> None:
    """Show information about play-cli."""
    console.print(HELP_TEXT, markup=False, highlight=False)


def names(
    projects_dir: Path = typer.Option(None, "--projects-dir", help="Projects directory"),
) -> None:
    """Print project names, most recent first (used by shell completion)."""
    for name in _build_catalog(_load_config(projects_dir)).project_names():
        typer.echo(name)


def serve_web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    projects_dir: Path = typer.Option(None, "--projects-dir", help="Projects directory"),
) -> None:
    """Serve the project listing as a JSON API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install it with \"python -m pip install uvicorn\""
        ) from exc

    config = _load_config(projects_dir)
    resolved = config.resolve_projects_dir(Path.cwd())
    if resolved is None:
        console.print("[yellow]Warning: projects directory not configured.[/yellow]")
    else:
        web_app.state.projects_dir = resolved

    console.print(f"Starting web interface on http://{host}:{port} (projects: {resolved})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )


app.command("list")(list_projects)
for _alias in LIST_ALIASES:
    app.command(_alias, hidden=True)(list_projects)

app.command("run")(run_project)
for _alias in RUN_ALIASES:
    app.command(_alias, hidden=True)(run_project)

app.command("info")(show_info)
for _alias in INFO_ALIASES:
    app.command(_alias, hidden=True)(show_info)

app.command("names")(names)
app.command("web")(serve_web)
