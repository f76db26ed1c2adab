"""Typer CLI for ccp: interactive picker, list and doc commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from result import Ok

from ccp.config import Config, load_config

app = typer.Typer(
    name="ccp",
    help="Claude Code Projects: pick a local project and resume Claude in it.",
    invoke_without_command=True,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to config.toml (default ~/.config/ccp/config.toml)"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")]


def _load(config_path: Path | None) -> Config:
    result = load_config(config_path)
    if isinstance(result, Ok):
        return result.ok_value
    typer.echo(result.err_value, err=True)
    raise typer.Exit(code=1)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.callback(invoke_without_command=True)
def pick(ctx: typer.Context, config: ConfigOption = None) -> None:
    """Start the interactive picker."""
    if ctx.invoked_subcommand is not None:
        return
    from ccp.ui.app import run_app

    run_app(_load(config))


@app.command("list")
def list_projects(
    config: ConfigOption = None,
    query: Annotated[str, typer.Option("--query", "-q", help="Fuzzy filter")] = "",
    verbose: VerboseOption = False,
) -> None:
    """Print scanned projects, most recently modified first."""
    _setup_logging(verbose)
    from ccp.services.container import PickerServices
    from ccp.services.rows import display_rows, row_text

    services = PickerServices.create(_load(config))
    view = services.build_index().filter(query)
    if view.is_empty:
        typer.echo("No matching projects." if view.is_filtered else "No projects found.")
        return
    for row in display_rows(view.matches):
        typer.echo(row_text(row))


@app.command()
def doc(
    name: Annotated[str, typer.Argument(help="Project name")],
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the note matched to a project name."""
    _setup_logging(verbose)
    from ccp.data.docs import DocMatcher

    matcher = DocMatcher(_load(config).docs_dir)
    path = matcher.match(name)
    if path is None:
        typer.echo(f"No doc found for {name}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(path))
