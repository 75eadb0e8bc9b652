"""Main CLI application."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from obsidian_notes import __version__
from obsidian_notes.cli import note
from obsidian_notes.cli.context import CLIContext
from obsidian_notes.infrastructure.logging import configure_logging

# Main application
app = typer.Typer(
    name="obsidian-notes",
    help="Parse notes into frontmatter properties and body text.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Register subcommand groups
app.add_typer(note.app, name="note")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"obsidian-notes {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress informational messages.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit log lines as JSON.",
    ),
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Reader config file (JSON)."),
    ] = None,
) -> None:
    """obsidian-notes: inspect note files.

    Splits each note into its YAML frontmatter and body.
    """
    # Configure logging (debug only when verbose)
    configure_logging(debug=verbose, json_logs=json_logs)

    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet
    ctx.config_path = config
    ctx.config = None
