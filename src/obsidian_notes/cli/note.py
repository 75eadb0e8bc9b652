"""Note inspection CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import structlog
import typer

from obsidian_notes.cli.context import CLIContext
from obsidian_notes.cli.formatters import (
    note_to_json,
    print_check_summary,
    print_error,
    print_note,
    print_success,
    print_warning,
)
from obsidian_notes.infrastructure.frontmatter import DELIMITER
from obsidian_notes.modules.note import (
    MetadataSyntaxError,
    NoteError,
    NoteReadError,
    read_and_parse,
)

app = typer.Typer(
    name="note",
    help="Inspect note files.",
    no_args_is_help=True,
)

logger = structlog.get_logger()


@app.command("show")
def show(
    path: Annotated[Path, typer.Argument(help="Note file to parse")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the parsed note as JSON"),
    ] = False,
) -> None:
    """Show a note's frontmatter properties and body.

    \b
    Examples:
        obsidian-notes note show Inbox.md
        obsidian-notes note show Inbox.md --json
    """
    try:
        note = read_and_parse(path, CLIContext.get().get_config())
    except NoteError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(note_to_json(note))
        return

    # An opening delimiter with no closing one is read as plain body
    if note.raw_text.startswith(DELIMITER) and note.raw_text.count(DELIMITER) < 2:
        print_warning("Frontmatter is not closed; showing the whole note as body")

    print_note(note)


@app.command("check")
def check(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Note files to parse"),
    ],
) -> None:
    """Parse notes and report the ones that fail to load.

    Unreadable files and invalid frontmatter are counted separately.
    Exits with status 1 if any note failed.

    \b
    Examples:
        obsidian-notes note check Inbox.md Daily/*.md
    """
    config = CLIContext.get().get_config()
    read_failures = 0
    syntax_failures = 0

    for path in paths:
        try:
            read_and_parse(path, config)
        except NoteReadError as e:
            read_failures += 1
            print_error(str(e))
        except MetadataSyntaxError as e:
            syntax_failures += 1
            print_error(str(e))
        else:
            if CLIContext.get().verbose:
                print_success(str(path))

    logger.debug(
        "check_finished",
        total=len(paths),
        read_failures=read_failures,
        syntax_failures=syntax_failures,
    )
    print_check_summary(len(paths), read_failures, syntax_failures)

    if read_failures or syntax_failures:
        raise typer.Exit(1)
