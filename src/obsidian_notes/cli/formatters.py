"""Rich console output formatting utilities."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from obsidian_notes.cli.context import CLIContext

if TYPE_CHECKING:
    from obsidian_notes.modules.note import Note

__all__ = [
    "console",
    "error_console",
    "format_value",
    "note_to_json",
    "print_check_summary",
    "print_error",
    "print_info",
    "print_note",
    "print_success",
    "print_warning",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {escape(message)}")


def format_value(value: Any) -> str:
    """Render a property value on one line.

    Scalars are shown as is; lists and mappings as compact JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, Mapping)):
        return json.dumps(_jsonable(value), default=str, ensure_ascii=False)
    return str(value)


def note_to_json(note: Note) -> str:
    """Serialize a note for --json output."""
    data = {
        "path": str(note.source_path),
        "metadata": _jsonable(note.metadata),
        "body": note.body,
    }
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def print_note(note: Note) -> None:
    """Print a note's properties and body."""
    if isinstance(note.metadata, Mapping):
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Property", style="cyan")
        table.add_column("Value")
        for key, value in note.metadata.items():
            table.add_row(Text(str(key)), Text(format_value(value)))
        properties: Any = table
    elif note.metadata is not None:
        properties = Text(format_value(note.metadata))
    else:
        properties = Text("No properties", style="dim")

    console.print(
        Panel(
            properties,
            title=f"[bold]{escape(str(note.source_path))}[/bold]",
            border_style="blue",
        )
    )

    if note.body:
        console.print(Text(note.body))
    else:
        print_info("Note has no body")


def print_check_summary(total: int, read_failures: int, syntax_failures: int) -> None:
    """Print the result line for the check command."""
    failed = read_failures + syntax_failures
    if failed == 0:
        print_success(f"{total} note(s) parsed")
        return

    print_error(
        f"{failed} of {total} note(s) failed "
        f"({read_failures} unreadable, {syntax_failures} invalid frontmatter)"
    )


def _jsonable(value: Any) -> Any:
    """Convert mapping keys to strings so the value can be JSON encoded."""
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value
