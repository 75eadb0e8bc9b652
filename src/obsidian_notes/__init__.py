"""obsidian-notes: parse notes into frontmatter properties and body text."""

from obsidian_notes.modules.note import (
    MetadataSyntaxError,
    Note,
    NoteError,
    NoteReadError,
    parse,
    read_and_parse,
)

__version__ = "0.1.0"

__all__ = [
    "MetadataSyntaxError",
    "Note",
    "NoteError",
    "NoteReadError",
    "__version__",
    "parse",
    "read_and_parse",
]
