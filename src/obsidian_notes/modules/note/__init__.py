"""Note parsing module."""

from obsidian_notes.modules.note.parser import (
    MetadataSyntaxError,
    Note,
    NoteError,
    NoteReadError,
    parse,
    read_and_parse,
)

__all__ = [
    "MetadataSyntaxError",
    "Note",
    "NoteError",
    "NoteReadError",
    "parse",
    "read_and_parse",
]
