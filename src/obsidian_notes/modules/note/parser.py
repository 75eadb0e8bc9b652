"""Note parsing: frontmatter properties plus body text."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from obsidian_notes.infrastructure.config import ReaderConfig
from obsidian_notes.infrastructure.frontmatter import (
    DELIMITER,
    FrontmatterSyntaxError,
    Properties,
    load_properties,
    split_frontmatter,
)

__all__ = [
    "MetadataSyntaxError",
    "Note",
    "NoteError",
    "NoteReadError",
    "parse",
    "read_and_parse",
]

logger = structlog.get_logger()


class NoteError(Exception):
    """Base exception for note loading.

    Attributes:
        source_path: Path of the note that failed to load.
    """

    def __init__(self, message: str, source_path: Path) -> None:
        super().__init__(message)
        self.source_path = source_path


class NoteReadError(NoteError):
    """Raised when a note's text cannot be read from disk."""


class MetadataSyntaxError(NoteError):
    """Raised when a note's frontmatter is not valid YAML.

    Attributes:
        problem: Parser diagnostic.
        line: 1-based line in the note file, if known.
        column: 1-based column, if known.
        block: The raw frontmatter text that failed to load.
    """

    def __init__(
        self,
        source_path: Path,
        problem: str,
        block: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        location = f":{line}:{column}" if line is not None else ""
        super().__init__(
            f"Invalid frontmatter in {source_path}{location}: {problem}",
            source_path,
        )
        self.problem = problem
        self.block = block
        self.line = line
        self.column = column


@dataclass(frozen=True)
class Note:
    """Immutable parsed note.

    Attributes:
        source_path: Where the text came from. Only used for error context.
        raw_text: The original text, untouched.
        body: Text after the frontmatter, stripped. Empty if there is none.
        metadata: Loaded frontmatter value, or None if absent or null.
    """

    source_path: Path
    raw_text: str
    body: str = ""
    metadata: Properties | None = None

    @classmethod
    def parse(cls, source_path: Path | str, raw_text: str) -> Note:
        """Parse note text. See parse()."""
        return parse(source_path, raw_text)

    @classmethod
    def read(
        cls, source_path: Path | str, config: ReaderConfig | None = None
    ) -> Note:
        """Read and parse a note file. See read_and_parse()."""
        return read_and_parse(source_path, config)

    def __hash__(self) -> int:
        # body and metadata are derived from raw_text, and metadata may be a dict
        return hash((self.source_path, self.raw_text))

    @property
    def has_metadata(self) -> bool:
        """Whether the note has non-null frontmatter."""
        return self.metadata is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a frontmatter property.

        Returns default when there is no metadata, the metadata is not a
        mapping, or the key is missing.
        """
        if isinstance(self.metadata, Mapping):
            return self.metadata.get(key, default)
        return default


def parse(source_path: Path | str, raw_text: str) -> Note:
    """Parse note text into a Note.

    Frontmatter is only recognised when the text starts with the
    delimiter. A block that loads as YAML null (including an empty block)
    yields metadata=None.

    Args:
        source_path: Path the text came from.
        raw_text: Full note text.

    Returns:
        The parsed Note.

    Raises:
        MetadataSyntaxError: If the frontmatter block is not valid YAML.
    """
    source_path = Path(source_path)
    block, body = split_frontmatter(raw_text)

    metadata: Properties | None = None
    if block is not None:
        try:
            metadata = load_properties(block)
        except FrontmatterSyntaxError as e:
            line = e.line
            if line is not None:
                line += _block_line_offset(raw_text, block)
            logger.debug(
                "metadata_syntax_error",
                path=str(source_path),
                line=line,
                problem=e.problem,
            )
            raise MetadataSyntaxError(
                source_path, e.problem, block, line=line, column=e.column
            ) from e

    note = Note(
        source_path=source_path,
        raw_text=raw_text,
        body=body or "",
        metadata=metadata,
    )
    logger.debug(
        "note_parsed",
        path=str(source_path),
        has_metadata=note.has_metadata,
        body_length=len(note.body),
    )
    return note


def read_and_parse(source_path: Path | str, config: ReaderConfig | None = None) -> Note:
    """Read a note file and parse it.

    Args:
        source_path: Path to the note file.
        config: Reader settings (defaults to ReaderConfig()).

    Returns:
        The parsed Note.

    Raises:
        NoteReadError: If the file is missing, unreadable, too large,
            or not valid in the configured encoding.
        MetadataSyntaxError: If the frontmatter block is not valid YAML.
    """
    if config is None:
        config = ReaderConfig()

    source_path = Path(source_path)

    try:
        # Check file size before reading to prevent DoS
        file_size = source_path.stat().st_size
        if file_size > config.max_note_size:
            raise NoteReadError(
                f"Note {source_path} is too large "
                f"({file_size} bytes, limit {config.max_note_size})",
                source_path,
            )
        raw_text = source_path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.debug("note_read_failed", path=str(source_path), error=str(e))
        raise NoteReadError(
            f"Failed to read note {source_path}: {e}", source_path
        ) from e

    logger.debug("note_read", path=str(source_path), size=file_size)
    return parse(source_path, raw_text)


def _block_line_offset(raw_text: str, block: str) -> int:
    """Number of lines in raw_text that precede the frontmatter block."""
    start = raw_text.find(block, len(DELIMITER))
    if start == -1:
        return 0
    return raw_text.count("\n", 0, start)
