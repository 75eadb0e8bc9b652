"""Shared test fixtures for obsidian_notes tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def note_file(temp_dir: Path) -> Callable[..., Path]:
    """Factory that writes a note into temp_dir and returns its path."""

    def _write(content: str, name: str = "note.md", encoding: str = "utf-8") -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)
        return path

    return _write
