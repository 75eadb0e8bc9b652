"""Tests for the reader config module."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from obsidian_notes.infrastructure.config import (
    DEFAULT_MAX_NOTE_SIZE,
    MAX_CONFIG_SIZE,
    ReaderConfig,
    load_reader_config,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestReaderConfig:
    """Tests for ReaderConfig dataclass."""

    def test_config_is_frozen(self) -> None:
        """ReaderConfig should be immutable."""
        config = ReaderConfig()

        with pytest.raises(AttributeError):
            config.encoding = "latin-1"  # type: ignore[misc]

    def test_config_defaults(self) -> None:
        """Should default to UTF-8 and the default size limit."""
        config = ReaderConfig()

        assert config.encoding == "utf-8"
        assert config.max_note_size == DEFAULT_MAX_NOTE_SIZE


class TestLoadReaderConfig:
    """Tests for load_reader_config function."""

    def test_none_returns_defaults(self) -> None:
        """No path means default settings."""
        assert load_reader_config(None) == ReaderConfig()

    def test_missing_file_returns_defaults(self, temp_dir: Path) -> None:
        """Should return defaults when file doesn't exist."""
        assert load_reader_config(temp_dir / "config.json") == ReaderConfig()

    def test_loads_values(self, temp_dir: Path) -> None:
        """Should load values from a valid file."""
        path = temp_dir / "config.json"
        path.write_text(
            json.dumps({"version": "1", "encoding": "latin-1", "max_note_size": 512})
        )

        config = load_reader_config(path)

        assert config == ReaderConfig(encoding="latin-1", max_note_size=512)

    def test_partial_file_uses_defaults_for_missing_keys(self, temp_dir: Path) -> None:
        """Missing keys fall back to defaults."""
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"encoding": "utf-16"}))

        config = load_reader_config(path)

        assert config.encoding == "utf-16"
        assert config.max_note_size == DEFAULT_MAX_NOTE_SIZE

    def test_version_mismatch_still_loads(self, temp_dir: Path) -> None:
        """Should load config with a newer version (forward compatible)."""
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"version": "99", "max_note_size": 2048}))

        assert load_reader_config(path).max_note_size == 2048

    def test_invalid_json_returns_defaults(self, temp_dir: Path) -> None:
        """Should return defaults for invalid JSON."""
        path = temp_dir / "config.json"
        path.write_text("{ not valid json }")

        assert load_reader_config(path) == ReaderConfig()

    @pytest.mark.parametrize(
        "data",
        [
            ["not", "an", "object"],
            {"encoding": 8},
            {"max_note_size": "big"},
            {"max_note_size": True},
            {"max_note_size": 0},
        ],
    )
    def test_invalid_values_return_defaults(
        self, temp_dir: Path, data: object
    ) -> None:
        """Should return defaults when fields have invalid types or values."""
        path = temp_dir / "config.json"
        path.write_text(json.dumps(data))

        assert load_reader_config(path) == ReaderConfig()

    def test_oversized_file_returns_defaults(self, temp_dir: Path) -> None:
        """Should refuse to read config files over the size limit."""
        path = temp_dir / "config.json"
        path.write_text(" " * (MAX_CONFIG_SIZE + 1))

        assert load_reader_config(path) == ReaderConfig()
