"""Reader configuration.

Handles loading the optional reader config.json with schema versioning.
The file is only ever read; defaults apply when it is missing or invalid.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "DEFAULT_MAX_NOTE_SIZE",
    "ReaderConfig",
    "load_reader_config",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: Initial schema with encoding and max_note_size
SCHEMA_VERSION = "1"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024

# Notes larger than this are refused rather than read into memory (10MB)
DEFAULT_MAX_NOTE_SIZE = 10 * 1024 * 1024


@dataclass(frozen=True)
class ReaderConfig:
    """Immutable settings for reading notes from disk.

    Attributes:
        encoding: Text encoding of note files.
        max_note_size: Largest note, in bytes, that will be read.
    """

    encoding: str = "utf-8"
    max_note_size: int = DEFAULT_MAX_NOTE_SIZE


def load_reader_config(path: Path | None = None) -> ReaderConfig:
    """Load reader configuration from a JSON file.

    Gracefully handles missing files, invalid JSON, and oversized files.

    Args:
        path: Path to the config file. None means use defaults.

    Returns:
        ReaderConfig instance (uses defaults if file missing or invalid).
    """
    if path is None:
        return ReaderConfig()

    if not path.exists():
        logger.debug("reader_config_not_found", path=str(path))
        return ReaderConfig()

    try:
        # Check file size before reading to prevent DoS
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "reader_config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return ReaderConfig()

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "reader_config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )

        config = _dict_to_config(data)
        logger.debug("reader_config_loaded", path=str(path))
        return config

    except json.JSONDecodeError as e:
        logger.warning("reader_config_invalid_json", path=str(path), error=str(e))
        return ReaderConfig()
    except (TypeError, ValueError) as e:
        logger.warning("reader_config_parse_error", path=str(path), error=str(e))
        return ReaderConfig()
    except OSError as e:
        logger.warning("reader_config_read_error", path=str(path), error=str(e))
        return ReaderConfig()


def _dict_to_config(data: dict[str, Any]) -> ReaderConfig:
    """Convert dict to ReaderConfig.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If max_note_size is not positive.
    """
    encoding = data.get("encoding", "utf-8")
    if not isinstance(encoding, str):
        raise TypeError(f"encoding must be a string, got {type(encoding).__name__}")

    max_note_size = data.get("max_note_size", DEFAULT_MAX_NOTE_SIZE)
    if isinstance(max_note_size, bool) or not isinstance(max_note_size, int):
        raise TypeError(
            f"max_note_size must be an integer, got {type(max_note_size).__name__}"
        )
    if max_note_size <= 0:
        raise ValueError("max_note_size must be positive")

    return ReaderConfig(encoding=encoding, max_note_size=max_note_size)
