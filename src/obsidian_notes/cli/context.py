"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from pathlib import Path

    from obsidian_notes.infrastructure.config import ReaderConfig

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Global CLI context for verbosity and reader settings.

    Uses singleton pattern to share state across all CLI commands.

    Note: Mutable dataclass to allow setting flags at runtime.
    Assumes single-threaded CLI environment.
    """

    verbose: bool = False
    quiet: bool = False
    config_path: Path | None = None
    config: ReaderConfig | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the singleton CLI context instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_config(self) -> ReaderConfig:
        """Get reader config, loading and caching on first access.

        Returns:
            Loaded or default ReaderConfig instance.
        """
        if self.config is None:
            from obsidian_notes.infrastructure.config import load_reader_config

            self.config = load_reader_config(self.config_path)

        assert self.config is not None  # Always set in the if block above
        return self.config

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state.
        """
        cls._instance = None
