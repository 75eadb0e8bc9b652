"""YAML frontmatter splitting and loading for note files.

A note may open with a metadata block delimited by --- markers. The block
only counts when the first marker sits at the very start of the text;
anything else (a Markdown table separator row, a horizontal rule in the
middle of the note) is ordinary body content.
"""

from __future__ import annotations

from typing import Any

import structlog
import yaml

__all__ = [
    "DELIMITER",
    "FrontmatterSyntaxError",
    "Properties",
    "load_properties",
    "split_frontmatter",
]

logger = structlog.get_logger()

DELIMITER = "---"

# Whatever yaml.safe_load produces: dict, list, str, int, float, bool, date...
Properties = Any


class FrontmatterSyntaxError(Exception):
    """Raised when a frontmatter block is not valid YAML.

    Attributes:
        problem: PyYAML's description of the problem.
        line: 1-based line within the block, if known.
        column: 1-based column within the block, if known.
    """

    def __init__(
        self, problem: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.problem = problem
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Invalid YAML in frontmatter{location}: {problem}")


def split_frontmatter(text: str) -> tuple[str | None, str | None]:
    """Split note text into a raw frontmatter block and a raw body.

    Only the first two occurrences of the delimiter are cut points; later
    ones stay in the body untouched.

    Args:
        text: Full note text.

    Returns:
        Tuple of (frontmatter, body), both stripped of surrounding
        whitespace. frontmatter is None when the text has no block at
        position 0. body is None when a block is present but nothing
        follows the closing delimiter.

    Example:
        >>> split_frontmatter('---\\ntitle: x\\n---\\nHello\\n')
        ('title: x', 'Hello')
        >>> split_frontmatter('| a | b |\\n|---|---|\\n')
        (None, '| a | b |\\n|---|---|')
    """
    parts = text.split(DELIMITER, 2)

    if len(parts) == 3 and parts[0] == "":
        body = parts[2].strip()
        return parts[1].strip(), body or None

    if parts[0] == "" and len(parts) == 2:
        logger.debug("frontmatter_not_closed")

    return None, text.strip()


def load_properties(block: str) -> Properties | None:
    """Deserialize a raw frontmatter block.

    Args:
        block: YAML text between the delimiters.

    Returns:
        The loaded value, or None if the block is empty or an explicit null.

    Raises:
        FrontmatterSyntaxError: If the block is not valid YAML.
    """
    try:
        return yaml.safe_load(block)
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark or e.context_mark
        problem = e.problem or e.context or str(e)
        if mark is None:
            raise FrontmatterSyntaxError(problem) from e
        raise FrontmatterSyntaxError(problem, mark.line + 1, mark.column + 1) from e
    except yaml.YAMLError as e:
        raise FrontmatterSyntaxError(str(e)) from e
