"""
Error types for LUMEN parsing, compilation, and configuration.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LumenError(Exception):
    """Base exception for all LUMEN errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(LumenError):
    """
    Raised when a required token is missing.

    Examples:
    - No name after 'surface' or 'material'
    - No quoted content after 'text'
    - Missing '{' or '}'

    Recoverable constructs (stray top-level tokens, property lines
    without a colon) never raise; the parser skips them.
    """

    pass


class ConfigError(LumenError):
    """
    Raised when lumen.toml cannot be read.

    Examples:
    - Malformed TOML
    - A section that is not a table
    """

    pass


@dataclass(frozen=True)
class ErrorContext:
    """
    Where an error happened.

    ``snippet`` is already rendered by ``source_snippet``; it is printed
    as is under the location line.
    """

    file: Path | None
    line: int
    column: int
    snippet: str | None = None

    @property
    def location(self) -> str:
        return f"{self.file or '<source>'}:{self.line}:{self.column}"

    def format(self) -> str:
        if self.snippet:
            return f"{self.location}\n{self.snippet}"
        return self.location


def source_snippet(text: str, line: int, column: int, radius: int = 2) -> str:
    """
    Render the lines of ``text`` around ``line`` with a caret under ``column``.

    Lines are split the way the lexer counts them (``\\n``, ``\\r\\n`` or a
    lone ``\\r``). Example for line 2, column 3::

          1 | surface a {
          2 |   width 1px
            |   ^
          3 | }
    """
    lines = _LINE_BREAK.split(text)

    last = min(len(lines), line + radius)
    width = len(str(last))
    gutter = " " * (width + 3)

    rendered = []
    for number in range(max(1, line - radius), last + 1):
        rendered.append(f"  {number:>{width}} | {lines[number - 1]}".rstrip())
        if number == line:
            rendered.append(f"{gutter}| {' ' * (column - 1)}^")
    return "\n".join(rendered)


def make_parse_error(
    message: str,
    file: Path | None,
    line: int,
    column: int,
    snippet: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        file: Source file path (None for in-memory source)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional code snippet

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return ParseError(message, context)
