"""
Source -> tokens -> tree -> CSS + HTML.
"""

import logging
from pathlib import Path

from .compiler import CompileResult, render
from .dsl_parser_impl import parse_dsl
from .ids import IdGenerator

logger = logging.getLogger(__name__)


def compile_source(
    source: str,
    ids: IdGenerator | None = None,
    file: Path | None = None,
) -> CompileResult:
    """
    Compile one LUMEN source unit.

    Args:
        source: LUMEN source text
        ids: Id generator shared with other units on the same page. A fresh
            generator is used when omitted, so the result depends on the
            source alone.
        file: Source file path, for error messages

    Returns:
        CompileResult with ``css`` and ``html``

    Raises:
        ParseError: If the unit is structurally broken. Nothing is returned
            for a unit that fails.
    """
    program = parse_dsl(source, file)
    logger.debug("Parsed %s: %d declaration(s)", file or "<source>", len(program.body))
    return render(program, ids)


def compile_file(path: Path, ids: IdGenerator | None = None) -> CompileResult:
    """Read a UTF-8 ``.lumen`` file and compile it."""
    text = path.read_text(encoding="utf-8")
    return compile_source(text, ids=ids, file=path)
