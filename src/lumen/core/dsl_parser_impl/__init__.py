"""
LUMEN Parser Package.

The parser is built from mixins, one per declaration kind:

- BaseParser: token navigation and the shared property-line rule
- SurfaceParserMixin: surfaces and the text nodes nested in them
- MaterialParserMixin: named materials

Usage:
    from lumen.core.dsl_parser_impl import parse_dsl

    program = parse_dsl(text)
"""

from pathlib import Path

from .. import ir
from ..lexer import Token, TokenType, tokenize
from .base import BaseParser
from .material import MaterialParserMixin
from .surface import SurfaceParserMixin


class Parser(
    BaseParser,
    SurfaceParserMixin,
    MaterialParserMixin,
):
    """
    Complete LUMEN parser.

    Grammar:
        program      := statement*
        statement    := surface_def | material_def
        surface_def  := 'surface' IDENT '{' surface_body '}'
        surface_body := (property | surface_def | text_def)*
        material_def := 'material' IDENT '{' property* '}'
        text_def     := 'text' STRING ('{' property* '}')?
        property     := (IDENT | KEYWORD) ':' (VALUE | STRING)?
    """

    def parse(self) -> ir.Program:
        """
        Parse the whole token stream.

        Top-level tokens that do not start a surface or material (including
        a bare ``text``) are skipped one at a time.

        Returns:
            Program with all top-level declarations
        """
        body: list[ir.Surface | ir.Material] = []

        self.skip_newlines()

        while not self.match(TokenType.EOF):
            if self.match_keyword("surface"):
                body.append(self.parse_surface())

            elif self.match_keyword("material"):
                body.append(self.parse_material())

            else:
                self.advance()

            self.skip_newlines()

        return ir.Program(body=body)


def parse(tokens: list[Token], file: Path | None = None) -> ir.Program:
    """Parse an already tokenized source unit."""
    return Parser(tokens, file).parse()


def parse_dsl(text: str, file: Path | None = None) -> ir.Program:
    """
    Parse complete LUMEN source.

    Args:
        text: LUMEN source text
        file: Source file path, if any (for error reporting)

    Returns:
        Parsed Program

    Raises:
        ParseError: If a required token is missing
    """
    tokens = tokenize(text)
    parser = Parser(tokens, file, source=text)
    return parser.parse()


__all__ = [
    "Parser",
    "parse",
    "parse_dsl",
    "BaseParser",
    "SurfaceParserMixin",
    "MaterialParserMixin",
]
