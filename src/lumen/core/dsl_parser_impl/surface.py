"""
Surface parsing for LUMEN.

Handles surface declarations and the text nodes nested inside them.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType


class SurfaceParserMixin:
    """
    Mixin providing surface and text parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect: Any
        advance: Any
        match: Any
        match_keyword: Any
        match_property_start: Any
        at_block_end: Any
        skip_newlines: Any
        parse_property: Any
        parse_property_block: Any

    def parse_surface(self) -> ir.Surface:
        """
        Parse ``'surface' IDENT '{' (property | surface | text)* '}'``.

        Example:
            surface card {
              width: 300px
              material: solid(#1a1a2e)
              text "Hello" {
                size: 24px
              }
            }
        """
        self.expect(TokenType.KEYWORD, "surface")
        name = self.expect(TokenType.IDENT).value
        self.skip_newlines()
        self.expect(TokenType.LBRACE)
        self.skip_newlines()

        properties: list[ir.Property] = []
        children: list[ir.Surface | ir.Text] = []

        while not self.at_block_end():
            self.skip_newlines()
            if self.match(TokenType.RBRACE):
                break

            if self.match_property_start():
                prop = self.parse_property()
                if prop is not None:
                    properties.append(prop)

            elif self.match_keyword("surface"):
                children.append(self.parse_surface())

            elif self.match_keyword("text"):
                children.append(self.parse_text())

            else:
                # Stray token inside a surface: skipped
                self.advance()
                continue

            self.skip_newlines()

        self.expect(TokenType.RBRACE)
        return ir.Surface(name=name, properties=properties, children=children)

    def parse_text(self) -> ir.Text:
        """Parse ``'text' STRING ('{' property* '}')?``."""
        self.expect(TokenType.KEYWORD, "text")
        content = self.expect(TokenType.STRING).value

        self.skip_newlines()
        properties: list[ir.Property] = []
        if self.match(TokenType.LBRACE):
            properties = self.parse_property_block()

        return ir.Text(content=content, properties=properties)
