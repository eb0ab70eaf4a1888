"""
Material parsing for LUMEN.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType


class MaterialParserMixin:
    """
    Mixin providing named material parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect: Any
        skip_newlines: Any
        parse_property_block: Any

    def parse_material(self) -> ir.Material:
        """
        Parse ``'material' IDENT '{' property* '}'``.

        Example:
            material panel {
              color: #111827
              radius: 8px
            }
        """
        self.expect(TokenType.KEYWORD, "material")
        name = self.expect(TokenType.IDENT).value
        self.skip_newlines()
        properties = self.parse_property_block()
        return ir.Material(name=name, properties=properties)
