"""
Base parser class for LUMEN.

Provides the token navigation helpers and the property-line rule shared by
every block kind.
"""

from pathlib import Path

from .. import ir
from ..errors import ParseError, make_parse_error, source_snippet
from ..lexer import Token, TokenType


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    Recursive descent with one token of lookahead. Missing required tokens
    raise ParseError; anything else unexpected is skipped.
    """

    def __init__(self, tokens: list[Token], file: Path | None = None, source: str | None = None):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer
            file: Source file path (for error reporting)
            source: Source text, used to attach a snippet to errors
        """
        self.tokens = tokens
        self.file = file
        self.source = source
        self.pos = 0

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def error(self, message: str, token: Token) -> ParseError:
        snippet = source_snippet(self.source, token.line, token.column) if self.source else None
        return make_parse_error(message, self.file, token.line, token.column, snippet)

    def expect(self, token_type: TokenType, value: str | None = None) -> Token:
        """
        Expect a specific token type (and optionally value) and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        token = self.current_token()
        if token.type != token_type or (value is not None and token.value != value):
            expected = value or token_type.value
            got = token.type.value
            if token.value and token.type not in (TokenType.LBRACE, TokenType.RBRACE):
                got += f' ("{token.value}")'
            raise self.error(f"Expected {expected}, got {got}", token)
        return self.advance()

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    def peek_token(self, offset: int = 1) -> Token:
        """Look ahead without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[pos]

    def match_keyword(self, word: str) -> bool:
        token = self.current_token()
        return token.type == TokenType.KEYWORD and token.value == word

    def skip_newlines(self) -> None:
        """Skip any NEWLINE tokens."""
        while self.match(TokenType.NEWLINE):
            self.advance()

    def at_block_end(self) -> bool:
        return self.match(TokenType.RBRACE, TokenType.EOF)

    def match_property_start(self) -> bool:
        """
        Check for a property name.

        Reserved words name properties too when a colon follows them
        (``material: panel``).
        """
        if self.match(TokenType.IDENT):
            return True
        return self.match(TokenType.KEYWORD) and self.peek_token().type == TokenType.COLON

    def parse_property(self) -> ir.Property | None:
        """
        Parse ``(IDENT | KEYWORD) ':' (VALUE | STRING)?``.

        Returns None when the name is not followed by a colon; the line is
        dropped and parsing carries on from the next token.
        """
        if not self.match_property_start():
            self.expect(TokenType.IDENT)
        key = self.advance().value
        self.skip_newlines()

        if not self.match(TokenType.COLON):
            return None
        self.advance()

        value = ""
        if self.match(TokenType.VALUE):
            value = self.advance().value
        elif self.match(TokenType.STRING):
            value = f'"{self.advance().value}"'

        return ir.Property(key=key, value=value.strip())

    def parse_property_block(self) -> list[ir.Property]:
        """
        Parse ``'{' property* '}'``.

        Tokens other than property names are skipped one at a time.
        """
        self.expect(TokenType.LBRACE)
        self.skip_newlines()

        properties: list[ir.Property] = []
        while not self.at_block_end():
            self.skip_newlines()
            if self.match(TokenType.RBRACE):
                break

            if self.match_property_start():
                prop = self.parse_property()
                if prop is not None:
                    properties.append(prop)
            else:
                self.advance()
            self.skip_newlines()

        self.expect(TokenType.RBRACE)
        return properties
