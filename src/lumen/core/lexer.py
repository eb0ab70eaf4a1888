"""
Lexer/Tokenizer for LUMEN source.

Converts raw LUMEN text into a flat stream of tokens with source location
tracking. After a colon the lexer captures the rest of the line as a single
VALUE token, so property values can hold spaces, commas and parentheses
without quoting:

    shadow: 0 4px 20px rgba(0,0,0,0.5)
    -> IDENT("shadow"), COLON, VALUE("0 4px 20px rgba(0,0,0,0.5)")

The lexer never raises. Characters it does not recognise are dropped.
"""

import re
from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types in LUMEN source."""

    KEYWORD = "KEYWORD"
    IDENT = "IDENT"
    STRING = "STRING"
    COLON = "COLON"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    VALUE = "VALUE"
    NEWLINE = "NEWLINE"
    EOF = "EOF"


# Reserved words; every other word is an IDENT
KEYWORDS = {"surface", "material", "text"}

_IDENT_START = re.compile(r"[A-Za-z_]")
_IDENT_CHAR = re.compile(r"[A-Za-z0-9_-]")


@dataclass
class Token:
    """
    A single token of LUMEN source.

    Attributes:
        type: Type of token
        value: String value of the token (empty for punctuation)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for LUMEN source.

    Runs in two modes: normal mode, and value-capture mode which is entered
    after a COLON and left at the next line break.
    """

    def __init__(self, text: str):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
        """
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        self.after_colon = False

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            ch = self.text[self.pos]
            # \r\n counts once, on its \n
            if ch == "\n" or (ch == "\r" and self.peek_char() != "\n"):
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def emit(self, token_type: TokenType, value: str, line: int, column: int) -> None:
        self.tokens.append(Token(token_type, value, line, column))

    def skip_line_comment(self) -> None:
        """Skip a // comment up to (not including) the line break."""
        while self.current_char() is not None and self.current_char() != "\n":
            self.advance()

    def skip_block_comment(self) -> None:
        """Skip a /* ... */ comment. An unterminated comment runs to end of input."""
        self.advance()
        self.advance()
        while self.current_char() is not None:
            if self.current_char() == "*" and self.peek_char() == "/":
                self.advance()
                self.advance()
                return
            self.advance()

    def read_value(self) -> None:
        """Capture the rest of the line after a colon as one VALUE token."""
        while self.current_char() in (" ", "\t"):
            self.advance()

        start_line = self.line
        start_col = self.column
        chars = []
        while True:
            current = self.current_char()
            if current is None or current in ("\n", "\r"):
                break
            if current == "/" and self.peek_char() == "/":
                break
            chars.append(current)
            self.advance()

        value = "".join(chars).rstrip()
        if value:
            self.emit(TokenType.VALUE, value, start_line, start_col)
        self.after_colon = False

    def read_string(self) -> str:
        """Read a double-quoted string. No escape sequences are recognised."""
        self.advance()  # opening quote
        chars = []
        while self.current_char() is not None and self.current_char() != '"':
            chars.append(self.current_char())
            self.advance()
        self.advance()  # closing quote, if any
        return "".join(chars)

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        chars = []
        current = self.current_char()
        while current is not None and _IDENT_CHAR.match(current):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens ending with EOF
        """
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            token_line = self.line
            token_col = self.column

            # Line breaks always end value-capture mode
            if ch in ("\n", "\r"):
                self.after_colon = False
                self.emit(TokenType.NEWLINE, "", token_line, token_col)
                self.advance()
                continue

            if self.after_colon:
                self.read_value()
                continue

            if ch in (" ", "\t"):
                self.advance()

            elif ch == "/" and self.peek_char() == "/":
                self.skip_line_comment()

            elif ch == "/" and self.peek_char() == "*":
                self.skip_block_comment()

            elif ch == "{":
                self.emit(TokenType.LBRACE, "{", token_line, token_col)
                self.advance()

            elif ch == "}":
                self.emit(TokenType.RBRACE, "}", token_line, token_col)
                self.advance()

            elif ch == ":":
                self.emit(TokenType.COLON, ":", token_line, token_col)
                self.advance()
                self.after_colon = True

            elif ch == '"':
                value = self.read_string()
                self.emit(TokenType.STRING, value, token_line, token_col)

            elif _IDENT_START.match(ch):
                word = self.read_identifier()
                token_type = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENT
                self.emit(token_type, word, token_line, token_col)

            else:
                # Unknown character: dropped
                self.advance()

        self.emit(TokenType.EOF, "", self.line, self.column)
        return self.tokens


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize LUMEN source.

    Args:
        text: Source text

    Returns:
        List of tokens
    """
    return Lexer(text).tokenize()
