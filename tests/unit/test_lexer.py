"""Tests for the LUMEN lexer."""

from lumen.core.lexer import Token, TokenType, tokenize


def kinds(tokens: list[Token]) -> list[TokenType]:
    return [t.type for t in tokens]


class TestNormalMode:
    def test_surface_header(self) -> None:
        """Keywords, names and braces."""
        tokens = tokenize("surface card {")
        assert kinds(tokens) == [
            TokenType.KEYWORD,
            TokenType.IDENT,
            TokenType.LBRACE,
            TokenType.EOF,
        ]
        assert tokens[0].value == "surface"
        assert tokens[1].value == "card"

    def test_reserved_words(self) -> None:
        tokens = tokenize("surface material text Surface")
        assert kinds(tokens)[:4] == [
            TokenType.KEYWORD,
            TokenType.KEYWORD,
            TokenType.KEYWORD,
            TokenType.IDENT,
        ]

    def test_identifier_characters(self) -> None:
        """Hyphens, digits and underscores after a leading letter or underscore."""
        tokens = tokenize("dark-panel_2 _hero")
        assert [t.value for t in tokens[:2]] == ["dark-panel_2", "_hero"]
        assert kinds(tokens)[:2] == [TokenType.IDENT, TokenType.IDENT]

    def test_leading_digit_is_dropped(self) -> None:
        tokens = tokenize("2abc")
        assert kinds(tokens) == [TokenType.IDENT, TokenType.EOF]
        assert tokens[0].value == "abc"

    def test_quoted_text(self) -> None:
        tokens = tokenize('text "Hello, world"')
        assert tokens[1].type == TokenType.STRING
        assert tokens[1].value == "Hello, world"

    def test_no_escape_sequences(self) -> None:
        """A backslash is kept and the next quote still closes the string."""
        tokens = tokenize('"a\\"b"')
        assert tokens[0].value == "a\\"
        assert tokens[1].type == TokenType.IDENT
        assert tokens[1].value == "b"

    def test_unterminated_string_runs_to_end(self) -> None:
        tokens = tokenize('"open')
        assert tokens[0].type == TokenType.STRING
        assert tokens[0].value == "open"
        assert tokens[-1].type == TokenType.EOF

    def test_unknown_characters_are_dropped(self) -> None:
        tokens = tokenize("@ # $ % card ;")
        assert kinds(tokens) == [TokenType.IDENT, TokenType.EOF]

    def test_empty_source(self) -> None:
        assert kinds(tokenize("")) == [TokenType.EOF]


class TestComments:
    def test_line_comment(self) -> None:
        tokens = tokenize("// surface hidden\nmaterial")
        assert kinds(tokens) == [TokenType.NEWLINE, TokenType.KEYWORD, TokenType.EOF]

    def test_block_comment(self) -> None:
        tokens = tokenize("/* surface\n hidden */ material")
        assert kinds(tokens) == [TokenType.KEYWORD, TokenType.EOF]
        assert tokens[0].value == "material"

    def test_block_comments_do_not_nest(self) -> None:
        tokens = tokenize("/* a /* b */ card */")
        assert [t.value for t in tokens if t.type == TokenType.IDENT] == ["card"]

    def test_unterminated_block_comment(self) -> None:
        assert kinds(tokenize("/* never closed surface")) == [TokenType.EOF]


class TestValueCapture:
    def test_rest_of_line_is_one_value(self) -> None:
        tokens = tokenize("shadow: 0 4px 20px rgba(0,0,0,0.5)")
        assert kinds(tokens) == [
            TokenType.IDENT,
            TokenType.COLON,
            TokenType.VALUE,
            TokenType.EOF,
        ]
        assert tokens[2].value == "0 4px 20px rgba(0,0,0,0.5)"

    def test_leading_and_trailing_space_trimmed(self) -> None:
        tokens = tokenize("width: \t 320px   \n")
        assert tokens[2].value == "320px"
        assert tokens[3].type == TokenType.NEWLINE

    def test_value_stops_at_line_comment(self) -> None:
        tokens = tokenize("width: 10px // half size")
        assert tokens[2].value == "10px"
        assert tokens[-1].type == TokenType.EOF
        assert len(tokens) == 4

    def test_empty_value_emits_nothing(self) -> None:
        tokens = tokenize("width:\n")
        assert kinds(tokens) == [
            TokenType.IDENT,
            TokenType.COLON,
            TokenType.NEWLINE,
            TokenType.EOF,
        ]

    def test_keywords_inside_values_are_not_tokens(self) -> None:
        tokens = tokenize("label: surface { text }")
        assert tokens[2].type == TokenType.VALUE
        assert tokens[2].value == "surface { text }"

    def test_capture_ends_at_line_break(self) -> None:
        tokens = tokenize("a:\nb c")
        assert kinds(tokens) == [
            TokenType.IDENT,
            TokenType.COLON,
            TokenType.NEWLINE,
            TokenType.IDENT,
            TokenType.IDENT,
            TokenType.EOF,
        ]

    def test_carriage_return_is_a_line_break(self) -> None:
        tokens = tokenize("a: 1\r\nb: 2")
        assert kinds(tokens) == [
            TokenType.IDENT,
            TokenType.COLON,
            TokenType.VALUE,
            TokenType.NEWLINE,
            TokenType.NEWLINE,
            TokenType.IDENT,
            TokenType.COLON,
            TokenType.VALUE,
            TokenType.EOF,
        ]
        assert tokens[2].value == "1"
        assert tokens[7].value == "2"


class TestLocations:
    def test_line_and_column(self) -> None:
        tokens = tokenize("surface a {\n  width: 1px\n}")
        width = next(t for t in tokens if t.value == "width")
        assert (width.line, width.column) == (2, 3)
        value = next(t for t in tokens if t.type == TokenType.VALUE)
        assert (value.line, value.column) == (2, 10)
        closing = next(t for t in tokens if t.type == TokenType.RBRACE)
        assert (closing.line, closing.column) == (3, 1)

    def test_carriage_return_starts_a_line(self) -> None:
        tokens = tokenize("surface a {\r  width: 1px\r}")
        width = next(t for t in tokens if t.value == "width")
        assert (width.line, width.column) == (2, 3)
        closing = next(t for t in tokens if t.type == TokenType.RBRACE)
        assert (closing.line, closing.column) == (3, 1)

    def test_crlf_counts_as_one_line(self) -> None:
        tokens = tokenize("surface a {\r\n  width: 1px\r\n}")
        closing = next(t for t in tokens if t.type == TokenType.RBRACE)
        assert (closing.line, closing.column) == (3, 1)

    def test_repr(self) -> None:
        token = tokenize("card")[0]
        assert repr(token) == "Token(IDENT, 'card', 1:1)"
