"""Tests for the top-level ucf API."""

import re

from ucf import (
    ERROR,
    Lexer,
    Position,
    Regex,
    Token,
    TokenRule,
    TokenStream,
    tokenize,
)


class TestTokenize:
    """The one-shot tokenize() helper."""

    def test_returns_stream(self) -> None:
        stream = tokenize("1+2", [TokenRule("NUM", Regex("[0-9]+")), TokenRule("PLUS", "+")])
        assert isinstance(stream, TokenStream)
        assert [t.value for t in stream.get_tokens()] == ["1", "+", "2"]

    def test_passes_options(self) -> None:
        stream = tokenize(
            "A b",
            [TokenRule("ID", Regex("[a-z]"))],
            filename="x.src",
            skip_whitespace=False,
            case_sensitive=False,
        )
        tokens = stream.get_tokens()
        assert [t.type for t in tokens] == ["ID", ERROR, "ID"]
        assert tokens[0].position.filename == "x.src"


class TestToken:
    """Token conveniences."""

    def test_repr(self) -> None:
        assert repr(Token("NUM", "1", Position(1, 1, 0))) == "Token(NUM, '1', 1:1)"

    def test_repr_truncates_long_values(self) -> None:
        token = Token("STR", "x" * 30, Position(2, 4, 10))
        assert repr(token) == f"Token(STR, {'x' * 17 + '...'!r}, 2:4)"

    def test_accessors(self) -> None:
        token = Token("NUM", "1", Position(3, 7, 20))
        assert (token.line, token.column, token.offset) == (3, 7, 20)
        assert not token.is_error

    def test_tokens_are_hashable(self) -> None:
        token = Token(ERROR, "?", Position(1, 1, 0), {"error": "Unexpected character: ?"})
        assert token in {token}


class TestLexerRepr:
    def test_repr(self) -> None:
        lexer = Lexer([TokenRule("ID", re.compile("[a-z]+"))], case_sensitive=False)
        assert repr(lexer) == "Lexer(rules=1, skip_whitespace=True, case_sensitive=False)"
