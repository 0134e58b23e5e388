"""Shared fixtures for ucf tests."""

import re

import pytest

from ucf.lexer import Lexer
from ucf.location import Position
from ucf.stream import TokenStream
from ucf.tokens import Token, TokenRule


@pytest.fixture
def arith_rules() -> list[TokenRule]:
    """Numbers, identifiers and plus signs."""
    return [
        TokenRule("NUM", re.compile(r"[0-9]+")),
        TokenRule("ID", re.compile(r"[a-z]+")),
        TokenRule("PLUS", "+"),
    ]


@pytest.fixture
def arith_lexer(arith_rules: list[TokenRule]) -> Lexer:
    return Lexer(arith_rules)


@pytest.fixture
def five_token_stream() -> TokenStream:
    """Stream over tokens A..E at offsets 0..4."""
    tokens = [Token(name, name.lower(), Position(1, i + 1, i)) for i, name in enumerate("ABCDE")]
    return TokenStream(tokens)
