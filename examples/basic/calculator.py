"""Tokenize arithmetic and evaluate it with a tiny backtracking parser."""

import re

from ucf import Lexer, Token, TokenRule, lexical_errors

lexer = Lexer([
    TokenRule("NUM", re.compile(r"[0-9]+"), action=lambda t, p: Token("NUM", t, p, {"value": int(t)})),
    TokenRule("OP", re.compile(r"[+*]")),
    TokenRule("COMMENT", re.compile(r"#[^\n]*"), precedence=10, action=lambda t, p: None),
])


def term(stream):
    left = stream.consume().metadata["value"]
    while True:
        start = stream.mark()
        op = stream.consume()
        if op is None or op.value != "*":
            stream.reset(start)
            return left
        left *= stream.consume().metadata["value"]


def expr(stream):
    total = term(stream)
    while stream.has_more():
        stream.consume()  # "+"
        total += term(stream)
    return total


source = "2 * 3 + 4  # ten"
print(expr(lexer.tokenize(source)))
print(lexical_errors(lexer.tokenize("2 ? 3")))
