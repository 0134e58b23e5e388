"""ucf: Universal Compiler Framework lexing core

A configurable lexical scanner. Source text is turned into typed tokens by a
precedence-ordered set of user rules, and handed to parsers as a TokenStream
supporting lookahead and backtracking. Unmatched characters become in-band
ERROR tokens; scanning never stops early.

Quick Start:
    >>> import re
    >>> from ucf import Lexer, TokenRule
    >>> lexer = Lexer([
    ...     TokenRule("NUM", re.compile(r"[0-9]+")),
    ...     TokenRule("PLUS", "+"),
    ... ])
    >>> stream = lexer.tokenize("1 + 2")
    >>> stream.peek()
    Token(NUM, '1', 1:1)

    >>> # One-shot helper
    >>> from ucf import tokenize
    >>> tokenize("1+2", lexer.rules).remaining()
    3

Installation:
    pip install ucf                  # Core lexer (zero deps)
    pip install ucf[test]            # + pytest and hypothesis
"""

from collections.abc import Iterable

from ucf.config import LexerConfig, LexerOptions, SkipWhitespace
from ucf.diagnostics import LexicalDiagnostic, ValidationResult, lexical_errors
from ucf.errors import (
    LexerError,
    MatcherContractError,
    PatternError,
    StreamPositionError,
    UCFError,
)
from ucf.lexer import Lexer
from ucf.location import Position
from ucf.patterns import Literal, Matcher, Regex, compile_pattern
from ucf.profiling import LexAccumulator, get_lex_accumulator, profiled_tokenize
from ucf.rules import RuleSet
from ucf.stream import TokenStream
from ucf.tokens import ERROR, Token, TokenRule

__version__ = "1.0.0"


def tokenize(
    source: str,
    rules: Iterable[TokenRule],
    *,
    filename: str | None = None,
    skip_whitespace: SkipWhitespace | None = None,
    case_sensitive: bool | None = None,
) -> TokenStream:
    """Tokenize source with a throwaway lexer.

    Args:
        source: Source text
        rules: Token rules, in registration order
        filename: Optional source file path recorded in token positions
        skip_whitespace: See ``Lexer``
        case_sensitive: See ``Lexer``

    Returns:
        TokenStream over the emitted tokens

    Example:
        >>> stream = tokenize("a", [TokenRule("ID", Regex("[a-z]+"))])
        >>> stream.consume().type
        'ID'
    """
    lexer = Lexer(rules, skip_whitespace=skip_whitespace, case_sensitive=case_sensitive)
    return lexer.tokenize(source, filename=filename)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    "Lexer",
    "TokenStream",
    # Rules and patterns
    "TokenRule",
    "RuleSet",
    "Regex",
    "Literal",
    "Matcher",
    "compile_pattern",
    # Tokens
    "ERROR",
    "Token",
    "Position",
    # Configuration
    "LexerConfig",
    "LexerOptions",
    # Diagnostics
    "ValidationResult",
    "LexicalDiagnostic",
    "lexical_errors",
    # Errors
    "UCFError",
    "LexerError",
    "PatternError",
    "MatcherContractError",
    "StreamPositionError",
    # Profiling
    "LexAccumulator",
    "get_lex_accumulator",
    "profiled_tokenize",
]
