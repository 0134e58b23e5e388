"""Rule-driven lexer for ucf.

lexer/
├── __init__.py          # Re-exports Lexer
└── core.py              # Lexer class (scan loop, rule management, config)

Usage:
    >>> import re
    >>> from ucf.lexer import Lexer
    >>> from ucf.tokens import TokenRule
    >>> lexer = Lexer([TokenRule("NUM", re.compile(r"[0-9]+")), TokenRule("PLUS", "+")])
    >>> stream = lexer.tokenize("1+2")
    >>> while stream.has_more():
    ...     print(stream.consume())
Token(NUM, '1', 1:1)
Token(PLUS, '+', 1:2)
Token(NUM, '2', 1:3)

"""

from ucf.lexer.core import Lexer

__all__ = ["Lexer"]
