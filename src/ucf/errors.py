"""Exception classes for ucf.

Lexical mismatches are never raised: they travel in-band as ERROR tokens.
The exceptions here cover programming errors and invalid configuration.
"""

from __future__ import annotations


class UCFError(Exception):
    """Base exception for all ucf errors.

    Subclass this for specific error categories.
    """

    pass


class LexerError(UCFError):
    """Error raised by the lexer or one of its rules."""

    pass


class PatternError(LexerError):
    """A rule pattern could not be compiled.

    Raised by the pattern compiler; collected (not raised) by
    ``Lexer.validate_rules()``.
    """

    def __init__(self, rule_type: str | None, message: str) -> None:
        """Initialize pattern error.

        Args:
            rule_type: Type tag of the rule owning the pattern (optional)
            message: Underlying compiler failure message
        """
        self.rule_type = rule_type
        self.message = message

        if rule_type is not None:
            super().__init__(f'Invalid pattern for rule "{rule_type}": {message}')
        else:
            super().__init__(f"Invalid pattern: {message}")


class MatcherContractError(LexerError):
    """A custom matcher returned text that does not start at the offset."""

    def __init__(self, rule_type: str, offset: int, returned: str) -> None:
        self.rule_type = rule_type
        self.offset = offset
        self.returned = returned
        super().__init__(
            f'Matcher for rule "{rule_type}" returned {returned!r}, '
            f"which does not occur at offset {offset}"
        )


class StreamPositionError(UCFError, IndexError):
    """Token stream reset to a position outside ``[0, token_count]``.

    This is a caller error, not a data error, so it is never clamped.
    """

    def __init__(self, position: int, length: int) -> None:
        """Initialize stream position error.

        Args:
            position: The rejected cursor position
            length: Number of tokens in the stream
        """
        self.position = position
        self.length = length
        super().__init__(f"Invalid reset position: {position} (valid range 0..{length})")
