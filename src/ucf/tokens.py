"""Token and TokenRule definitions for the ucf lexer.

The lexer produces a sequence of Token objects that a parser consumes.
Token types are plain strings chosen by the rule author; the only reserved
type is ``ERROR``, used for characters no rule could match.

Thread Safety:
Token is frozen and safe to share across threads. Its metadata mapping is
owned by whoever built the token and should be treated as read-only.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ucf.location import Position
    from ucf.patterns import PatternLike

# Reserved type tag for unmatched characters
ERROR = "ERROR"

Action = Callable[[str, "Position"], "Token | None"]


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: User-defined type tag (``ERROR`` is reserved)
        value: Exact matched text, or synthesized text from a rule action
        position: Start position in the source
        metadata: Open key/value bag; error tokens store ``"error"`` here

    """

    type: str
    value: str
    position: Position
    metadata: Mapping[str, Any] | None = field(default=None, hash=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type}, {val!r}, {self.position.line}:{self.position.column})"

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.position.line

    @property
    def column(self) -> int:
        """Column number (convenience accessor)."""
        return self.position.column

    @property
    def offset(self) -> int:
        """Character offset (convenience accessor)."""
        return self.position.offset

    @property
    def is_error(self) -> bool:
        return self.type == ERROR


@dataclass(frozen=True, slots=True)
class TokenRule:
    """Mapping from a pattern to a token type.

    Attributes:
        type: Token type emitted when the pattern matches
        pattern: A compiled ``re.Pattern`` or ``Regex`` (regular expression),
            a ``str`` or ``Literal`` (matched literally), or a callable or
            ``Matcher`` taking ``(source, offset)`` and returning the matched
            text or None
        precedence: Higher values are tried first; ties keep registration order
        action: Optional ``(text, position) -> Token | None``. Returning None
            discards the match (comments, for example)

    Example:
        >>> import re
        >>> number = TokenRule("NUM", re.compile(r"[0-9]+"))
        >>> plus = TokenRule("PLUS", "+")
        >>> comment = TokenRule("COMMENT", re.compile(r"#[^\\n]*"), action=lambda t, p: None)

    """

    type: str
    pattern: PatternLike
    precedence: int = 0
    action: Action | None = field(default=None, compare=False)
