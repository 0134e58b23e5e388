"""Token stream with lookahead and backtracking.

A TokenStream is a cursor over a finished token sequence. Parsers use
``peek``/``consume`` for lookahead and ``mark``/``reset`` to backtrack:

    >>> start = stream.mark()
    >>> if not try_parse_call(stream):
    ...     stream.reset(start)

``mark()`` also appends the cursor to a checkpoint history. The history is
an audit trail only: ``reset()`` always takes an explicit position and never
pops it.

Thread Safety:
The token sequence is immutable. The cursor and checkpoint history are owned
by a single consumer.

"""

from __future__ import annotations

from collections.abc import Iterable

from ucf.errors import StreamPositionError
from ucf.tokens import Token


class TokenStream:
    """Cursor over an immutable token sequence.

    Invariant: ``0 <= position <= len(tokens)``.
    """

    __slots__ = ("_tokens", "_tokens_len", "_pos", "_marks")

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._marks: list[int] = []

    def peek(self, offset: int = 0) -> Token | None:
        """Look at a token relative to the cursor without consuming it.

        Args:
            offset: Distance from the cursor (0 is the next token; negative
                values look behind)

        Returns:
            Token at ``position + offset``, or None when out of range
        """
        index = self._pos + offset
        if 0 <= index < self._tokens_len:
            return self._tokens[index]
        return None

    def consume(self) -> Token | None:
        """Return the token at the cursor and advance past it.

        Returns:
            The next token, or None if the stream is exhausted
        """
        if self._pos < self._tokens_len:
            token = self._tokens[self._pos]
            self._pos += 1
            return token
        return None

    def has_more(self) -> bool:
        """True while tokens remain to be consumed."""
        return self._pos < self._tokens_len

    def mark(self) -> int:
        """Record the cursor in the checkpoint history and return it."""
        self._marks.append(self._pos)
        return self._pos

    def reset(self, position: int) -> None:
        """Move the cursor to an explicit position.

        Args:
            position: Target cursor value, usually from ``mark()``

        Raises:
            StreamPositionError: If position is outside ``[0, len(tokens)]``.
                The cursor is left unchanged.
        """
        if not 0 <= position <= self._tokens_len:
            raise StreamPositionError(position, self._tokens_len)
        self._pos = position

    @property
    def position(self) -> int:
        """Current cursor value."""
        return self._pos

    @property
    def marks(self) -> tuple[int, ...]:
        """Checkpoint history, oldest first."""
        return tuple(self._marks)

    def get_tokens(self) -> list[Token]:
        """Independent copy of the full token sequence."""
        return list(self._tokens)

    def remaining(self) -> int:
        """Number of tokens not yet consumed."""
        return self._tokens_len - self._pos

    def clear_marks(self) -> None:
        """Empty the checkpoint history; the cursor is unaffected."""
        self._marks.clear()

    def __len__(self) -> int:
        return self._tokens_len

    def __repr__(self) -> str:
        return f"TokenStream(position={self._pos}, tokens={self._tokens_len})"
