"""Opt-in lexing metrics.

This module accumulates metrics across ``Lexer.tokenize()`` calls:
- Number of tokenize calls
- Characters scanned
- Tokens emitted and ERROR tokens among them
- Wall time of the profiled block

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from ucf.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        stream = lexer.tokenize(source)

    print(metrics.summary())
    # {"total_ms": 0.4, "tokenize_calls": 1, "source_length": 120, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics for tokenize calls.

    Attributes:
        start_time: Profiling start timestamp.
        tokenize_calls: Number of tokenize() calls recorded.
        source_length: Total characters scanned.
        token_count: Total tokens emitted.
        error_count: Total ERROR tokens emitted.
        lexing_time: Seconds spent inside tokenize().

    """

    start_time: float = field(default_factory=perf_counter)
    tokenize_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    error_count: int = 0
    lexing_time: float = 0.0

    def record_tokenize(
        self,
        source_length: int,
        token_count: int,
        error_count: int,
        elapsed: float,
    ) -> None:
        """Record a tokenize call.

        Args:
            source_length: Length of the source string scanned.
            token_count: Number of tokens emitted.
            error_count: Number of ERROR tokens among them.
            elapsed: Seconds spent scanning.

        """
        self.tokenize_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.error_count += error_count
        self.lexing_time += elapsed

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of lexing metrics.

        Returns:
            Dict with total_ms, lexing_ms, tokenize_calls, source_length,
            token_count, error_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "lexing_ms": round(self.lexing_time * 1000, 2),
            "tokenize_calls": self.tokenize_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "error_count": self.error_count,
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[LexAccumulator]:
    """Context manager for profiled tokenizing.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block.

    Yields:
        LexAccumulator that will be populated during tokenize calls.

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "LexAccumulator",
    "get_lex_accumulator",
    "profiled_tokenize",
]
