"""Tests for ucf.profiling: tokenize profiling API."""

from ucf.lexer import Lexer
from ucf.profiling import (
    LexAccumulator,
    get_lex_accumulator,
    profiled_tokenize,
)


class TestGetLexAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_lex_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_tokenize():
            pass
        assert get_lex_accumulator() is None


class TestProfiledTokenize:
    def test_yields_accumulator(self) -> None:
        with profiled_tokenize() as acc:
            assert isinstance(acc, LexAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_tokenize() as acc:
            assert get_lex_accumulator() is acc

    def test_records_tokenize_call(self, arith_lexer: Lexer) -> None:
        with profiled_tokenize() as acc:
            arith_lexer.tokenize("1+#")
        assert acc.tokenize_calls == 1
        assert acc.source_length == 3
        assert acc.token_count == 3
        assert acc.error_count == 1

    def test_records_multiple_calls(self, arith_lexer: Lexer) -> None:
        with profiled_tokenize() as acc:
            arith_lexer.tokenize("a")
            arith_lexer.tokenize("b c")
        assert acc.tokenize_calls == 2
        assert acc.source_length == 4
        assert acc.token_count == 3

    def test_calls_outside_context_not_recorded(self, arith_lexer: Lexer) -> None:
        with profiled_tokenize() as acc:
            pass
        arith_lexer.tokenize("a")
        assert acc.tokenize_calls == 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = LexAccumulator().summary()
        assert summary["tokenize_calls"] == 0
        assert summary["source_length"] == 0
        assert summary["token_count"] == 0
        assert summary["error_count"] == 0

    def test_summary_after_tokenize(self, arith_lexer: Lexer) -> None:
        with profiled_tokenize() as acc:
            arith_lexer.tokenize("1 + 2")
        summary = acc.summary()
        assert summary["tokenize_calls"] == 1
        assert summary["token_count"] == 3
        assert "total_ms" in summary
        assert "lexing_ms" in summary
