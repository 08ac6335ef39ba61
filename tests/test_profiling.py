"""Tests for frase.profiling — lex profiling API."""

from frase import SentenceLexer, lex
from frase.profiling import (
    LexAccumulator,
    get_lex_accumulator,
    profiled_lex,
)


class TestGetLexAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_lex_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_lex():
            pass
        assert get_lex_accumulator() is None


class TestProfiledLex:
    def test_yields_accumulator(self) -> None:
        with profiled_lex() as acc:
            assert isinstance(acc, LexAccumulator)
            assert get_lex_accumulator() is acc

    def test_records_lex_call(self) -> None:
        with profiled_lex() as acc:
            lex("Hi. Bye.")
        assert acc.lex_calls == 1
        assert acc.source_length == len("Hi. Bye.")
        assert acc.token_count == 5
        assert acc.sentence_count == 2
        assert acc.lex_ms >= 0

    def test_bytes_counted_as_characters(self) -> None:
        with profiled_lex() as acc:
            lex("café".encode())
        assert acc.source_length == 4

    def test_records_sentence_lexer_calls(self) -> None:
        with profiled_lex() as acc:
            SentenceLexer().lex_many(["One.", "Two.", "Three."])
        assert acc.lex_calls == 3
        assert acc.sentence_count == 3
        assert acc.longest_source == len("Three.")

    def test_nested_contexts_are_independent(self) -> None:
        with profiled_lex() as outer:
            lex("One.")
            with profiled_lex() as inner:
                lex("Two.")
            lex("Three.")
        assert outer.lex_calls == 2
        assert inner.lex_calls == 1

    def test_total_duration_positive(self) -> None:
        with profiled_lex() as acc:
            lex("Dr. Smith went home.")
        assert acc.total_duration_ms > 0


class TestRecordLex:
    def test_totals(self) -> None:
        acc = LexAccumulator()
        acc.record_lex(10, 4, 1, elapsed_ms=2.0)
        acc.record_lex(30, 9, 2, elapsed_ms=3.0)
        assert acc.lex_calls == 2
        assert acc.source_length == 40
        assert acc.longest_source == 30
        assert acc.lex_ms == 5.0
        assert acc.chars_per_ms == 8.0

    def test_throughput_without_timing(self) -> None:
        acc = LexAccumulator()
        acc.record_lex(10, 4, 1)
        assert acc.chars_per_ms == 0.0


class TestSummary:
    def test_keys(self) -> None:
        with profiled_lex() as acc:
            lex("Hello.")
        summary = acc.summary()
        assert set(summary) == {
            "total_ms",
            "lex_ms",
            "lex_calls",
            "source_length",
            "longest_source",
            "token_count",
            "sentence_count",
            "chars_per_ms",
        }
        assert summary["token_count"] == 2

    def test_empty_accumulator(self) -> None:
        summary = LexAccumulator().summary()
        assert summary["lex_calls"] == 0
        assert summary["source_length"] == 0
        assert summary["chars_per_ms"] == 0.0
