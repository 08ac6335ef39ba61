"""Tests for the scanner: characters to raw lexemes."""

from frase.lexer.charsets import Category
from frase.lexer.scanner import scan
from frase.location import Span


def _texts(source: str) -> list[str]:
    return [lx.text for lx in scan(source)]


class TestScan:
    def test_empty_input(self) -> None:
        assert list(scan("")) == []

    def test_runs_are_grouped(self) -> None:
        assert _texts("Hello world 42") == ["Hello", " ", "world", " ", "42"]

    def test_punctuation_is_never_merged(self) -> None:
        assert _texts("Wait...") == ["Wait", ".", ".", "."]

    def test_symbols_are_never_merged(self) -> None:
        assert _texts("$$5") == ["$", "$", "5"]

    def test_whitespace_runs_are_kept(self) -> None:
        lexemes = list(scan("a \t\n b"))
        assert [lx.text for lx in lexemes] == ["a", " \t\n ", "b"]
        assert lexemes[1].category is Category.WHITESPACE

    def test_letters_and_digits_split(self) -> None:
        assert _texts("B2B") == ["B", "2", "B"]

    def test_combining_marks_stay_in_word(self) -> None:
        assert _texts("café ok") == ["café", " ", "ok"]

    def test_spans(self) -> None:
        lexemes = list(scan("Hi, 42!"))
        assert [lx.span for lx in lexemes] == [
            Span(0, 2),
            Span(2, 3),
            Span(3, 4),
            Span(4, 6),
            Span(6, 7),
        ]

    def test_categories(self) -> None:
        categories = [lx.category for lx in scan("a1 .$\x00")]
        assert categories == [
            Category.LETTER,
            Category.DIGIT,
            Category.WHITESPACE,
            Category.PUNCTUATION,
            Category.SYMBOL,
            Category.OTHER,
        ]

    def test_is_lazy(self) -> None:
        lexemes = scan("one two")
        assert next(lexemes).text == "one"

    def test_restartable_by_reinvocation(self) -> None:
        source = "Mr. Smith, 3.5"
        assert _texts(source) == _texts(source)
