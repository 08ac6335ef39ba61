"""Tests for punctuation role resolution."""

import pytest

from frase.lexer.charsets import Category
from frase.lexer.disambiguator import (
    CORE_ROLE_RULES,
    Window,
    classify_lexemes,
    compile_role_rules,
    default_role,
    disambiguate,
)
from frase.lexer.lexemes import ClassifiedLexeme
from frase.lexer.scanner import scan
from frase.tokens import PunctuationRole


def _roles(source: str, **kwargs: object) -> list[tuple[str, PunctuationRole]]:
    """(text, role) for every punctuation lexeme in ``source``."""
    return [
        (lx.text, lx.role)
        for lx in classify_lexemes(scan(source), **kwargs)
        if lx.role is not None
    ]


def _role_of(source: str, char: str, occurrence: int = 0, **kwargs: object) -> PunctuationRole:
    matches = [role for text, role in _roles(source, **kwargs) if text == char]
    return matches[occurrence]


class TestPeriod:
    def test_decimal_point(self) -> None:
        assert _role_of("3.5", ".") is PunctuationRole.DECIMAL_POINT

    def test_decimal_wins_over_sentence_end(self) -> None:
        assert _role_of("It costs 3.50 now", ".") is PunctuationRole.DECIMAL_POINT

    def test_known_abbreviation(self) -> None:
        assert _role_of("Dr. Smith went home.", ".", 0) is PunctuationRole.ABBREVIATION_MARK
        assert _role_of("Dr. Smith went home.", ".", 1) is PunctuationRole.SENTENCE_END

    def test_abbreviation_match_is_case_insensitive(self) -> None:
        assert _role_of("MR. Jones", ".") is PunctuationRole.ABBREVIATION_MARK

    def test_custom_abbreviations(self) -> None:
        abbreviations = frozenset({"approx"})
        assert (
            _role_of("Dr. Smith", ".", abbreviations=abbreviations)
            is PunctuationRole.SENTENCE_END
        )
        assert (
            _role_of("approx. Ten", ".", abbreviations=abbreviations)
            is PunctuationRole.ABBREVIATION_MARK
        )

    def test_sentence_end_before_capital(self) -> None:
        assert _role_of("He left. She stayed.", ".", 0) is PunctuationRole.SENTENCE_END

    def test_end_of_text(self) -> None:
        assert _role_of("home.", ".") is PunctuationRole.SENTENCE_END

    def test_lowercase_continuation(self) -> None:
        """A period followed by a lower-case word is not a boundary."""
        assert _role_of("the end. and more", ".") is PunctuationRole.ABBREVIATION_MARK

    def test_ellipsis_run_inner_periods_are_generic(self) -> None:
        roles = [role for _, role in _roles("Wait... What")]
        assert roles == [
            PunctuationRole.GENERIC,
            PunctuationRole.GENERIC,
            PunctuationRole.SENTENCE_END,
        ]

    def test_ellipsis_run_before_lowercase(self) -> None:
        roles = [role for _, role in _roles("Wait... what")]
        assert roles == [PunctuationRole.GENERIC] * 3


class TestTerminals:
    @pytest.mark.parametrize("char", ["!", "?"])
    def test_always_sentence_end(self, char: str) -> None:
        assert _role_of(f"Stop{char} now", char) is PunctuationRole.SENTENCE_END

    def test_ellipsis_character(self) -> None:
        assert _role_of("Well…", "…") is PunctuationRole.SENTENCE_END

    def test_ellipsis_character_before_lowercase(self) -> None:
        assert _role_of("Well… maybe", "…") is PunctuationRole.GENERIC


class TestHyphens:
    def test_joiner_between_letters(self) -> None:
        assert _role_of("well-known", "-") is PunctuationRole.HYPHEN_JOINER

    def test_range_between_digits(self) -> None:
        assert _role_of("9-5", "-") is PunctuationRole.HYPHEN_RANGE

    def test_en_dash_range(self) -> None:
        assert _role_of("pages 10–20", "–") is PunctuationRole.HYPHEN_RANGE

    def test_spaced_hyphen_is_generic(self) -> None:
        assert _role_of("this - that", "-") is PunctuationRole.GENERIC

    def test_mixed_sides_are_generic(self) -> None:
        assert _role_of("COVID-19", "-") is PunctuationRole.GENERIC


class TestQuotesAndApostrophes:
    def test_contraction(self) -> None:
        assert _role_of("Don't", "'") is PunctuationRole.APOSTROPHE_CONTRACTION

    def test_curly_contraction(self) -> None:
        assert _role_of("it’s", "’") is PunctuationRole.APOSTROPHE_CONTRACTION

    def test_single_quotes(self) -> None:
        assert [role for _, role in _roles("'hi'")] == [
            PunctuationRole.QUOTE_OPEN,
            PunctuationRole.QUOTE_CLOSE,
        ]

    def test_straight_double_quotes(self) -> None:
        roles = _roles('"Hi," she said.')
        assert roles[0] == ('"', PunctuationRole.QUOTE_OPEN)
        assert roles[1] == (",", PunctuationRole.GENERIC)
        assert roles[2] == ('"', PunctuationRole.QUOTE_CLOSE)

    def test_curly_double_quotes(self) -> None:
        assert [role for _, role in _roles("“Hi”")] == [
            PunctuationRole.QUOTE_OPEN,
            PunctuationRole.QUOTE_CLOSE,
        ]

    def test_quote_after_open_bracket(self) -> None:
        assert _role_of('("yes")', '"', 0) is PunctuationRole.QUOTE_OPEN

    def test_lone_quote_between_spaces_is_generic(self) -> None:
        assert _role_of('a " b', '"') is PunctuationRole.GENERIC


class TestOtherPunctuation:
    def test_comma_is_generic_without_extensions(self) -> None:
        assert _role_of("1,000", ",") is PunctuationRole.GENERIC

    @pytest.mark.parametrize("char", [":", ";", "(", ")", "#", "—"])
    def test_generic(self, char: str) -> None:
        assert _role_of(f"a{char}b", char) is PunctuationRole.GENERIC

    def test_non_punctuation_has_no_role(self) -> None:
        lexemes = list(classify_lexemes(scan("a 1 $")))
        assert all(lx.role is None for lx in lexemes)


class TestDisambiguate:
    def test_single_lexeme_window(self) -> None:
        lexemes = list(scan("3.5"))
        result = disambiguate(lexemes[1], ClassifiedLexeme(lexemes[0]), lexemes[2])
        assert result.role is PunctuationRole.DECIMAL_POINT
        assert result.raw is lexemes[1]

    def test_no_neighbors(self) -> None:
        (period,) = scan(".")
        assert disambiguate(period, None, None).role is PunctuationRole.SENTENCE_END

    def test_default_role(self) -> None:
        assert default_role(".") is PunctuationRole.SENTENCE_END
        assert default_role("?") is PunctuationRole.SENTENCE_END
        assert default_role(",") is PunctuationRole.GENERIC


class TestWindow:
    def _window(self, source: str, index: int) -> Window:
        lexemes = list(scan(source))
        previous = ClassifiedLexeme(lexemes[index - 1]) if index > 0 else None
        following = lexemes[index + 1] if index + 1 < len(lexemes) else None
        after = lexemes[index + 2] if index + 2 < len(lexemes) else None
        return Window(lexemes[index], previous, following, after, frozenset())

    def test_between_letters(self) -> None:
        window = self._window("a-b", 1)
        assert window.between_letters
        assert not window.between_digits

    def test_opens_at_start(self) -> None:
        window = self._window('"a', 0)
        assert window.opens
        assert not window.closes

    def test_closes_before_punctuation(self) -> None:
        window = self._window('a".', 1)
        assert window.closes
        assert window.previous_is(Category.LETTER)

    def test_continues_lowercase(self) -> None:
        assert self._window("x. y", 1).continues_lowercase
        assert not self._window("x. Y", 1).continues_lowercase


class TestRuleTables:
    def test_extension_rules_run_after_core_precedence(self) -> None:
        """Extension rules cannot override decimal or abbreviation roles."""

        def everything_generic(window: Window) -> PunctuationRole:
            return PunctuationRole.GENERIC

        rules = compile_role_rules({".": (everything_generic,)})
        assert _role_of("3.5", ".", rules=rules) is PunctuationRole.DECIMAL_POINT
        assert _role_of("Dr. Who", ".", rules=rules) is PunctuationRole.ABBREVIATION_MARK
        assert _role_of("home. Then", ".", rules=rules) is PunctuationRole.GENERIC

    def test_extension_rules_for_new_characters(self) -> None:
        def colon_end(window: Window) -> PunctuationRole:
            return PunctuationRole.SENTENCE_END

        rules = compile_role_rules({":": (colon_end,)})
        assert _role_of("a: b", ":", rules=rules) is PunctuationRole.SENTENCE_END
        assert ":" not in CORE_ROLE_RULES

    def test_classify_accepts_iterators(self) -> None:
        lexemes = classify_lexemes(iter(list(scan("Hi. Bye."))))
        assert [lx.text for lx in lexemes] == ["Hi", ".", " ", "Bye", "."]
