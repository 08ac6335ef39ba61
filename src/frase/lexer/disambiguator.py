"""Context-sensitive punctuation role resolution.

Each punctuation lexeme gets exactly one PunctuationRole, decided from a
fixed window: the previous classified lexeme, the next raw lexeme and the
one after it. There is no backtracking; a role, once emitted, is final.

Dispatch is a table from punctuation character to an ordered tuple of role
rules. The first rule returning a role wins; when none does, the mark's
default applies (SENTENCE_END for terminal marks, GENERIC for the rest).
Extensions add rules to the table without changing this dispatch.

Precedence for periods:
1. Decimal point (digit on both sides)
2. Inside a run of periods
3. Known abbreviation stem
4. Extension rules
5. Lower-case continuation after whitespace
6. Sentence end

Thread Safety:
All functions are pure. Rule tables are built once and never mutated.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from itertools import islice

from frase.config import DEFAULT_ABBREVIATIONS
from frase.lexer.charsets import (
    APOSTROPHES,
    CLOSE_QUOTES,
    ELLIPSIS,
    EN_DASH,
    HYPHENS,
    OPEN_BRACKETS,
    OPEN_QUOTES,
    PERIOD,
    STRAIGHT_QUOTES,
    TERMINALS,
    Category,
    starts_lowercase,
)
from frase.lexer.lexemes import ClassifiedLexeme, RawLexeme
from frase.tokens import PunctuationRole


@dataclass(frozen=True, slots=True)
class Window:
    """The neighborhood a role rule may inspect.

    Attributes:
        lexeme: The punctuation lexeme being resolved
        previous: Classified lexeme immediately before, None at start of text
        following: Raw lexeme immediately after, None at end of text
        after: Raw lexeme after ``following``, None if absent
        abbreviations: Lower-case abbreviation stems in effect

    """

    lexeme: RawLexeme
    previous: ClassifiedLexeme | None
    following: RawLexeme | None
    after: RawLexeme | None
    abbreviations: frozenset[str]

    def previous_is(self, category: Category) -> bool:
        return self.previous is not None and self.previous.category is category

    def following_is(self, category: Category) -> bool:
        return self.following is not None and self.following.category is category

    @property
    def between_letters(self) -> bool:
        return self.previous_is(Category.LETTER) and self.following_is(Category.LETTER)

    @property
    def between_digits(self) -> bool:
        return self.previous_is(Category.DIGIT) and self.following_is(Category.DIGIT)

    @property
    def opens(self) -> bool:
        """Preceded by start of text, whitespace or an opening bracket."""
        prev = self.previous
        return prev is None or prev.category is Category.WHITESPACE or prev.text in OPEN_BRACKETS

    @property
    def closes(self) -> bool:
        """Followed by end of text, whitespace or more punctuation."""
        nxt = self.following
        return nxt is None or nxt.category in (Category.WHITESPACE, Category.PUNCTUATION)

    @property
    def continues_lowercase(self) -> bool:
        """Followed by whitespace and then a word starting in lower case."""
        return (
            self.following_is(Category.WHITESPACE)
            and self.after is not None
            and self.after.category is Category.LETTER
            and starts_lowercase(self.after.text)
        )


RoleRule = Callable[[Window], PunctuationRole | None]


# =========================================================================
# Period rules
# =========================================================================


def _decimal_point(window: Window) -> PunctuationRole | None:
    if window.between_digits:
        return PunctuationRole.DECIMAL_POINT
    return None


def _inside_period_run(window: Window) -> PunctuationRole | None:
    # Only the last period of "..." is resolved as a boundary
    if window.following is not None and window.following.text == PERIOD:
        return PunctuationRole.GENERIC
    return None


def _known_abbreviation(window: Window) -> PunctuationRole | None:
    prev = window.previous
    if (
        prev is not None
        and prev.category is Category.LETTER
        and prev.text.lower() in window.abbreviations
    ):
        return PunctuationRole.ABBREVIATION_MARK
    return None


def _lowercase_continuation(window: Window) -> PunctuationRole | None:
    if not window.continues_lowercase:
        return None
    prev = window.previous
    if prev is not None and prev.text == PERIOD:
        # Trailing ellipsis mid-sentence: "wait... what"
        return PunctuationRole.GENERIC
    return PunctuationRole.ABBREVIATION_MARK


def _ellipsis_continuation(window: Window) -> PunctuationRole | None:
    if window.continues_lowercase:
        return PunctuationRole.GENERIC
    return None


# =========================================================================
# Hyphen and dash rules
# =========================================================================


def _hyphen(window: Window) -> PunctuationRole | None:
    if window.between_letters:
        return PunctuationRole.HYPHEN_JOINER
    if window.between_digits:
        return PunctuationRole.HYPHEN_RANGE
    return None


def _en_dash(window: Window) -> PunctuationRole | None:
    if window.between_digits:
        return PunctuationRole.HYPHEN_RANGE
    return None


# =========================================================================
# Apostrophe and quote rules
# =========================================================================


def _contraction(window: Window) -> PunctuationRole | None:
    if window.between_letters:
        return PunctuationRole.APOSTROPHE_CONTRACTION
    return None


def _open_quote(window: Window) -> PunctuationRole | None:
    if window.opens and not window.closes:
        return PunctuationRole.QUOTE_OPEN
    return None


def _close_quote(window: Window) -> PunctuationRole | None:
    if not window.opens and window.closes:
        return PunctuationRole.QUOTE_CLOSE
    return None


def _always(role: PunctuationRole) -> RoleRule:
    def rule(window: Window) -> PunctuationRole:
        return role

    return rule


# =========================================================================
# Rule tables
# =========================================================================

# Rules that run before extension rules
_HEAD_RULES: dict[str, tuple[RoleRule, ...]] = {
    PERIOD: (_decimal_point, _inside_period_run, _known_abbreviation),
    EN_DASH: (_en_dash,),
    **{c: (_hyphen,) for c in HYPHENS},
    **{c: (_contraction, _open_quote, _close_quote) for c in APOSTROPHES},
    **{c: (_open_quote, _close_quote) for c in STRAIGHT_QUOTES},
    **{c: (_always(PunctuationRole.QUOTE_OPEN),) for c in OPEN_QUOTES},
    **{c: (_always(PunctuationRole.QUOTE_CLOSE),) for c in CLOSE_QUOTES},
}

# Rules that run after extension rules
_TAIL_RULES: dict[str, tuple[RoleRule, ...]] = {
    PERIOD: (_lowercase_continuation,),
    ELLIPSIS: (_ellipsis_continuation,),
}

_TERMINAL_MARKS: frozenset[str] = TERMINALS | frozenset({PERIOD, ELLIPSIS})


def compile_role_rules(
    extra: Mapping[str, Sequence[RoleRule]] | None = None,
) -> dict[str, tuple[RoleRule, ...]]:
    """Build the character -> rules dispatch table.

    Args:
        extra: Extension rules per character, inserted between the core
            head and tail rules in the order given

    Returns:
        Dispatch table for disambiguate()
    """
    extra = extra or {}
    chars = set(_HEAD_RULES) | set(_TAIL_RULES) | set(extra)
    return {
        char: (*_HEAD_RULES.get(char, ()), *extra.get(char, ()), *_TAIL_RULES.get(char, ()))
        for char in chars
    }


CORE_ROLE_RULES: dict[str, tuple[RoleRule, ...]] = compile_role_rules()


def default_role(char: str) -> PunctuationRole:
    """Role used when no rule matches."""
    if char in _TERMINAL_MARKS:
        return PunctuationRole.SENTENCE_END
    return PunctuationRole.GENERIC


def disambiguate(
    lexeme: RawLexeme,
    previous: ClassifiedLexeme | None,
    following: RawLexeme | None,
    after: RawLexeme | None = None,
    *,
    abbreviations: frozenset[str] = DEFAULT_ABBREVIATIONS,
    rules: Mapping[str, tuple[RoleRule, ...]] = CORE_ROLE_RULES,
) -> ClassifiedLexeme:
    """Resolve the role of one lexeme.

    Never fails: every punctuation lexeme receives a role, non-punctuation
    lexemes receive None.

    Args:
        lexeme: Lexeme to classify
        previous: Previously classified lexeme (lookbehind of one)
        following: Next raw lexeme (lookahead of one)
        after: Raw lexeme after ``following`` (second lookahead)
        abbreviations: Lower-case abbreviation stems
        rules: Dispatch table from compile_role_rules()

    Returns:
        ClassifiedLexeme wrapping ``lexeme``

    Example:
        >>> lexemes = list(scan("3.5"))
        >>> disambiguate(lexemes[1], ClassifiedLexeme(lexemes[0]), lexemes[2]).role
        <PunctuationRole.DECIMAL_POINT: 3>
    """
    if lexeme.category is not Category.PUNCTUATION:
        return ClassifiedLexeme(lexeme)

    char_rules = rules.get(lexeme.text)
    if char_rules:
        window = Window(lexeme, previous, following, after, abbreviations)
        for rule in char_rules:
            role = rule(window)
            if role is not None:
                return ClassifiedLexeme(lexeme, role)
    return ClassifiedLexeme(lexeme, default_role(lexeme.text))


def classify_lexemes(
    lexemes: Iterable[RawLexeme],
    *,
    abbreviations: frozenset[str] = DEFAULT_ABBREVIATIONS,
    rules: Mapping[str, tuple[RoleRule, ...]] = CORE_ROLE_RULES,
) -> Iterator[ClassifiedLexeme]:
    """Classify a lexeme stream left to right.

    Holds at most two raw lexemes of lookahead and one classified lexeme
    of lookbehind, so the input may be a lazy scanner iterator.

    Yields:
        ClassifiedLexeme objects in input order
    """
    source = iter(lexemes)
    pending: deque[RawLexeme] = deque(islice(source, 3))
    previous: ClassifiedLexeme | None = None
    while pending:
        current = pending.popleft()
        refill = next(source, None)
        if refill is not None:
            pending.append(refill)
        following = pending[0] if pending else None
        after = pending[1] if len(pending) > 1 else None
        previous = disambiguate(
            current,
            previous,
            following,
            after,
            abbreviations=abbreviations,
            rules=rules,
        )
        yield previous
