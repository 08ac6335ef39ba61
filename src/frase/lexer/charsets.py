"""Character classification and character sets for O(1) lookups.

Every code point maps to exactly one coarse Category. ASCII goes through a
precomputed table; everything else falls back to its Unicode general
category. All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from frase.lexer.charsets import Category, classify

    if classify(char) is Category.LETTER:
        ...
"""

from __future__ import annotations

import unicodedata
from enum import Enum, auto

from frase.tokens import PunctuationMark


class Category(Enum):
    """Coarse character category used to group characters into lexemes."""

    LETTER = auto()
    DIGIT = auto()
    WHITESPACE = auto()
    PUNCTUATION = auto()
    SYMBOL = auto()
    OTHER = auto()


def _unicode_category(char: str) -> Category:
    """Map a code point to a Category via its Unicode general category.

    Letters and combining marks (L*, M*) are LETTER so accents stay inside
    the word they modify. Only decimal digits (Nd) are DIGIT; other numeric
    forms such as ``½`` or ``²`` are SYMBOL.
    """
    if char.isspace():
        return Category.WHITESPACE
    cat = unicodedata.category(char)
    major = cat[0]
    if major == "L" or major == "M":
        return Category.LETTER
    if cat == "Nd":
        return Category.DIGIT
    if major == "P":
        return Category.PUNCTUATION
    if major == "S" or major == "N":
        return Category.SYMBOL
    # Cc, Cf, Co, Cn, Cs
    return Category.OTHER


_ASCII_TABLE: tuple[Category, ...] = tuple(_unicode_category(chr(i)) for i in range(128))


def classify(char: str) -> Category:
    """Classify a single code point.

    Total: control, unassigned and private-use code points map to OTHER.

    Args:
        char: A one-character string

    Returns:
        The character's Category
    """
    code = ord(char)
    if code < 128:
        return _ASCII_TABLE[code]
    return _unicode_category(char)


# Sentence-final marks other than the period
TERMINALS: frozenset[str] = frozenset("!?")

PERIOD = "."
ELLIPSIS = "…"
COMMA = ","

# Hyphen-minus, hyphen, non-breaking hyphen
HYPHENS: frozenset[str] = frozenset("-‐‑")
EN_DASH = "–"
EM_DASHES: frozenset[str] = frozenset("—―")

# Marks that may be an apostrophe or a single quote
APOSTROPHES: frozenset[str] = frozenset("'’")
STRAIGHT_QUOTES: frozenset[str] = frozenset('"')
OPEN_QUOTES: frozenset[str] = frozenset("“‘«„")
CLOSE_QUOTES: frozenset[str] = frozenset("”»")

OPEN_BRACKETS: frozenset[str] = frozenset("([{")
CLOSE_BRACKETS: frozenset[str] = frozenset(")]}")

# Word-internal characters accepted after # and @
HANDLE_JOINERS: frozenset[str] = frozenset("_")

MARKS: dict[str, PunctuationMark] = {
    ":": PunctuationMark.COLON,
    ",": PunctuationMark.COMMA,
    ";": PunctuationMark.SEMICOLON,
    "!": PunctuationMark.EXCLAMATION,
    "?": PunctuationMark.QUESTION,
    ".": PunctuationMark.PERIOD,
    ELLIPSIS: PunctuationMark.ELLIPSIS,
    EN_DASH: PunctuationMark.DASH,
    **{c: PunctuationMark.DASH for c in HYPHENS | EM_DASHES},
    **{c: PunctuationMark.APOSTROPHE for c in APOSTROPHES},
    **{c: PunctuationMark.QUOTE for c in STRAIGHT_QUOTES | OPEN_QUOTES | CLOSE_QUOTES},
    **{c: PunctuationMark.OPEN_BRACKET for c in OPEN_BRACKETS},
    **{c: PunctuationMark.CLOSE_BRACKET for c in CLOSE_BRACKETS},
}


def mark_for(char: str) -> PunctuationMark:
    """Look up the PunctuationMark for a punctuation character."""
    return MARKS.get(char, PunctuationMark.OTHER)


def starts_lowercase(text: str) -> bool:
    """True if the first character of ``text`` is a lowercase letter."""
    return bool(text) and text[0].islower()
