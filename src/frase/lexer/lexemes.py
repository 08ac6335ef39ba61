"""Intermediate lexeme types passed between pipeline stages.

RawLexeme is what the scanner produces: a maximal run of one category, or
a single punctuation/symbol character. ClassifiedLexeme pairs a raw
lexeme with the PunctuationRole the disambiguator resolved for it.

Thread Safety:
Both types are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from frase.lexer.charsets import Category
from frase.location import Span
from frase.tokens import PunctuationRole


@dataclass(frozen=True, slots=True)
class RawLexeme:
    """A run of characters sharing one coarse category.

    Attributes:
        span: Source offsets covered by the lexeme
        text: The covered substring
        category: Category shared by every character in ``text``

    """

    span: Span
    text: str
    category: Category

    def __repr__(self) -> str:
        return f"RawLexeme({self.category.name}, {self.text!r}, {self.span})"

    @property
    def is_letter(self) -> bool:
        return self.category is Category.LETTER

    @property
    def is_digit(self) -> bool:
        return self.category is Category.DIGIT

    @property
    def is_whitespace(self) -> bool:
        return self.category is Category.WHITESPACE

    @property
    def is_punctuation(self) -> bool:
        return self.category is Category.PUNCTUATION


@dataclass(frozen=True, slots=True)
class ClassifiedLexeme:
    """A raw lexeme with its resolved punctuation role.

    Invariant: ``role`` is set iff the lexeme is punctuation.

    Attributes:
        raw: The scanned lexeme
        role: Resolved role, or None for non-punctuation lexemes

    """

    raw: RawLexeme
    role: PunctuationRole | None = None

    def __repr__(self) -> str:
        role = self.role.name if self.role is not None else "-"
        return f"ClassifiedLexeme({self.raw.category.name}, {self.raw.text!r}, {role})"

    @property
    def text(self) -> str:
        return self.raw.text

    @property
    def span(self) -> Span:
        return self.raw.span

    @property
    def category(self) -> Category:
        return self.raw.category
