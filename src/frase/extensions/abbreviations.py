"""Abbreviation and acronym extension for Frase.

Adds two token kinds:
- ABBREVIATION: a word plus the period resolved as its abbreviation mark
  (``Dr.``, ``etc.``). A period resolved as SENTENCE_END is never absorbed,
  so sentence boundaries are unchanged.
- ACRONYM: dotted single letters (``U.S.A.``, ``e.g.``). Periods between
  two single letters are resolved as abbreviation marks; the final period
  is absorbed only when it did not end the sentence.

Thread Safety:
This extension is stateless and thread-safe.

"""

from __future__ import annotations

from collections.abc import Sequence

from frase.extensions import register_extension
from frase.lexer.assembler import Assembly, AssemblyRule
from frase.lexer.charsets import PERIOD, Category
from frase.lexer.disambiguator import RoleRule, Window
from frase.lexer.lexemes import ClassifiedLexeme
from frase.tokens import PunctuationRole, TokenKind


def _is_initial(lexeme: ClassifiedLexeme | None) -> bool:
    return lexeme is not None and lexeme.category is Category.LETTER and len(lexeme.text) == 1


def _is_mark(lexeme: ClassifiedLexeme) -> bool:
    return lexeme.text == PERIOD and lexeme.role is PunctuationRole.ABBREVIATION_MARK


def _dotted_initial(window: Window) -> PunctuationRole | None:
    nxt = window.following
    prev = window.previous
    if (
        prev is not None
        and nxt is not None
        and prev.category is Category.LETTER
        and len(prev.text) == 1
        and nxt.category is Category.LETTER
        and len(nxt.text) == 1
    ):
        return PunctuationRole.ABBREVIATION_MARK
    return None


def _acronym(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
    count = len(lexemes)
    end = index
    letters = 0
    while end + 1 < count and _is_initial(lexemes[end]) and _is_mark(lexemes[end + 1]):
        end += 2
        letters += 1
    if letters and end < count and _is_initial(lexemes[end]):
        # "U.S" with the final period left as a sentence end
        end += 1
        letters += 1
    if letters < 2:
        return None
    return Assembly(end, TokenKind.ACRONYM)


def _abbreviation(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
    if index + 1 >= len(lexemes) or lexemes[index].category is not Category.LETTER:
        return None
    if not _is_mark(lexemes[index + 1]):
        return None
    return Assembly(index + 2, TokenKind.ABBREVIATION)


@register_extension("abbreviations")
class AbbreviationsExtension:
    """Extension adding ABBREVIATION and ACRONYM tokens."""

    @property
    def name(self) -> str:
        return "abbreviations"

    def role_rules(self) -> dict[str, tuple[RoleRule, ...]]:
        return {PERIOD: (_dotted_initial,)}

    def assembly_rules(self) -> tuple[AssemblyRule, ...]:
        return (_acronym, _abbreviation)
