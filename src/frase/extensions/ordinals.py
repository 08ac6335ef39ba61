"""Ordinal extension for Frase.

Adds ORDINAL tokens for a number followed directly by an English ordinal
suffix: ``1st``, ``22nd``, ``103rd``, ``1,000th``. The normalized form is
the canonical number plus the lower-case suffix.

Thread Safety:
This extension is stateless and thread-safe.

"""

from __future__ import annotations

from collections.abc import Sequence

from frase.extensions import register_extension
from frase.lexer.assembler import Assembly, AssemblyRule, normalize_number, number_end
from frase.lexer.charsets import Category
from frase.lexer.disambiguator import RoleRule
from frase.lexer.lexemes import ClassifiedLexeme
from frase.tokens import TokenKind

ORDINAL_SUFFIXES: frozenset[str] = frozenset({"st", "nd", "rd", "th"})


def _ordinal(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
    end = number_end(lexemes, index)
    if end is None or end >= len(lexemes):
        return None
    suffix = lexemes[end]
    if suffix.category is not Category.LETTER or suffix.text.lower() not in ORDINAL_SUFFIXES:
        return None
    number = normalize_number(lexemes[index:end])
    return Assembly(end + 1, TokenKind.ORDINAL, number + suffix.text.lower())


@register_extension("ordinals")
class OrdinalsExtension:
    """Extension adding ORDINAL tokens."""

    @property
    def name(self) -> str:
        return "ordinals"

    def role_rules(self) -> dict[str, tuple[RoleRule, ...]]:
        return {}

    def assembly_rules(self) -> tuple[AssemblyRule, ...]:
        return (_ordinal,)
