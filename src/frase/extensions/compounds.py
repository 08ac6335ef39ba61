"""Hyphenated-compound extension for Frase.

By default a hyphen-joined chain such as ``well-known`` is a plain WORD.
With this extension it becomes a HYPHENATED_COMPOUND, which lets a
pronunciation front end split it on hyphens when the whole compound is
missing from its dictionary. Chains without a hyphen stay WORD tokens.

Thread Safety:
This extension is stateless and thread-safe.

"""

from __future__ import annotations

from collections.abc import Sequence

from frase.extensions import register_extension
from frase.lexer.assembler import Assembly, AssemblyRule, word_chain_end
from frase.lexer.charsets import Category
from frase.lexer.disambiguator import RoleRule
from frase.lexer.lexemes import ClassifiedLexeme
from frase.tokens import TokenKind


def _compound(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
    if lexemes[index].category is not Category.LETTER:
        return None
    end, joined = word_chain_end(lexemes, index)
    if not joined:
        return None
    return Assembly(end, TokenKind.HYPHENATED_COMPOUND)


@register_extension("compounds")
class CompoundsExtension:
    """Extension adding HYPHENATED_COMPOUND tokens."""

    @property
    def name(self) -> str:
        return "compounds"

    def role_rules(self) -> dict[str, tuple[RoleRule, ...]]:
        return {}

    def assembly_rules(self) -> tuple[AssemblyRule, ...]:
        return (_compound,)
