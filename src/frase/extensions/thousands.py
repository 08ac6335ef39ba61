"""Thousands-separator extension for Frase.

Resolves a comma between digit groups as a THOUSANDS_SEPARATOR so the
assembler merges ``1,000,000`` into a single NUMBER token whose normalized
form is ``1000000``. Enabled by default.

Pattern: a 1-3 digit run, a comma, then a run of exactly three digits.
Lists such as ``1, 2, 3`` and ``1,2`` are left alone.

Thread Safety:
This extension is stateless and thread-safe.

"""

from __future__ import annotations

from frase.extensions import register_extension
from frase.lexer.assembler import AssemblyRule
from frase.lexer.charsets import COMMA, Category
from frase.lexer.disambiguator import RoleRule, Window
from frase.tokens import PunctuationRole


def _thousands_separator(window: Window) -> PunctuationRole | None:
    prev = window.previous
    nxt = window.following
    if prev is None or nxt is None:
        return None
    if prev.category is not Category.DIGIT or nxt.category is not Category.DIGIT:
        return None
    if len(prev.text) <= 3 and len(nxt.text) == 3:
        return PunctuationRole.THOUSANDS_SEPARATOR
    return None


@register_extension("thousands")
class ThousandsExtension:
    """Extension resolving digit-group commas."""

    @property
    def name(self) -> str:
        return "thousands"

    def role_rules(self) -> dict[str, tuple[RoleRule, ...]]:
        return {COMMA: (_thousands_separator,)}

    def assembly_rules(self) -> tuple[AssemblyRule, ...]:
        """Merging is handled by the core number rule."""
        return ()
