"""Token assembly: merge classified lexemes into semantic tokens.

A single forward pass over the classified lexemes. At each position the
assembly rules are tried in order; the first match consumes one or more
lexemes and produces one Token. Positions no rule claims become one token
per lexeme, with the kind following the lexeme's category.

Core merges:
- Numbers: ``3.50``, ``1,000,000``, ranges ``9-5``
- Word chains: contractions ``don't`` and hyphen joins ``well-known``
- Period runs: ``...``
- Web text: URLs, ``#hashtags``, ``@mentions``

Rules only ever move forward and consume what they inspect, so the pass
stays linear on adversarial input.

Thread Safety:
All functions are pure apart from the caller-supplied lookup callback.

"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace

from frase.config import Lookup
from frase.lexer.charsets import (
    ELLIPSIS,
    HANDLE_JOINERS,
    PERIOD,
    Category,
    mark_for,
)
from frase.lexer.lexemes import ClassifiedLexeme
from frase.tokens import PunctuationMark, PunctuationRole, Token, TokenKind
from frase.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Assembly:
    """Result of a matching assembly rule.

    Attributes:
        end: Index one past the last consumed lexeme
        kind: Kind of the assembled token
        normalized: Normalized form; None selects the default for ``kind``
        role: Role carried by the token (punctuation merges only)
        mark: Punctuation mark (punctuation merges only)

    """

    end: int
    kind: TokenKind
    normalized: str | None = None
    role: PunctuationRole | None = None
    mark: PunctuationMark | None = None


AssemblyRule = Callable[[Sequence[ClassifiedLexeme], int], Assembly | None]

_CATEGORY_KINDS: dict[Category, TokenKind] = {
    Category.LETTER: TokenKind.WORD,
    Category.DIGIT: TokenKind.NUMBER,
    Category.PUNCTUATION: TokenKind.PUNCTUATION,
    Category.WHITESPACE: TokenKind.WHITESPACE,
    Category.SYMBOL: TokenKind.SYMBOL,
    Category.OTHER: TokenKind.UNKNOWN,
}

# Kinds the lookup callback is consulted for
LOOKUP_KINDS: frozenset[TokenKind] = frozenset({TokenKind.WORD, TokenKind.HYPHENATED_COMPOUND})

# Roles only meaningful inside a NUMBER token
_NUMBER_INTERNAL: frozenset[PunctuationRole] = frozenset(
    {PunctuationRole.DECIMAL_POINT, PunctuationRole.THOUSANDS_SEPARATOR}
)

_WORD_LINKS: frozenset[PunctuationRole] = frozenset(
    {PunctuationRole.HYPHEN_JOINER, PunctuationRole.APOSTROPHE_CONTRACTION}
)

# Punctuation a URL gives back when it ends a clause: "see https://x.org."
_URL_TRAILING: frozenset[str] = frozenset(".,;:!?)]}\"'’”»")
_URL_SCHEMES: frozenset[str] = frozenset({"http", "https"})


# =========================================================================
# Helpers shared with extensions
# =========================================================================


def canonical_digits(text: str) -> str:
    """Map any Unicode decimal digits in ``text`` to ASCII digits."""
    if text.isascii():
        return text
    return "".join(str(unicodedata.decimal(c)) if c.isdecimal() else c for c in text)


def number_end(lexemes: Sequence[ClassifiedLexeme], index: int) -> int | None:
    """Find the end of a number starting at ``index``.

    Grammar: digits (THOUSANDS_SEPARATOR 3-digits)* (DECIMAL_POINT digits)?

    Returns:
        Index one past the number, or None if ``index`` is not a digit run
    """
    count = len(lexemes)
    if index >= count or lexemes[index].category is not Category.DIGIT:
        return None
    end = index + 1
    while (
        end + 1 < count
        and lexemes[end].role is PunctuationRole.THOUSANDS_SEPARATOR
        and lexemes[end + 1].category is Category.DIGIT
        and len(lexemes[end + 1].text) == 3
    ):
        end += 2
    if (
        end + 1 < count
        and lexemes[end].role is PunctuationRole.DECIMAL_POINT
        and lexemes[end + 1].category is Category.DIGIT
    ):
        end += 2
    return end


def normalize_number(lexemes: Iterable[ClassifiedLexeme]) -> str:
    """Canonical decimal form: separators dropped, ASCII digits, ``.`` point."""
    parts: list[str] = []
    for lexeme in lexemes:
        if lexeme.category is Category.DIGIT:
            parts.append(canonical_digits(lexeme.text))
        elif lexeme.role is PunctuationRole.DECIMAL_POINT:
            parts.append(".")
        elif lexeme.role is PunctuationRole.HYPHEN_RANGE:
            parts.append("-")
        # thousands separators are dropped
    return "".join(parts)


def word_chain_end(lexemes: Sequence[ClassifiedLexeme], index: int) -> tuple[int, bool]:
    """Find the end of a letter run chained by joiners and contractions.

    Returns:
        (end index, whether any hyphen joiner was consumed)
    """
    count = len(lexemes)
    end = index + 1
    joined = False
    while (
        end + 1 < count
        and lexemes[end].role in _WORD_LINKS
        and lexemes[end + 1].category is Category.LETTER
    ):
        if lexemes[end].role is PunctuationRole.HYPHEN_JOINER:
            joined = True
        end += 2
    return end, joined


def _is_word_char(lexeme: ClassifiedLexeme) -> bool:
    return lexeme.category is Category.LETTER or lexeme.category is Category.DIGIT


# =========================================================================
# Core rules
# =========================================================================


def _url(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
    count = len(lexemes)
    start = lexemes[index]
    if start.category is not Category.LETTER or start.text.lower() not in _URL_SCHEMES:
        return None
    if index + 4 > count or "".join(lx.text for lx in lexemes[index + 1 : index + 4]) != "://":
        return None
    end = index + 4
    while end < count and lexemes[end].category is not Category.WHITESPACE:
        end += 1
    while end > index + 4 and lexemes[end - 1].text in _URL_TRAILING:
        end -= 1
    if end == index + 4:
        return None
    return Assembly(end, TokenKind.URL)


def _handle(sigil: str, kind: TokenKind) -> AssemblyRule:
    """Build a rule for ``#tag`` / ``@name`` style handles."""

    def rule(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
        count = len(lexemes)
        if lexemes[index].text != sigil or index + 1 >= count:
            return None
        if index > 0 and _is_word_char(lexemes[index - 1]):
            return None  # C#, user@example.com
        if not _is_word_char(lexemes[index + 1]):
            return None
        end = index + 2
        while end < count:
            lexeme = lexemes[end]
            if _is_word_char(lexeme):
                end += 1
            elif (
                lexeme.text in HANDLE_JOINERS
                and end + 1 < count
                and _is_word_char(lexemes[end + 1])
            ):
                end += 2
            else:
                break
        return Assembly(end, kind)

    return rule


def _number(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
    end = number_end(lexemes, index)
    if end is None:
        return None
    if end < len(lexemes) and lexemes[end].role is PunctuationRole.HYPHEN_RANGE:
        range_end = number_end(lexemes, end + 1)
        if range_end is not None:
            end = range_end
    return Assembly(end, TokenKind.NUMBER, normalize_number(lexemes[index:end]))


def _word(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
    if lexemes[index].category is not Category.LETTER:
        return None
    end, _ = word_chain_end(lexemes, index)
    return Assembly(end, TokenKind.WORD)


def _period_run(lexemes: Sequence[ClassifiedLexeme], index: int) -> Assembly | None:
    count = len(lexemes)
    end = index
    while end < count and lexemes[end].text == PERIOD:
        end += 1
    if end - index < 2:
        return None
    return Assembly(
        end,
        TokenKind.PUNCTUATION,
        "...",
        role=lexemes[end - 1].role,
        mark=PunctuationMark.ELLIPSIS,
    )


CORE_ASSEMBLY_RULES: tuple[AssemblyRule, ...] = (
    _url,
    _handle("#", TokenKind.HASHTAG),
    _handle("@", TokenKind.MENTION),
    _number,
    _word,
    _period_run,
)


# =========================================================================
# Token construction
# =========================================================================


def _single(lexeme: ClassifiedLexeme, index: int) -> Assembly:
    kind = _CATEGORY_KINDS[lexeme.category]
    if kind is not TokenKind.PUNCTUATION:
        return Assembly(index + 1, kind)
    role = lexeme.role
    if role in _NUMBER_INTERNAL:
        # Separator left after a complete number: the second "." of "1.2.3"
        role = PunctuationRole.GENERIC
    mark = mark_for(lexeme.text)
    if mark is PunctuationMark.APOSTROPHE and role in (
        PunctuationRole.QUOTE_OPEN,
        PunctuationRole.QUOTE_CLOSE,
    ):
        mark = PunctuationMark.QUOTE
    return Assembly(index + 1, kind, role=role, mark=mark)


def _default_normalized(kind: TokenKind, surface: str) -> str:
    if kind is TokenKind.NUMBER:
        return canonical_digits(surface)
    if kind is TokenKind.PUNCTUATION:
        return "..." if surface == ELLIPSIS else surface
    if kind in (TokenKind.WHITESPACE, TokenKind.SYMBOL, TokenKind.UNKNOWN):
        return surface
    return surface.lower()


def _coerce_lookup_result(result: object) -> tuple[str | None, str | None]:
    """Accept ``None``, ``str`` or ``(str, hint)`` lookup results."""
    if isinstance(result, str):
        return (result or None), None
    if isinstance(result, tuple) and len(result) == 2 and isinstance(result[0], str):
        hint = result[1] if isinstance(result[1], str) else None
        return (result[0] or None), hint
    return None, None


def apply_lookup(token: Token, lookup: Lookup) -> Token:
    """Enrich a word token from the lookup callback.

    Best-effort: an exception or a miss leaves the token unchanged.
    """
    try:
        result = lookup(token.surface)
    except Exception:
        logger.debug(
            "Lookup failed for %r; using default normalization", token.surface, exc_info=True
        )
        return token
    normalized, hint = _coerce_lookup_result(result)
    if normalized is None:
        return token
    return replace(token, normalized=normalized, hint=hint)


def assemble(
    lexemes: Iterable[ClassifiedLexeme],
    *,
    rules: Sequence[AssemblyRule] = CORE_ASSEMBLY_RULES,
    lookup: Lookup | None = None,
) -> list[Token]:
    """Assemble classified lexemes into tokens.

    Args:
        lexemes: Classified lexemes in source order
        rules: Assembly rules, tried in order at each position
        lookup: Optional dictionary callback for word tokens

    Returns:
        Tokens whose spans tile the lexemes' spans exactly

    Example:
        >>> tokens = assemble(classify_lexemes(scan("3.50 don't")))
        >>> [(t.kind.name, t.surface) for t in tokens]
        [('NUMBER', '3.50'), ('WHITESPACE', ' '), ('WORD', "don't")]
    """
    items = lexemes if isinstance(lexemes, Sequence) else tuple(lexemes)
    count = len(items)
    tokens: list[Token] = []
    index = 0
    while index < count:
        match: Assembly | None = None
        for rule in rules:
            match = rule(items, index)
            if match is not None:
                break
        if match is None or match.end <= index:
            match = _single(items[index], index)

        first = items[index]
        last = items[match.end - 1]
        surface = "".join(lx.text for lx in items[index : match.end])
        normalized = match.normalized
        if normalized is None:
            normalized = _default_normalized(match.kind, surface)
        token = Token(
            kind=match.kind,
            surface=surface,
            normalized=normalized,
            span=first.span.span_to(last.span),
            role=match.role,
            mark=match.mark,
        )
        if lookup is not None and token.kind in LOOKUP_KINDS:
            token = apply_lookup(token, lookup)
        tokens.append(token)
        index = match.end
    return tokens
