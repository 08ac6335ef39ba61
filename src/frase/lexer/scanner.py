"""Single-pass scanner grouping characters into raw lexemes.

Letters, digits, whitespace and unclassifiable code points are grouped into
maximal runs. Punctuation and symbol characters always form a lexeme of
their own: multi-character punctuation such as ``...`` is merged later by
the assembler, so the scanner's decision stays context-free.

Whitespace is kept as lexemes so spans tile the input exactly.

Complexity: O(n), each character classified once.
"""

from __future__ import annotations

from collections.abc import Iterator

from frase.lexer.charsets import Category, classify
from frase.lexer.lexemes import RawLexeme
from frase.location import Span

# Categories that never form runs
_SINGLE_CHAR: frozenset[Category] = frozenset({Category.PUNCTUATION, Category.SYMBOL})


def scan(text: str) -> Iterator[RawLexeme]:
    """Scan text into raw lexemes, left to right.

    The returned iterator is lazy and not resumable; call scan() again to
    restart. Empty text yields nothing.

    Args:
        text: Input text

    Yields:
        RawLexeme objects whose spans tile ``text`` in order

    Example:
        >>> [lx.text for lx in scan("Hi, 42!")]
        ['Hi', ',', ' ', '42', '!']
    """
    text_len = len(text)
    if not text_len:
        return

    pos = 0
    category = classify(text[0])
    while pos < text_len:
        end = pos + 1
        next_category = category
        if category in _SINGLE_CHAR:
            if end < text_len:
                next_category = classify(text[end])
        else:
            while end < text_len:
                next_category = classify(text[end])
                if next_category is not category:
                    break
                end += 1

        yield RawLexeme(Span(pos, end), text[pos:end], category)
        pos = end
        category = next_category
