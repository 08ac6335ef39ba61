"""Sentence segmentation over the assembled token stream.

A new sentence starts after every token whose role is SENTENCE_END, so
``Really?!`` ends two sentences. Whatever follows the last terminal forms
a final sentence with no terminal.

With ``attach_closers`` a closing quote or bracket directly after a
terminal (``."`` or ``.)``) stays in the terminal's sentence, and a
remainder made only of whitespace is folded into the last sentence.
Stacked terminals still split in that mode.
"""

from __future__ import annotations

from collections.abc import Sequence

from frase.tokens import PunctuationMark, PunctuationRole, Sentence, Token, TokenKind


def _is_closer(token: Token) -> bool:
    return token.role is PunctuationRole.QUOTE_CLOSE or token.mark is PunctuationMark.CLOSE_BRACKET


def segment(tokens: Sequence[Token], *, attach_closers: bool = False) -> list[Sentence]:
    """Group tokens into sentences.

    Args:
        tokens: Assembled tokens in source order
        attach_closers: Keep closing quotes and brackets with the sentence
            they close and fold trailing whitespace into the last sentence

    Returns:
        Sentences in order; empty for an empty token stream

    Example:
        >>> result = lex("Hi there. Bye!")
        >>> [result.sentence_text(s) for s in result.sentences]
        ['Hi there.', ' Bye!']
    """
    sentences: list[Sentence] = []
    current: list[int] = []
    terminal: int | None = None

    for index, token in enumerate(tokens):
        if terminal is not None:
            if attach_closers and _is_closer(token):
                current.append(index)
                continue
            sentences.append(Sentence(tuple(current), terminal))
            current = []
            terminal = None

        current.append(index)
        if token.role is PunctuationRole.SENTENCE_END:
            terminal = index

    if not current:
        return sentences

    if (
        attach_closers
        and terminal is None
        and sentences
        and all(tokens[i].kind is TokenKind.WHITESPACE for i in current)
    ):
        last = sentences[-1]
        sentences[-1] = Sentence(last.tokens + tuple(current), last.terminal)
    else:
        sentences.append(Sentence(tuple(current), terminal))
    return sentences
