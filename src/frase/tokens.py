"""Token, Sentence and LexResult definitions for the Frase lexer.

The lexer turns raw sentence text into a stream of Token objects that a
speech synthesis front end can verbalize. Each Token carries a kind, the
verbatim surface text, a normalized form and the source span it covers.

Thread Safety:
Token, Sentence and LexResult are frozen (immutable) and safe to share
across threads. The enums are inherently immutable.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from frase.location import Span


class TokenKind(Enum):
    """Kinds of tokens handed to downstream consumers.

    Organized by origin:
    - Baseline kinds every input can produce
    - Catch-alls for symbols and unclassifiable code points
    - Web-text kinds (URLs, hashtags, mentions)
    - Extension kinds, emitted only when the owning extension is enabled

    Kinds with no registered recognition rule are reserved: declaring them
    here lets an extension add a rule without touching the core dispatch.

    """

    # Baseline
    WORD = auto()
    NUMBER = auto()
    PUNCTUATION = auto()
    WHITESPACE = auto()

    # Catch-alls
    SYMBOL = auto()  # $, +, emoji without an extension
    UNKNOWN = auto()  # control and format characters

    # Web text
    URL = auto()  # https://example.com/path
    HASHTAG = auto()  # #topic
    MENTION = auto()  # @user

    # Extensions
    ABBREVIATION = auto()  # Dr.
    ACRONYM = auto()  # U.S.A.
    ORDINAL = auto()  # 21st
    HYPHENATED_COMPOUND = auto()  # well-known

    # Reserved
    DATE = auto()
    TIME = auto()
    DURATION = auto()
    CURRENCY = auto()
    RATIO = auto()
    EMOJI = auto()


class PunctuationRole(Enum):
    """Resolved function of a punctuation mark in context."""

    SENTENCE_END = auto()
    ABBREVIATION_MARK = auto()  # Dr.
    DECIMAL_POINT = auto()  # 3.50
    THOUSANDS_SEPARATOR = auto()  # 1,000
    HYPHEN_JOINER = auto()  # well-known
    HYPHEN_RANGE = auto()  # 9-5
    QUOTE_OPEN = auto()
    QUOTE_CLOSE = auto()
    APOSTROPHE_CONTRACTION = auto()  # don't
    GENERIC = auto()


class PunctuationMark(Enum):
    """Which punctuation mark a PUNCTUATION token is, independent of role."""

    COLON = auto()
    COMMA = auto()
    DASH = auto()
    EXCLAMATION = auto()
    PERIOD = auto()
    QUESTION = auto()
    SEMICOLON = auto()
    ELLIPSIS = auto()
    QUOTE = auto()
    APOSTROPHE = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    OTHER = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind
        surface: Verbatim text from the input
        normalized: Form a verbalizer should work from (lower-cased words,
            separator-free numbers, lookup results)
        span: Source offsets covered by the token
        role: Resolved punctuation role; set only for PUNCTUATION tokens
        mark: Punctuation mark; set only for PUNCTUATION tokens
        hint: Pluralization hint returned by a lookup callback, if any

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenKind
    surface: str
    normalized: str
    span: Span
    role: PunctuationRole | None = None
    mark: PunctuationMark | None = None
    hint: str | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.surface
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.span})"

    @property
    def is_sentence_end(self) -> bool:
        return self.role is PunctuationRole.SENTENCE_END


@dataclass(frozen=True, slots=True)
class Sentence:
    """A run of tokens closed by a sentence terminal.

    Attributes:
        tokens: Indices into ``LexResult.tokens``, in order
        terminal: Index of the token that ended the sentence, or None for
            trailing text with no terminal

    """

    tokens: tuple[int, ...]
    terminal: int | None = None


@dataclass(frozen=True, slots=True)
class LexResult:
    """Complete output of one lexing call.

    Attributes:
        tokens: Every token, in source order. Their surfaces concatenate
            back to the input text.
        sentences: Sentence grouping over ``tokens``

    """

    tokens: tuple[Token, ...] = ()
    sentences: tuple[Sentence, ...] = ()

    @property
    def text(self) -> str:
        """Reconstruct the input text from token surfaces."""
        return "".join(token.surface for token in self.tokens)

    def sentence_tokens(self, sentence: Sentence) -> tuple[Token, ...]:
        """Resolve a sentence's token indices to Token objects."""
        return tuple(self.tokens[i] for i in sentence.tokens)

    def sentence_text(self, sentence: Sentence) -> str:
        """Verbatim text of a sentence, including its whitespace."""
        return "".join(self.tokens[i].surface for i in sentence.tokens)

    def words(self) -> tuple[Token, ...]:
        """Every token that is not whitespace or punctuation."""
        return tuple(
            t
            for t in self.tokens
            if t.kind not in (TokenKind.WHITESPACE, TokenKind.PUNCTUATION)
        )
