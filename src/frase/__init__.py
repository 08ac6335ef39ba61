"""
Frase — English sentence lexer for speech synthesis front ends

Turns raw sentence text into an ordered stream of typed tokens (words,
numbers, punctuation with resolved roles, whitespace) grouped into
sentences. Lossless: token surfaces concatenate back to the input.
Deterministic, O(n), and zero runtime dependencies.

Quick Start:
    >>> from frase import lex
    >>> result = lex("Dr. Smith paid 3.50 dollars.")
    >>> [t.surface for t in result.words()]
    ['Dr', 'Smith', 'paid', '3.50', 'dollars']
    >>> len(result.sentences)
    1

    >>> # Or keep options on a reusable lexer
    >>> from frase import LexOptions, SentenceLexer
    >>> lexer = SentenceLexer(LexOptions(extensions={"ordinals"}))
    >>> result = lexer("The 21st time.")

Dictionary lookup:
    >>> def lookup(word):
    ...     return {"cats": ("cat", "plural")}.get(word.lower())
    >>> lex("Cats nap.", LexOptions(lookup=lookup)).tokens[0].normalized
    'cat'

Installation:
    pip install frase              # Core lexer (zero deps)
    pip install frase[test]        # + pytest and hypothesis
"""

from collections.abc import Iterable
from time import perf_counter

from frase.config import (
    DEFAULT_ABBREVIATIONS,
    DEFAULT_EXTENSIONS,
    LexOptions,
    get_lex_options,
    lex_options_context,
    reset_lex_options,
    set_lex_options,
)
from frase.errors import ExtensionError, FraseError, InvalidTextError
from frase.extensions import BUILTIN_EXTENSIONS, LexerExtension, register_extension
from frase.lexer import Lexer
from frase.location import Span
from frase.profiling import LexAccumulator, get_lex_accumulator, profiled_lex
from frase.serialization import from_dict, from_json, to_dict, to_json
from frase.tokens import (
    LexResult,
    PunctuationMark,
    PunctuationRole,
    Sentence,
    Token,
    TokenKind,
)

__version__ = "0.1.0"


def lex(text: str | bytes, options: LexOptions | None = None) -> LexResult:
    """Lex sentence text into tokens and sentences.

    Never fails for valid Unicode text, including the empty string.

    Args:
        text: Input text (bytes are decoded as UTF-8)
        options: Lexing options; uses the options of the current context
            (see lex_options_context) when None

    Returns:
        LexResult with the token stream and sentence grouping

    Raises:
        InvalidTextError: If the text contains lone surrogates or invalid UTF-8
        TypeError: If text is neither str nor bytes

    Example:
        >>> result = lex("well-known 9-5 job")
        >>> [(t.kind.name, t.surface) for t in result.words()]
        [('WORD', 'well-known'), ('NUMBER', '9-5'), ('WORD', 'job')]
    """
    acc = get_lex_accumulator()
    if acc is None:
        return Lexer(text, options).lex()

    started = perf_counter()
    lexer = Lexer(text, options)
    result = lexer.lex()
    acc.record_lex(
        source_length=len(lexer.source),
        token_count=len(result.tokens),
        sentence_count=len(result.sentences),
        elapsed_ms=(perf_counter() - started) * 1000,
    )
    return result


class SentenceLexer:
    """Reusable lexer bound to one set of options.

    Usage:
        >>> lexer = SentenceLexer()
        >>> result = lexer("Hello, world!")
        >>> [t.surface for t in result.tokens]
        ['Hello', ',', ' ', 'world', '!']

        >>> results = lexer.lex_many(["One.", "Two."])

    Thread Safety:
        Holds only immutable options. Safe to use concurrently from
        different threads.

    """

    __slots__ = ("_options",)

    def __init__(self, options: LexOptions | None = None) -> None:
        """Initialize with options (the defaults when None)."""
        self._options = options if options is not None else LexOptions()

    @property
    def options(self) -> LexOptions:
        return self._options

    def __call__(self, text: str | bytes) -> LexResult:
        """Lex one text with this lexer's options."""
        return lex(text, self._options)

    def lex_many(self, texts: Iterable[str | bytes]) -> list[LexResult]:
        """Lex several texts with this lexer's options."""
        return [lex(text, self._options) for text in texts]


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "lex",
    "Lexer",
    "SentenceLexer",
    # Results
    "LexResult",
    "Sentence",
    "Token",
    "TokenKind",
    "PunctuationRole",
    "PunctuationMark",
    "Span",
    # Configuration (ContextVar-based)
    "LexOptions",
    "DEFAULT_ABBREVIATIONS",
    "DEFAULT_EXTENSIONS",
    "get_lex_options",
    "set_lex_options",
    "reset_lex_options",
    "lex_options_context",
    # Extensions
    "BUILTIN_EXTENSIONS",
    "LexerExtension",
    "register_extension",
    # Errors
    "FraseError",
    "InvalidTextError",
    "ExtensionError",
    # Profiling
    "LexAccumulator",
    "profiled_lex",
    "get_lex_accumulator",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
