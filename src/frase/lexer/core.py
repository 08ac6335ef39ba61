"""Lexer driving the scan -> disambiguate -> assemble -> segment pipeline.

Data flows strictly left to right. The scanner and disambiguator are lazy
generators; the assembler materializes the classified lexemes once so its
rules can index forward.

Complexity: O(n) in the length of the input.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; the only shared data are read-only rule tables.

"""

from __future__ import annotations

from collections.abc import Iterator

from frase.config import LexOptions, get_lex_options
from frase.errors import InvalidTextError
from frase.lexer.assembler import assemble
from frase.lexer.disambiguator import classify_lexemes
from frase.lexer.lexemes import ClassifiedLexeme, RawLexeme
from frase.lexer.rules import build_rule_set
from frase.lexer.scanner import scan
from frase.lexer.segmenter import segment
from frase.tokens import LexResult, Token
from frase.utils.logger import get_logger

logger = get_logger(__name__)


def validate_text(text: str | bytes) -> str:
    """Return ``text`` as a str of valid code points.

    ``bytes`` are decoded as strict UTF-8. Strings containing lone
    surrogates are rejected rather than repaired.

    Raises:
        InvalidTextError: If the text is not valid Unicode
        TypeError: If ``text`` is neither str nor bytes
    """
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidTextError("Input bytes are not valid UTF-8", offset=e.start) from e
    if not isinstance(text, str):
        msg = f"Expected str or bytes, got {type(text).__name__}"
        raise TypeError(msg)
    if text.isascii():
        return text
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidTextError("Input contains a lone surrogate", offset=e.start) from e
    return text


class Lexer:
    """Sentence lexer for one input text.

    Usage:
        >>> lexer = Lexer("Dr. Smith went home.")
        >>> result = lexer.lex()
        >>> [t.surface for t in result.tokens if t.kind.name == "WORD"]
        ['Dr', 'Smith', 'went', 'home']
        >>> len(result.sentences)
        1

    Each stage is also exposed on its own for debugging:
        >>> [lx.text for lx in Lexer("3.5").scan()]
        ['3', '.', '5']

    """

    __slots__ = ("_source", "_options", "_rules")

    def __init__(self, source: str | bytes, options: LexOptions | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Sentence text (bytes are decoded as UTF-8)
            options: Lexing options; the context's options when None

        Raises:
            InvalidTextError: If the source is not valid Unicode
        """
        self._source = validate_text(source)
        self._options = options if options is not None else get_lex_options()
        self._rules = build_rule_set(self._options.extensions)

    @property
    def source(self) -> str:
        return self._source

    @property
    def options(self) -> LexOptions:
        return self._options

    def scan(self) -> Iterator[RawLexeme]:
        """Raw lexemes, lazily."""
        return scan(self._source)

    def classify(self) -> Iterator[ClassifiedLexeme]:
        """Lexemes with resolved punctuation roles, lazily."""
        return classify_lexemes(
            self.scan(),
            abbreviations=self._options.abbreviations,
            rules=self._rules.role_rules,
        )

    def tokenize(self) -> list[Token]:
        """Assembled tokens, without sentence grouping."""
        return assemble(
            self.classify(),
            rules=self._rules.assembly_rules,
            lookup=self._options.lookup,
        )

    def lex(self) -> LexResult:
        """Run the full pipeline.

        Returns:
            LexResult with the token stream and its sentence grouping
        """
        tokens = self.tokenize()
        sentences = segment(tokens, attach_closers=self._options.attach_closers)
        logger.debug(
            "Lexed %d chars into %d tokens, %d sentences",
            len(self._source),
            len(tokens),
            len(sentences),
        )
        return LexResult(tokens=tuple(tokens), sentences=tuple(sentences))
