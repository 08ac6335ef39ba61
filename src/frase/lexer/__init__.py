"""Lexing pipeline for English sentence text.

This package turns raw text into typed tokens in four linear stages.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer and the stage functions
├── core.py              # Lexer class (pipeline driver, input validation)
├── charsets.py          # Category, classify(), punctuation character sets
├── lexemes.py           # RawLexeme, ClassifiedLexeme
├── scanner.py           # scan(): characters -> raw lexemes
├── disambiguator.py     # disambiguate(): punctuation roles
├── assembler.py         # assemble(): lexemes -> tokens
├── segmenter.py         # segment(): tokens -> sentences
└── rules.py             # RuleSet: core rules + extension rules

Usage:
    >>> from frase.lexer import Lexer
    >>> for token in Lexer("Don't stop.").tokenize():
    ...     print(token)
Token(WORD, "Don't", 0:5)
Token(WHITESPACE, ' ', 5:6)
Token(WORD, 'stop', 6:10)
Token(PUNCTUATION, '.', 10:11)

"""

from frase.lexer.assembler import assemble
from frase.lexer.charsets import Category, classify
from frase.lexer.core import Lexer
from frase.lexer.disambiguator import classify_lexemes, disambiguate
from frase.lexer.lexemes import ClassifiedLexeme, RawLexeme
from frase.lexer.scanner import scan
from frase.lexer.segmenter import segment

__all__ = [
    "Category",
    "ClassifiedLexeme",
    "Lexer",
    "RawLexeme",
    "assemble",
    "classify",
    "classify_lexemes",
    "disambiguate",
    "scan",
    "segment",
]
