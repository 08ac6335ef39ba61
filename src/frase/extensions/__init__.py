"""Extension system for the Frase lexer.

Extensions add token kinds without touching the core pipeline. Each one
owns its recognition logic and hooks into two extension points:

1. Role rules (disambiguator):
   - Keyed by punctuation character
   - Run after the core precedence rules, before the fallbacks

2. Assembly rules (assembler):
   - Tried before the core assembly rules at every position
   - Claim a lexeme range and name its TokenKind

Built-in extensions:
- thousands: ``1,000,000`` comma separators (enabled by default)
- abbreviations: ``Dr.`` ABBREVIATION and ``U.S.A.`` ACRONYM tokens
- ordinals: ``21st`` ORDINAL tokens
- compounds: ``well-known`` HYPHENATED_COMPOUND tokens

Usage:
    >>> from frase import LexOptions, lex
    >>> result = lex("the 21st", LexOptions(extensions={"ordinals"}))

Thread Safety:
All extensions are stateless. Multiple threads can use the same extension
instances concurrently.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from frase.errors import ExtensionError

if TYPE_CHECKING:
    from frase.lexer.assembler import AssemblyRule
    from frase.lexer.disambiguator import RoleRule

__all__ = [
    "BUILTIN_EXTENSIONS",
    "LexerExtension",
    "get_extension",
    "register_extension",
]


@runtime_checkable
class LexerExtension(Protocol):
    """Protocol for Frase extensions.

    Thread Safety:
        Extensions must be stateless. Rules receive everything they need
        as arguments.

    """

    @property
    def name(self) -> str:
        """Extension identifier."""
        ...

    def role_rules(self) -> Mapping[str, Sequence[RoleRule]]:
        """Role rules per punctuation character."""
        ...

    def assembly_rules(self) -> Sequence[AssemblyRule]:
        """Assembly rules, in the order they should be tried."""
        ...


# Registry of built-in extensions
BUILTIN_EXTENSIONS: dict[str, type[LexerExtension]] = {}


def register_extension(
    name: str,
) -> Callable[[type[LexerExtension]], type[LexerExtension]]:
    """Decorator to register an extension.

    Args:
        name: Extension name for lookup

    Returns:
        Decorator function that registers and returns the class

    Usage:
        @register_extension("ordinals")
        class OrdinalsExtension:
            ...

    """

    def decorator(cls: type[LexerExtension]) -> type[LexerExtension]:
        BUILTIN_EXTENSIONS[name] = cls
        return cls

    return decorator


def get_extension(name: str) -> LexerExtension:
    """Get an extension instance by name.

    Args:
        name: Extension name (e.g., "ordinals")

    Returns:
        Extension instance

    Raises:
        ExtensionError: If extension name is not recognized

    """
    if name not in BUILTIN_EXTENSIONS:
        available = ", ".join(sorted(BUILTIN_EXTENSIONS))
        raise ExtensionError(name, f"unknown extension. Available: {available}")
    return BUILTIN_EXTENSIONS[name]()


# Import built-in extensions to register them
# These imports trigger the @register_extension decorators
from frase.extensions.abbreviations import AbbreviationsExtension  # noqa: E402
from frase.extensions.compounds import CompoundsExtension  # noqa: E402
from frase.extensions.ordinals import OrdinalsExtension  # noqa: E402
from frase.extensions.thousands import ThousandsExtension  # noqa: E402

__all__ += [
    "AbbreviationsExtension",
    "CompoundsExtension",
    "OrdinalsExtension",
    "ThousandsExtension",
]
