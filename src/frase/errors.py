"""Exception classes for Frase.

The lexer is total over natural-language text: ordinary malformed input
(unterminated quotes, stray symbols, empty strings) never raises. The
exceptions here cover caller contract violations only.
"""

from __future__ import annotations


class FraseError(Exception):
    """Base exception for all Frase errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidTextError(FraseError, ValueError):
    """Input text is not a valid sequence of Unicode code points.

    Raised for strings containing lone surrogates and for ``bytes`` input
    that does not decode as UTF-8. The lexer never guesses at byte-level
    recovery.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize with optional offset of the first invalid position.

        Args:
            message: Error description
            offset: Offset of the offending code point or byte (0-indexed)
        """
        self.message = message
        self.offset = offset

        location = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"{message}{location}")


class ExtensionError(FraseError):
    """Error in extension lookup or configuration.

    Raised when options name an extension that is not registered.
    """

    def __init__(self, extension_name: str, message: str) -> None:
        """Initialize extension error.

        Args:
            extension_name: Name of the failing extension
            message: Description of the error
        """
        self.extension_name = extension_name
        super().__init__(f"Extension '{extension_name}': {message}")
