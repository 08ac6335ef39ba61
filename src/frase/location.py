"""Source span tracking for lexemes and tokens.

Provides the Span dataclass: a half-open range of code-point offsets into
the input text. Spans of consecutive tokens abut exactly, which is what
makes the token stream a lossless rendering of the input.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` range of code-point offsets.

    Attributes:
        start: Offset of the first code point (0-indexed)
        end: Offset one past the last code point

    Examples:
        >>> span = Span(4, 9)
        >>> span.slice("The quick fox")
        'quick'
        >>> len(span)
        5

    """

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        """Format as ``start:end`` for debugging output."""
        return f"{self.start}:{self.end}"

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this span."""
        return text[self.start : self.end]

    def span_to(self, end: Span) -> Span:
        """Create a new span from this span's start to ``end``'s end.

        Args:
            end: Ending span

        Returns:
            New Span covering both spans and everything between them
        """
        return Span(self.start, end.end)

    def abuts(self, other: Span) -> bool:
        """True if ``other`` starts exactly where this span ends."""
        return self.end == other.start
