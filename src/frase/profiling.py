"""Opt-in profiling for lexing.

Wrap a batch of lex() calls in profiled_lex() to find out where a speech
pipeline spends its front-end time. While a LexAccumulator is active each
call adds its input size, output size and pipeline time to it.

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from frase import lex
    from frase.profiling import profiled_lex

    with profiled_lex() as metrics:
        for line in script:
            lex(line)

    print(metrics.summary())
    # {"lex_calls": 120, "lex_ms": 3.1, "chars_per_ms": 2900.0, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Metrics collected across lex() calls.

    Attributes:
        start_time: When profiling started (perf_counter seconds).
        lex_calls: Number of lex() calls recorded.
        source_length: Total characters lexed.
        token_count: Total tokens produced.
        sentence_count: Total sentences produced.
        lex_ms: Time spent inside the pipeline, in milliseconds.
        longest_source: Length of the longest single input.

    """

    start_time: float = field(default_factory=perf_counter)
    lex_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    sentence_count: int = 0
    lex_ms: float = 0.0
    longest_source: int = 0

    def record_lex(
        self,
        source_length: int,
        token_count: int,
        sentence_count: int,
        elapsed_ms: float = 0.0,
    ) -> None:
        """Add one lex() call to the totals."""
        self.lex_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.sentence_count += sentence_count
        self.lex_ms += elapsed_ms
        self.longest_source = max(self.longest_source, source_length)

    @property
    def total_duration_ms(self) -> float:
        """Wall time since profiling started, in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    @property
    def chars_per_ms(self) -> float:
        """Pipeline throughput; 0.0 before any timed call."""
        if self.lex_ms <= 0:
            return 0.0
        return self.source_length / self.lex_ms

    def summary(self) -> dict[str, Any]:
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "lex_ms": round(self.lex_ms, 3),
            "lex_calls": self.lex_calls,
            "source_length": self.source_length,
            "longest_source": self.longest_source,
            "token_count": self.token_count,
            "sentence_count": self.sentence_count,
            "chars_per_ms": round(self.chars_per_ms, 1),
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar("lex_accumulator", default=None)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get the active accumulator (None if profiling is off)."""
    return _accumulator.get()


@contextmanager
def profiled_lex() -> Iterator[LexAccumulator]:
    """Collect metrics for every lex() call in the with block.

    Nested blocks get their own accumulator; calls inside an inner block
    are not added to the outer one.

    Yields:
        The LexAccumulator being filled.

    """
    acc = LexAccumulator()
    reset_token = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(reset_token)
