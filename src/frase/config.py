"""ContextVar-based lexing options for Frase.

Options are an immutable object passed to lex(). When a call passes no
options, the options active in the current context are used instead, so
an application can configure lexing once per thread or task.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit options
    result = lex("Dr. Smith left.", LexOptions(extensions={"abbreviations"}))

    # Ambient options for a block of calls
    with lex_options_context(LexOptions(lookup=my_lookup)):
        result = lex("Cats sleep.")

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

# Lookup callback: surface form -> None | normalized | (normalized, pluralization hint)
Lookup = Callable[[str], Any]

# Abbreviation stems whose trailing period does not end a sentence.
# Stored lower-case; matched case-insensitively against the preceding word.
DEFAULT_ABBREVIATIONS: frozenset[str] = frozenset(
    {
        "mr",
        "mrs",
        "ms",
        "dr",
        "prof",
        "sr",
        "jr",
        "st",
        "vs",
        "etc",
        "inc",
        "ltd",
        "co",
        "corp",
        "dept",
        "approx",
        "mt",
        "ft",
        "gen",
        "gov",
        "rev",
        "sgt",
        "capt",
        "lt",
        "col",
        "fig",
        "vol",
    }
)

DEFAULT_EXTENSIONS: frozenset[str] = frozenset({"thousands"})


@dataclass(frozen=True, slots=True)
class LexOptions:
    """Immutable lexing options.

    Frozen dataclass ensures thread-safety (immutable after creation).
    Iterable arguments are normalized to frozensets on construction.

    Attributes:
        lookup: Optional dictionary callback consulted once per word token
        abbreviations: Known abbreviation stems, overriding the default list
            (None selects the default list)
        extensions: Names of enabled extensions ("all" enables every
            registered extension)
        attach_closers: Keep closing quotes and brackets that directly
            follow a sentence terminal in that sentence, and fold trailing
            whitespace into the last sentence

    Raises:
        ExtensionError: If an extension name is not registered
        TypeError: If abbreviations or extensions is a bare string

    """

    lookup: Lookup | None = None
    abbreviations: frozenset[str] = DEFAULT_ABBREVIATIONS
    extensions: frozenset[str] = field(default=DEFAULT_EXTENSIONS)
    attach_closers: bool = False

    def __post_init__(self) -> None:
        from frase.extensions import BUILTIN_EXTENSIONS, get_extension

        if self.abbreviations is None:
            abbreviations = DEFAULT_ABBREVIATIONS
        else:
            _reject_bare_string("abbreviations", self.abbreviations)
            abbreviations = frozenset(stem.lower() for stem in self.abbreviations)
        object.__setattr__(self, "abbreviations", abbreviations)

        _reject_bare_string("extensions", self.extensions)
        names = frozenset(self.extensions)
        if "all" in names:
            names = frozenset(BUILTIN_EXTENSIONS)
        for name in names:
            get_extension(name)  # raises ExtensionError on unknown names
        object.__setattr__(self, "extensions", names)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> LexOptions:
        """Create LexOptions from a dictionary.

        Useful when options come from an external source (YAML files,
        framework settings). Unknown keys are silently ignored.
        ``abbreviation_list`` is accepted as an alias for ``abbreviations``.

        Args:
            config_dict: Dictionary with option values. Keys should match
                LexOptions attribute names.

        Returns:
            New LexOptions instance with values from dict.

        Example:
            >>> options = LexOptions.from_dict({
            ...     "abbreviations": ["Mr", "Dr"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(options.abbreviations)
            ['dr', 'mr']

        """
        valid_fields = set(cls.__dataclass_fields__)
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "abbreviation_list" in config_dict and "abbreviations" not in filtered:
            filtered["abbreviations"] = config_dict["abbreviation_list"]
        return cls(**filtered)


def _reject_bare_string(name: str, value: object) -> None:
    # A str is iterable, but "Mr" would become the stems {"m", "r"}
    if isinstance(value, str):
        msg = f"{name} must be a collection of strings, not a str: {value!r}"
        raise TypeError(msg)


_DEFAULT_OPTIONS: LexOptions | None = None

_lex_options: ContextVar[LexOptions | None] = ContextVar("lex_options", default=None)


def _default_options() -> LexOptions:
    # Built on first use: validation needs the extension registry
    global _DEFAULT_OPTIONS
    if _DEFAULT_OPTIONS is None:
        _DEFAULT_OPTIONS = LexOptions()
    return _DEFAULT_OPTIONS


def get_lex_options() -> LexOptions:
    """Get the lexing options active in this context.

    Returns:
        The options set for this thread/context, or the defaults.

    """
    options = _lex_options.get()
    return options if options is not None else _default_options()


def set_lex_options(options: LexOptions) -> None:
    """Set lexing options for the current context.

    Args:
        options: LexOptions instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _lex_options.set(options)


def reset_lex_options() -> None:
    """Reset the current context to the default options."""
    _lex_options.set(None)


@contextmanager
def lex_options_context(options: LexOptions) -> Iterator[None]:
    """Context manager for temporary option changes.

    Args:
        options: LexOptions to use within the context.

    Yields:
        None

    Example:
        >>> with lex_options_context(LexOptions(extensions={"ordinals"})):
        ...     result = lex("the 21st century")
        >>> # Previous options restored here

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        options even if an exception is raised.

    """
    token = _lex_options.set(options)
    try:
        yield
    finally:
        _lex_options.reset(token)


__all__ = [
    "DEFAULT_ABBREVIATIONS",
    "DEFAULT_EXTENSIONS",
    "LexOptions",
    "Lookup",
    "get_lex_options",
    "lex_options_context",
    "reset_lex_options",
    "set_lex_options",
]
