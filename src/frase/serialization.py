"""LexResult serialization — JSON round-trip for lexer output.

Converts a LexResult to and from JSON-compatible dicts so it can be handed
to a speech synthesis pipeline running in another process. Enums are
written by name and spans as ``[start, end]`` pairs.

All output is deterministic (sorted keys).

Example:
    from frase import lex
    from frase.serialization import to_json, from_json

    result = lex("Don't stop.")
    restored = from_json(to_json(result))
    assert restored == result

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from frase.location import Span
from frase.tokens import (
    LexResult,
    PunctuationMark,
    PunctuationRole,
    Sentence,
    Token,
    TokenKind,
)

_RESULT_TYPE = "LexResult"


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a Token to a JSON-compatible dict."""
    return {
        "kind": token.kind.name,
        "surface": token.surface,
        "normalized": token.normalized,
        "span": [token.span.start, token.span.end],
        "role": token.role.name if token.role is not None else None,
        "mark": token.mark.name if token.mark is not None else None,
        "hint": token.hint,
    }


def token_from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a Token from a dict produced by token_to_dict().

    Raises:
        ValueError: If a field is missing or names an unknown enum member
    """
    try:
        start, end = data["span"]
        role = data.get("role")
        mark = data.get("mark")
        return Token(
            kind=TokenKind[data["kind"]],
            surface=data["surface"],
            normalized=data["normalized"],
            span=Span(start, end),
            role=PunctuationRole[role] if role is not None else None,
            mark=PunctuationMark[mark] if mark is not None else None,
            hint=data.get("hint"),
        )
    except KeyError as e:
        msg = f"Invalid serialized token: missing or unknown {e}"
        raise ValueError(msg) from e


def sentence_from_dict(data: dict[str, Any]) -> Sentence:
    """Reconstruct a Sentence from its serialized form.

    Raises:
        ValueError: If the token index list is missing or not a list
    """
    try:
        indices = data["tokens"]
    except KeyError as e:
        msg = f"Invalid serialized sentence: missing {e}"
        raise ValueError(msg) from e
    if not isinstance(indices, list):
        msg = f"Invalid serialized sentence: tokens must be a list, got {type(indices).__name__}"
        raise ValueError(msg)
    return Sentence(tokens=tuple(indices), terminal=data.get("terminal"))


def to_dict(result: LexResult) -> dict[str, Any]:
    """Convert a LexResult to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for validation on load.

    Args:
        result: Lexer output.

    Returns:
        Dict with ``_type``, ``tokens`` and ``sentences``.

    """
    return {
        "_type": _RESULT_TYPE,
        "tokens": [token_to_dict(token) for token in result.tokens],
        "sentences": [
            {"tokens": list(sentence.tokens), "terminal": sentence.terminal}
            for sentence in result.sentences
        ],
    }


def from_dict(data: dict[str, Any]) -> LexResult:
    """Reconstruct a LexResult from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        LexResult equal to the one serialized.

    Raises:
        ValueError: If ``_type`` is missing or wrong, or a field is invalid.

    """
    type_name = data.get("_type")
    if type_name != _RESULT_TYPE:
        msg = f"Expected {_RESULT_TYPE!r}, got {type_name!r}"
        raise ValueError(msg)

    tokens = tuple(token_from_dict(item) for item in data.get("tokens", ()))
    sentences = tuple(sentence_from_dict(item) for item in data.get("sentences", ()))
    return LexResult(tokens=tokens, sentences=sentences)


def to_json(result: LexResult, *, indent: int | None = None) -> str:
    """Serialize a LexResult to a JSON string.

    Args:
        result: Lexer output.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string with sorted keys.

    """
    return json.dumps(to_dict(result), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> LexResult:
    """Deserialize a LexResult from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a LexResult.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
