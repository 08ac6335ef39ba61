"""Tests for Frase utility modules."""

import logging

from frase import LexOptions, lex
from frase.utils.logger import get_logger


class TestGetLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "frase.mymodule"

    def test_package_names_unchanged(self) -> None:
        assert get_logger("frase").name == "frase"
        assert get_logger("frase.lexer.core").name == "frase.lexer.core"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_same_logger_for_same_name(self) -> None:
        assert get_logger("x") is get_logger("frase.x")

    def test_lookalike_name_prefixed(self) -> None:
        assert get_logger("fraser.voice").name == "frase.fraser.voice"


class TestLibraryLogging:
    def test_lex_logs_summary_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="frase"):
            lex("Hi. Bye.")
        assert "Lexed 8 chars into 5 tokens, 2 sentences" in caplog.text

    def test_lookup_failure_logged(self, caplog) -> None:
        def lookup(word: str) -> str:
            raise RuntimeError("dictionary offline")

        with caplog.at_level(logging.DEBUG, logger="frase"):
            result = lex("Cats", LexOptions(lookup=lookup))
        assert result.tokens[0].normalized == "cats"
        assert "Lookup failed for 'Cats'" in caplog.text

    def test_silent_by_default(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="frase"):
            lex("Hi.")
        assert caplog.records == []
