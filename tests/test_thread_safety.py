"""Thread safety tests for Frase.

Lexing holds no shared mutable state: rule tables are read-only and
options live in ContextVars. These tests use real threads to check that
concurrent calls agree with sequential ones and that per-thread options
do not leak.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from frase import LexOptions, SentenceLexer, get_lex_options, lex, set_lex_options
from frase.tokens import TokenKind

TEXTS = [
    "Dr. Smith went home.",
    "It costs 3.50, or 1,000 in bulk.",
    "Wait... what? No!",
    "The U.S.A. won its 2nd well-known title.",
    '“Don\'t,” she said (quietly).',
]


class TestConcurrentLexing:
    def test_concurrent_matches_sequential(self) -> None:
        expected = [lex(text) for text in TEXTS]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lex, TEXTS * 20))
        assert results == expected * 20

    def test_shared_sentence_lexer(self) -> None:
        lexer = SentenceLexer(LexOptions(extensions={"all"}))
        expected = [lexer(text) for text in TEXTS]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lexer, TEXTS * 20))
        assert results == expected * 20

    def test_different_extensions_per_thread(self) -> None:
        names = ["thousands", "abbreviations", "ordinals", "compounds", "all"]
        barrier = threading.Barrier(len(names))
        errors: list[str] = []

        def run(name: str) -> None:
            barrier.wait()
            options = LexOptions(extensions={name})
            for _ in range(50):
                result = lex("The 2nd Dr. visit cost 1,000.", options)
                if result.text != "The 2nd Dr. visit cost 1,000.":
                    errors.append(name)

        threads = [threading.Thread(target=run, args=(name,)) for name in names]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert errors == []


class TestContextIsolation:
    def test_options_do_not_leak_between_threads(self) -> None:
        seen: dict[str, object] = {}
        ready = threading.Event()
        done = threading.Event()

        def configure() -> None:
            set_lex_options(LexOptions(extensions={"ordinals"}))
            ready.set()
            done.wait(timeout=5)
            seen["configured"] = lex("21st").tokens[0].kind

        def observe() -> None:
            ready.wait(timeout=5)
            seen["other"] = lex("21st").tokens[0].kind
            seen["other_options"] = get_lex_options()
            done.set()

        threads = [threading.Thread(target=configure), threading.Thread(target=observe)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert seen["configured"] is TokenKind.ORDINAL
        assert seen["other"] is TokenKind.NUMBER
        assert seen["other_options"] == LexOptions()
