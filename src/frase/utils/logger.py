"""Package loggers for Frase.

Every module logs under the ``frase`` namespace, so a speech pipeline can
turn lexer diagnostics on with one call:

    >>> import logging
    >>> logging.getLogger("frase").setLevel(logging.DEBUG)

Frase logs at DEBUG only: a one-line summary per lex() call from
``frase.lexer.core`` and dictionary-lookup failures from
``frase.lexer.assembler``. The library never installs handlers.
"""

from __future__ import annotations

import logging

_ROOT = "frase"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``frase`` namespace.

    Args:
        name: Logger name (typically __name__); names outside the package
            get the ``frase.`` prefix

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("frase.lexer.core").name
        'frase.lexer.core'
        >>> get_logger("tts_frontend").name
        'frase.tts_frontend'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
