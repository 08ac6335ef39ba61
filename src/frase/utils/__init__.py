"""Utility modules for Frase.

Provides:
- logger: get_logger for logging
"""

from frase.utils.logger import get_logger

__all__ = [
    "get_logger",
]
