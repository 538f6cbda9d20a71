"""
Lightweight input validation.

Two questions live here:
  - "Is this key a letter the player may type?"  -> is_letter
  - "Is this word an acceptable guess?"           -> validate_guess

Duplicate-guess checks need the session history and live in packages.game.rules.
"""

import string
from typing import Container


def is_letter(token: str) -> bool:
    """True for a single ASCII letter a-z, either case."""
    return isinstance(token, str) and len(token) == 1 and token.lower() in string.ascii_lowercase


def validate_guess(word: str, allowed: Container[str], N: int) -> bool:
    """
    Return True if `word` has the right shape and appears in `allowed`.

    Args:
      word    : proposed guess
      allowed : container of allowed lowercase words; pass a set or frozenset,
                membership is checked once per call
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    if len(w) != N or not all(is_letter(ch) for ch in w):
        return False

    return w in allowed
