"""
Lightweight word validation.

This module answers two questions:
  - "Is this a well-formed word?"  (normalize_word)
  - "Is this guess acceptable?"    (validate_guess)

A word is well-formed iff it is exactly 5 ASCII letters a–z once stripped
and lowercased. A guess is acceptable iff it is well-formed and appears in
the allowed-guesses dictionary.
"""

from __future__ import annotations

from typing import Collection

from wordlerank.errors import InvalidWordError
from .feedback import WORD_LENGTH


def is_clean_word(w: str) -> bool:
    """True if `w` is exactly 5 ASCII letters."""
    return len(w) == WORD_LENGTH and w.isascii() and w.isalpha()


def normalize_word(word: str) -> str:
    """
    Return `word` stripped and lowercased.

    Raises InvalidWordError if the result is not exactly 5 letters a–z.
    """
    if not isinstance(word, str):
        raise InvalidWordError(f"expected a string; got {type(word).__name__}")
    w = word.strip().lower()
    if not is_clean_word(w):
        raise InvalidWordError(f"{word!r} is not a {WORD_LENGTH}-letter word")
    return w


def validate_guess(word: str, allowed: Collection[str]) -> bool:
    """
    Return True if `word` is a valid guess.

    Notes:
      - `allowed` should be a set when this is called in a loop; membership
        on a list is linear.
    """
    if not isinstance(word, str):
        return False
    w = word.strip().lower()
    if not is_clean_word(w):
        return False
    return w in allowed
