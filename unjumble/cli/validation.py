"""Argument validation for the unjumble command.

Checks run in a fixed order so the reported error is deterministic:
ordering options, include letter, letters (length, then alphabetic),
dictionary.
"""

from __future__ import annotations
import logging

from ..ingest.wordlist import can_open
from ..match.policies import POLICIES
from .errors import (
    UnjumbleUsageError,
    DictionaryNotOpenable,
    LettersTooShort,
    LettersNotAlphabetic,
)

logger = logging.getLogger(__name__)

MIN_LETTERS = 3


def select_order(alpha: int, length: int, longest: int, default: str = "none") -> str:
    """Resolve the ordering flags (given as occurrence counts) to a policy name.

    At most one flag may be given, and only once.
    """
    chosen = [name for name, count in (("alpha", alpha), ("len", length), ("longest", longest)) if count]
    if alpha + length + longest > 1:
        raise UnjumbleUsageError(f"conflicting ordering options: {', '.join(chosen)}")
    if chosen:
        return chosen[0]
    default = default.lower()
    if default not in POLICIES:
        raise UnjumbleUsageError(f"unknown configured ordering '{default}'")
    return default


def validate_include(letter: str | None) -> str | None:
    """The include letter must be a single alphabetic character."""
    if letter is None:
        return None
    if len(letter) != 1 or not letter.isalpha():
        raise UnjumbleUsageError(f"invalid include letter '{letter}'")
    return letter


def validate_letters(letters: str) -> str:
    if len(letters) < MIN_LETTERS:
        raise LettersTooShort()
    if not letters.isalpha():
        raise LettersNotAlphabetic()
    return letters


def validate_dictionary(path: str) -> str:
    if not can_open(path):
        logger.debug(f"Dictionary not openable: {path}")
        raise DictionaryNotOpenable(path)
    return path


__all__ = ["MIN_LETTERS", "select_order", "validate_include", "validate_letters", "validate_dictionary"]
