"""Alphabetical ordering policy."""
from __future__ import annotations
from typing import List, Sequence

from .base import OrderingPolicy


class AlphabeticalPolicy(OrderingPolicy):
    """Sort matches by code point order of the original-cased words.

    Python's sort is stable, so identical words keep their scan order.
    Uppercase letters sort before lowercase ones ("Zoo" < "ant").
    """

    name = "alpha"

    def apply(self, matches: Sequence[str]) -> List[str]:
        return sorted(matches)
