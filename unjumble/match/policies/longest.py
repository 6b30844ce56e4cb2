"""Longest-only filtering policy."""
from __future__ import annotations
from typing import List, Sequence

from .base import OrderingPolicy


class LongestOnlyPolicy(OrderingPolicy):
    """Keep only the words of maximum length, in scan order (no sorting)."""

    name = "longest"

    def apply(self, matches: Sequence[str]) -> List[str]:
        # First pass: maximum length (0 for an empty collection)
        longest = max((len(word) for word in matches), default=0)
        # Second pass: strict equality, so shorter words never slip through
        return [word for word in matches if len(word) == longest]
