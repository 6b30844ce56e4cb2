"""Length-descending grouping policy."""
from __future__ import annotations
import logging
from typing import Dict, List, Sequence

from .base import OrderingPolicy

logger = logging.getLogger(__name__)


class LengthDescendingPolicy(OrderingPolicy):
    """Group matches by length, longest group first, alphabetical inside a group.

    Words are sorted once, then partitioned into length buckets in a single
    pass; buckets are emitted from the longest length down to 1. Lengths
    with no words are skipped, and zero-length words are never emitted.
    """

    name = "len"

    def apply(self, matches: Sequence[str]) -> List[str]:
        buckets: Dict[int, List[str]] = {}
        for word in sorted(matches):
            buckets.setdefault(len(word), []).append(word)

        if not buckets:
            return []

        longest = max(buckets)
        logger.debug(f"[order][{self.name}] {len(buckets)} length groups, longest {longest}")

        result: List[str] = []
        for length in range(longest, 0, -1):
            result.extend(buckets.get(length, []))
        return result
