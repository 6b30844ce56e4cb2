"""Matching engine: decide which dictionary words fit the rack.

The rack multiset is built once; candidates are then tested one by one in the
order they are supplied and accepted words are collected in that order. Once
scanning is done a single ordering policy shapes the final output.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Union

from .letters import LetterMultiset, count_letters, is_subset_match
from .policies import OrderingPolicy, get_policy

logger = logging.getLogger(__name__)


class MatchEngine:
    """Subset-anagram matcher for one rack of letters.

    Example usage:
        engine = MatchEngine("listen")
        engine.scan(["tin", "silent", "xyz"])
        engine.ordered("alpha")   # ['silent', 'tin']
    """

    def __init__(self, letters: str, required_letter: Optional[str] = None):
        """Initialize engine.

        Args:
            letters: Rack letters (validated upstream)
            required_letter: Letter every match must contain, or None to
                disable the filter
        """
        self.rack: LetterMultiset = count_letters(letters)
        self.required_letter = required_letter.lower() if required_letter else None
        self.scanned = 0
        self._matches: List[str] = []

    @property
    def matches(self) -> List[str]:
        """Accepted words so far, in scan order (copy)."""
        return list(self._matches)

    def accepts(self, word: str) -> bool:
        """Return True when ``word`` passes the required-letter filter and fits the rack."""
        folded = word.lower()
        # Cheap pre-filter before building the candidate multiset
        if self.required_letter is not None and self.required_letter not in folded:
            return False
        return is_subset_match(self.rack, count_letters(folded))

    def feed(self, word: str) -> bool:
        """Test one candidate and keep it (original casing) when accepted."""
        self.scanned += 1
        if self.accepts(word):
            self._matches.append(word)
            return True
        return False

    def scan(self, words: Iterable[str]) -> List[str]:
        """Feed every candidate in supplied order and return the matches."""
        for word in words:
            self.feed(word)
        logger.debug(f"[match] {self.scanned} candidates scanned, {len(self._matches)} matched")
        return self.matches

    def ordered(self, policy: Union[str, OrderingPolicy, None] = None) -> List[str]:
        """Apply one ordering policy (by name or instance) to the matches."""
        if not isinstance(policy, OrderingPolicy):
            policy = get_policy(policy)
        logger.debug(f"[match] Applying ordering policy: {policy.get_name()}")
        return policy.apply(self._matches)


__all__ = ["MatchEngine"]
