"""Base class for result ordering policies."""
from __future__ import annotations
from typing import List, Sequence
from abc import ABC, abstractmethod


class OrderingPolicy(ABC):
    """Base class for all ordering policies.

    A policy receives the matches in scan order and returns a new list; the
    input sequence is never modified and no word is ever altered.
    """

    name: str = ""

    @abstractmethod
    def apply(self, matches: Sequence[str]) -> List[str]:
        """Shape the scan-order matches into the final output order.

        Args:
            matches: Matched words in the order they were scanned

        Returns:
            New list holding the words to emit, in emission order
        """

    def get_name(self) -> str:
        """Return the policy name for logging."""
        return self.name
