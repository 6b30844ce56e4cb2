"""Policy that keeps matches exactly as they were scanned."""
from __future__ import annotations
from typing import List, Sequence

from .base import OrderingPolicy


class ScanOrderPolicy(OrderingPolicy):
    """Emit matches in dictionary order (no option selected)."""

    name = "none"

    def apply(self, matches: Sequence[str]) -> List[str]:
        return list(matches)
