"""Ordering policies applied to the matches once scanning completes.

Exactly one policy shapes the output. Policies are looked up by the names
used on the command line and in configuration (``none``, ``alpha``, ``len``,
``longest``).
"""

from __future__ import annotations
from typing import Dict, Type

from .base import OrderingPolicy
from .scan_order import ScanOrderPolicy
from .alphabetical import AlphabeticalPolicy
from .length import LengthDescendingPolicy
from .longest import LongestOnlyPolicy

POLICIES: Dict[str, Type[OrderingPolicy]] = {
    ScanOrderPolicy.name: ScanOrderPolicy,
    AlphabeticalPolicy.name: AlphabeticalPolicy,
    LengthDescendingPolicy.name: LengthDescendingPolicy,
    LongestOnlyPolicy.name: LongestOnlyPolicy,
}


def get_policy(name: str | None) -> OrderingPolicy:
    """Return a policy instance for ``name`` (``None`` means scan order).

    Raises:
        ValueError: If the name is not a known policy
    """
    key = (name or ScanOrderPolicy.name).lower()
    try:
        return POLICIES[key]()
    except KeyError:
        raise ValueError(
            f"Unknown ordering policy '{name}'. Available: {', '.join(POLICIES)}"
        ) from None


__all__ = [
    "OrderingPolicy",
    "ScanOrderPolicy",
    "AlphabeticalPolicy",
    "LengthDescendingPolicy",
    "LongestOnlyPolicy",
    "POLICIES",
    "get_policy",
]
