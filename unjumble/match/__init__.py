"""Matching package: letter multisets, the matching engine and ordering policies."""

from .letters import LetterMultiset, count_letters, is_subset_match
from .engine import MatchEngine
from .policies import (
    OrderingPolicy,
    ScanOrderPolicy,
    AlphabeticalPolicy,
    LengthDescendingPolicy,
    LongestOnlyPolicy,
    get_policy,
)

__all__ = [
    "LetterMultiset",
    "count_letters",
    "is_subset_match",
    "MatchEngine",
    "OrderingPolicy",
    "ScanOrderPolicy",
    "AlphabeticalPolicy",
    "LengthDescendingPolicy",
    "LongestOnlyPolicy",
    "get_policy",
]
