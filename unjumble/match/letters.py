"""Letter multisets and the subset-match test.

A rack of letters and every candidate word are reduced to a case-folded
character count. A candidate can be built from the rack when, for each of its
characters, the rack holds at least as many copies.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, Iterator, Mapping


class LetterMultiset(Mapping[str, int]):
    """Read-only mapping of lowercase character -> occurrence count.

    Only characters that occur are stored, so every count is >= 1.
    Non-alphabetic characters are counted like any other; input validation
    is the caller's job.
    """

    __slots__ = ("_counts",)

    def __init__(self, text: str = "") -> None:
        self._counts: Dict[str, int] = dict(Counter(text.lower()))

    def __getitem__(self, key: str) -> int:
        return self._counts[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"LetterMultiset({self._counts!r})"

    def fits_within(self, rack: LetterMultiset) -> bool:
        """True when every character here is available in ``rack`` often enough."""
        for char, needed in self._counts.items():
            if rack.get(char, 0) < needed:
                return False
        return True


def count_letters(text: str) -> LetterMultiset:
    """Build the case-folded character count of ``text``.

    Never fails; the empty string gives an empty multiset.
    """
    return LetterMultiset(text)


def is_subset_match(rack: LetterMultiset, candidate: LetterMultiset) -> bool:
    """Return True when ``candidate`` can be spelled from ``rack``.

    Fails as soon as one of the candidate's characters is missing from the
    rack or is needed more often than the rack supplies. An empty candidate
    always matches. Letter order is irrelevant.
    """
    return candidate.fits_within(rack)


__all__ = ["LetterMultiset", "count_letters", "is_subset_match"]
