"""Dictionary ingestion."""

from .wordlist import iter_words, can_open

__all__ = ["iter_words", "can_open"]
