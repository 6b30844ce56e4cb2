"""Line-by-line word list reading.

One candidate per line. Only the line terminator is removed: surrounding
whitespace, punctuation and blank lines are passed through untouched and left
to the matching engine.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, Iterator, Union

logger = logging.getLogger(__name__)


def iter_words(
    path: Union[Path, str],
    encoding: str = "utf-8",
    open: Callable = open,
) -> Iterator[str]:
    """Yield each line of ``path`` without its line terminator, in file order.

    Decoding is strict; an undecodable line raises ``UnicodeDecodeError`` and
    ends the iteration. Nothing is skipped or repaired.

    Args:
        path: Word list file
        encoding: Text encoding of the file
        open: File opener (injectable for tests)
    """
    logger.debug(f"[wordlist] Reading {path} ({encoding})")
    # Split on \n only; a lone \r stays inside its line
    with open(path, "r", encoding=encoding, newline="\n") as f:
        for line in f:
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line


def can_open(path: Union[Path, str], open: Callable = open) -> bool:
    """Return True when ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


__all__ = ["iter_words", "can_open"]
