"""Unjumble service: run one rack against a word list.

This service wires the dictionary reader, the matching engine and the chosen
ordering policy together and reports statistics about the run.
"""

from __future__ import annotations
import time
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..config_types import AppConfig
from ..ingest.wordlist import iter_words
from ..match.engine import MatchEngine

logger = logging.getLogger(__name__)


@dataclass
class UnjumbleRequest:
    """Validated input for one run."""
    letters: str
    required_letter: Optional[str] = None
    order: str = "none"
    dictionary: Optional[str] = None


@dataclass
class UnjumbleResult:
    """Results from an unjumble run."""
    words: List[str] = field(default_factory=list)
    scanned: int = 0
    matched: int = 0
    order: str = "none"
    duration_seconds: float = 0.0


def run_unjumble(
    request: UnjumbleRequest,
    config: Dict[str, Any] | None = None,
    words: Iterable[str] | None = None,
) -> UnjumbleResult:
    """Find every word that can be built from the rack and order the result.

    Args:
        request: Rack, optional required letter, ordering policy and dictionary
        config: Full configuration dict (defaults used when omitted)
        words: Candidate words to scan instead of reading the dictionary file

    Returns:
        UnjumbleResult with the ordered words and scan statistics

    Raises:
        OSError, UnicodeDecodeError: The dictionary could not be read; the
            run is aborted and no partial result is produced.
    """
    app_config = AppConfig.from_dict(config or {})
    start = time.time()

    if words is None:
        dictionary = request.dictionary or app_config.dictionary.path
        words = iter_words(dictionary, encoding=app_config.dictionary.encoding)

    engine = MatchEngine(request.letters, request.required_letter)
    engine.scan(words)
    ordered = engine.ordered(request.order)

    result = UnjumbleResult(
        words=ordered,
        scanned=engine.scanned,
        matched=len(engine.matches),
        order=request.order,
        duration_seconds=time.time() - start,
    )
    logger.debug(
        f"[unjumble] rack={request.letters!r} include={request.required_letter!r} "
        f"order={result.order}: {result.scanned} scanned, {result.matched} matched, "
        f"{len(result.words)} emitted in {result.duration_seconds:.3f}s"
    )
    return result


__all__ = ["UnjumbleRequest", "UnjumbleResult", "run_unjumble"]
