"""Pytest fixtures for test configuration.

Tests pass configuration dicts to the CLI/service directly instead of relying
on .env files or environment variables.
"""
import pytest
from pathlib import Path
from typing import Dict, Any, List


SAMPLE_WORDS: List[str] = ["tin", "silent", "lines", "enlist", "xyz"]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Drop UNJUMBLE__ variables from the developer's shell."""
    import os
    for key in list(os.environ):
        if key.startswith("UNJUMBLE__") or key == "UNJUMBLE_ENABLE_DOTENV":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_words() -> List[str]:
    return list(SAMPLE_WORDS)


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    """Word list with the classic 'listen' scenario, one word per line."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(SAMPLE_WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def empty_dictionary(tmp_path: Path) -> Path:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def test_config(dictionary_file: Path) -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    The default dictionary points at the sample word list in tmp_path.
    """
    return {
        'log_level': 'DEBUG',
        'dictionary': {
            'path': str(dictionary_file),
            'encoding': 'utf-8',
        },
        'matching': {
            'order': 'none',
        },
    }
