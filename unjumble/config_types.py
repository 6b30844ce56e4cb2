"""Typed configuration dataclasses for unjumble.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any


@dataclass
class DictionaryConfig:
    """Word list location and decoding."""
    path: str = "/usr/share/dict/words"
    encoding: str = "utf-8"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MatchingConfig:
    """Result shaping configuration."""
    order: str = "none"  # none | alpha | len | longest

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "WARNING"
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "dictionary": self.dictionary.to_dict(),
            "matching": self.matching.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Override values that are not strings (e.g. a Path) are turned into
        strings; keys the dataclasses do not know are ignored.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        dictionary_data = data.get("dictionary", {})
        matching_data = data.get("matching", {})
        return cls(
            log_level=str(data.get("log_level", "WARNING")),
            dictionary=DictionaryConfig(
                path=str(dictionary_data.get("path", DictionaryConfig.path)),
                encoding=str(dictionary_data.get("encoding", DictionaryConfig.encoding)),
            ),
            matching=MatchingConfig(
                order=str(matching_data.get("order", MatchingConfig.order)).lower(),
            ),
        )


__all__ = [
    "AppConfig",
    "DictionaryConfig",
    "MatchingConfig",
]
