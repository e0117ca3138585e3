"""
Data model and the abstract base class for per-word corruptors.
"""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

SPELLING = "spelling"
PUNCTUATION = "punctuation"
MISSING_TEXT = "missing_text"

CATEGORIES = (SPELLING, PUNCTUATION, MISSING_TEXT)
"""Corruption categories, in the order their rolls are drawn."""


# ---------------------------------------------------------------------------
# Settings / results
# ---------------------------------------------------------------------------

def _as_intensity(d: Dict[str, Any], key: str, default: float) -> float:
    value = d.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class CorruptionSettings:
    """
    Per-category corruption intensities, nominally percentages in [0, 100].

    Values are not clamped: the engine treats anything it cannot reach as
    "never" (<= 0, NaN) or "always" (large enough to beat every roll).
    """
    spelling: float = 3.0
    punctuation: float = 2.0
    missing_text: float = 4.0

    def scaled(self, factor: float) -> "CorruptionSettings":
        """Return the settings multiplied by a positional *factor*."""
        return CorruptionSettings(
            spelling=self.spelling * factor,
            punctuation=self.punctuation * factor,
            missing_text=self.missing_text * factor,
        )

    def get(self, category: str) -> float:
        return getattr(self, category)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CorruptionSettings":
        """Build from the editor's record (``spelling``, ``punctuation``, ``missingText``)."""
        defaults = cls()
        return cls(
            spelling=_as_intensity(d, "spelling", defaults.spelling),
            punctuation=_as_intensity(d, "punctuation", defaults.punctuation),
            missing_text=_as_intensity(d, "missingText", defaults.missing_text),
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "spelling": self.spelling,
            "punctuation": self.punctuation,
            "missingText": self.missing_text,
        }

    @property
    def out_of_range(self) -> bool:
        """True if any intensity is outside [0, 100] or not a number."""
        return any(
            math.isnan(v) or not 0.0 <= v <= 100.0
            for v in (self.spelling, self.punctuation, self.missing_text)
        )


@dataclass(frozen=True)
class ErrorCounts:
    spelling: int = 0
    punctuation: int = 0
    missing_text: int = 0

    @property
    def total(self) -> int:
        return self.spelling + self.punctuation + self.missing_text

    def get(self, category: str) -> int:
        return getattr(self, category)

    def to_dict(self) -> Dict[str, int]:
        return {
            "spelling": self.spelling,
            "punctuation": self.punctuation,
            "missingText": self.missing_text,
        }


@dataclass(frozen=True)
class CorruptionResult:
    plain_version: str
    marked_version: str
    error_counts: ErrorCounts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "plainVersion": self.plain_version,
            "markedVersion": self.marked_version,
            "errorCounts": self.error_counts.to_dict(),
        }


@dataclass(frozen=True)
class WordEdit:
    """Replacement text for one word in each output stream."""
    plain: str
    marked: str


@dataclass(frozen=True)
class Piece:
    """
    One emitted chunk of both outputs.

    ``sentence`` is the index of the logical sentence a text chunk belongs to
    (None for markup); ``category`` is the error it carries, if any.
    """
    plain: str
    marked: str
    sentence: Optional[int] = None
    category: Optional[str] = None
    is_word: bool = False


@dataclass(frozen=True)
class WordEvent:
    """Where a word sat in the document and which error (if any) it received."""
    position: float
    category: Optional[str] = None


# ---------------------------------------------------------------------------
# Abstract corruptor
# ---------------------------------------------------------------------------

class BaseCorruptor(ABC):
    """
    Apply one category of error to a single word.

    Subclasses receive the word split into its word-character run and its
    trailing punctuation, and return a ``WordEdit`` or None when the word
    is left unchanged (in which case no error is counted).
    """

    category: str = ""

    @abstractmethod
    def apply(self, word: str, punctuation: str, rng: random.Random) -> Optional[WordEdit]:
        """Return the corrupted rendition of *word* + *punctuation*, or None."""
