"""
Punctuation corruptor.

  - a known trailing mark is replaced with a plausible wrong one (or dropped)
  - a word with no trailing mark gets a random one appended half of the time
  - an unrecognised trailing run (e.g. '?!', '"') is left alone
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence

from .base import PUNCTUATION, BaseCorruptor, WordEdit
from .lexicon import INJECTED_PUNCTUATION, PUNCTUATION_ERRORS
from .markup import mark_punctuation


class PunctuationCorruptor(BaseCorruptor):
    """
    Parameters
    ----------
    errors : dict[str, list[str]] | None
        Replacement candidates per punctuation mark ("" means drop it).
    injected : sequence of str | None
        Marks that may be added after a bare word.
    """

    category = PUNCTUATION

    def __init__(
        self,
        errors: Optional[Dict[str, List[str]]] = None,
        injected: Optional[Sequence[str]] = None,
    ) -> None:
        self.errors = errors if errors is not None else PUNCTUATION_ERRORS
        self.injected = tuple(injected) if injected is not None else INJECTED_PUNCTUATION

    def apply(self, word: str, punctuation: str, rng: random.Random) -> Optional[WordEdit]:
        if punctuation:
            candidates = self.errors.get(punctuation)
            if not candidates:
                return None
            replacement = rng.choice(candidates)
        elif rng.random() > 0.5:
            replacement = rng.choice(self.injected)
        else:
            return None

        return WordEdit(
            plain=word + replacement,
            marked=word + mark_punctuation(replacement),
        )
