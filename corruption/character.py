"""
Character-level spelling corruptor.

A word is misspelled with one of five strategies:

  "omission"      – drop one letter (never the first)
  "insertion"     – insert one random letter
  "substitution"  – replace one letter with a different random letter
  "transposition" – swap two adjacent letters (never the first)
  "lexicon"       – use a known misspelling of a common word

Which strategies are available depends on the word:
  - "lexicon" whenever the lowercased word is in the misspelling table
  - all four character edits for words longer than 3 characters
  - only "insertion" and "substitution" for 3-character words
Words of 2 characters or fewer are never misspelled.

Design notes
------------
- Replacement letters come from a fixed 25-letter alphabet without 'q'.
- "lexicon" keeps the original's leading capital ("The" → "Teh").
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional

from .base import SPELLING, BaseCorruptor, WordEdit
from .lexicon import COMMON_MISSPELLINGS, MUTATION_ALPHABET
from .markup import mark_spelling

OMISSION = "omission"
INSERTION = "insertion"
SUBSTITUTION = "substitution"
TRANSPOSITION = "transposition"
LEXICON = "lexicon"

STRATEGIES = (OMISSION, INSERTION, SUBSTITUTION, TRANSPOSITION, LEXICON)

MIN_WORD_LENGTH = 3
"""Shortest word the corruptor will misspell."""


class SpellingCorruptor(BaseCorruptor):
    """
    Spelling-error corruptor.

    Parameters
    ----------
    misspellings : dict[str, list[str]] | None
        Known misspellings keyed by lowercase word.
        Defaults to the built-in table of 20 frequent English words.
    """

    category = SPELLING

    def __init__(self, misspellings: Optional[Dict[str, List[str]]] = None) -> None:
        self.misspellings = misspellings if misspellings is not None else COMMON_MISSPELLINGS

    # ------------------------------------------------------------------
    # BaseCorruptor interface
    # ------------------------------------------------------------------

    def apply(self, word: str, punctuation: str, rng: random.Random) -> Optional[WordEdit]:
        if len(word) < MIN_WORD_LENGTH:
            return None
        misspelled = self.misspell(word, rng)
        return WordEdit(
            plain=misspelled + punctuation,
            marked=mark_spelling(misspelled) + punctuation,
        )

    # ------------------------------------------------------------------
    # Strategy selection
    # ------------------------------------------------------------------

    def eligible_strategies(self, word: str) -> List[str]:
        strategies: List[str] = []
        if word.lower() in self.misspellings:
            strategies.append(LEXICON)
        if len(word) > 3:
            strategies.extend([OMISSION, INSERTION, SUBSTITUTION, TRANSPOSITION])
        elif len(word) == 3:
            strategies.extend([INSERTION, SUBSTITUTION])
        return strategies

    def misspell(self, word: str, rng: random.Random) -> str:
        """Return *word* with one randomly chosen spelling error applied."""
        strategies = self.eligible_strategies(word)
        if not strategies:
            return word
        strategy = rng.choice(strategies)
        if strategy == LEXICON:
            return self._from_lexicon(word, rng)
        return _EDITS[strategy](word, rng)

    def _from_lexicon(self, word: str, rng: random.Random) -> str:
        variant = rng.choice(self.misspellings[word.lower()])
        if word[0].isupper():
            return variant[:1].upper() + variant[1:]
        return variant


# ---------------------------------------------------------------------------
# Character edits
# ---------------------------------------------------------------------------

def omit_letter(word: str, rng: random.Random) -> str:
    pos = rng.randrange(1, len(word))
    return word[:pos] + word[pos + 1:]


def insert_letter(word: str, rng: random.Random) -> str:
    pos = rng.randrange(len(word))
    return word[:pos] + rng.choice(MUTATION_ALPHABET) + word[pos:]


def substitute_letter(word: str, rng: random.Random) -> str:
    pos = rng.randrange(len(word))
    original = word[pos].lower()
    pool = [c for c in MUTATION_ALPHABET if c != original]
    return word[:pos] + rng.choice(pool) + word[pos + 1:]


def transpose_letters(word: str, rng: random.Random) -> str:
    if len(word) <= 3:
        return word
    pos = rng.randrange(1, len(word) - 1)
    return word[:pos] + word[pos + 1] + word[pos] + word[pos + 2:]


_EDITS = {
    OMISSION: omit_letter,
    INSERTION: insert_letter,
    SUBSTITUTION: substitute_letter,
    TRANSPOSITION: transpose_letters,
}
