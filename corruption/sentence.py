"""
Sentence-level removal.

Runs after the word pass, and only when the missing-text intensity is above
a threshold (50 by default).  Sentences are the logical sentences of the
*original* text, tracked while the words were walked: a word whose original
token ends in '.', '!' or '?' closes its sentence, and the whitespace after a
word belongs to that word's sentence.

If the document has more than two sentences, a single roll decides whether
one is removed (probability ``missing_text / 2`` percent).  The removed
sentence is never the first or the last one.  The same decision is applied
to both outputs:

  plain  – every text chunk of the sentence is dropped
  marked – the sentence's first word becomes a "missing sentence" marker;
           the whitespace after its last word is kept in place

Markup inside the sentence is kept in both outputs.
"""

from __future__ import annotations

import random
from typing import List, Optional

from .base import Piece
from .markup import MISSING_SENTENCE_MARKER

DEFAULT_THRESHOLD = 50.0


class SentenceRemover:
    """
    Parameters
    ----------
    threshold : float
        Missing-text intensity that must be exceeded before any sentence is
        considered for removal.
    marker : str
        Marker placed in the marked output instead of the sentence.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        marker: str = MISSING_SENTENCE_MARKER,
    ) -> None:
        self.threshold = threshold
        self.marker = marker

    def select(self, sentence_count: int, missing_text: float, rng: random.Random) -> Optional[int]:
        """Return the index of the sentence to remove, or None."""
        if not missing_text > self.threshold:
            return None
        if sentence_count <= 2:
            return None
        if not rng.random() * 100 < missing_text / 2:
            return None
        return 1 + rng.randrange(sentence_count - 2)

    def remove(self, pieces: List[Piece], sentence: int) -> List[Piece]:
        """
        Return *pieces* with *sentence* removed from both outputs.

        The marker piece carries no category; callers count the removal
        themselves.
        """
        owned = [i for i, p in enumerate(pieces) if p.sentence == sentence]
        word_positions = [i for i in owned if pieces[i].is_word]
        if not word_positions:
            return list(pieces)

        first_word = word_positions[0]
        last_word = word_positions[-1]

        result: List[Piece] = []
        for i, piece in enumerate(pieces):
            if piece.sentence != sentence:
                result.append(piece)
            elif i == first_word:
                result.append(Piece(plain="", marked=self.marker, sentence=sentence))
            elif i > last_word:
                # trailing whitespace stays where it was, outside any inline tag
                result.append(Piece(plain="", marked=piece.marked, sentence=sentence))
        return result
