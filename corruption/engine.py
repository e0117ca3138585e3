"""
Corruption engine: HTML in, plain + marked HTML and error counts out.

Usage
-----
    from corruption import CorruptionSettings, corrupt_text

    result = corrupt_text("<p>The big dog ran.</p>",
                          CorruptionSettings(spelling=40, punctuation=10, missing_text=5),
                          seed=7)
    result.plain_version, result.marked_version, result.error_counts

Each text word is weighted by its position in the document (see
``distribution``), each category is rolled independently, and one of the
eligible categories is applied.  Tags pass through untouched.

The engine never raises for any input string or any numeric settings.
All randomness comes from one ``random.Random``: pass ``rng`` or ``seed`` to
make a run reproducible.
"""

from __future__ import annotations

import random
from collections import Counter
from typing import Dict, List, Optional, Tuple

from .base import (
    MISSING_TEXT,
    PUNCTUATION,
    SPELLING,
    BaseCorruptor,
    CorruptionResult,
    CorruptionSettings,
    ErrorCounts,
    Piece,
    WordEvent,
)
from .character import SpellingCorruptor
from .distribution import choose_category, distribution_factor
from .lexicon import SENTENCE_TERMINALS
from .punctuation import PunctuationCorruptor
from .sentence import DEFAULT_THRESHOLD, SentenceRemover
from .tokenizer import split_attached_punctuation, split_words, tokenize
from .word import MissingTextCorruptor


class TextCorruptor:
    """
    Parameters
    ----------
    misspellings : dict[str, list[str]] | None
        Known misspellings per lowercase word (default: built-in table).
    punctuation_errors : dict[str, list[str]] | None
        Wrong replacements per punctuation mark (default: built-in table).
    sentence_threshold : float
        Missing-text intensity above which whole sentences may be removed.
    """

    def __init__(
        self,
        misspellings: Optional[Dict[str, List[str]]] = None,
        punctuation_errors: Optional[Dict[str, List[str]]] = None,
        sentence_threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self.corruptors: Dict[str, BaseCorruptor] = {
            SPELLING: SpellingCorruptor(misspellings=misspellings),
            PUNCTUATION: PunctuationCorruptor(errors=punctuation_errors),
            MISSING_TEXT: MissingTextCorruptor(),
        }
        self.sentence_remover = SentenceRemover(threshold=sentence_threshold)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def corrupt(
        self,
        html: str,
        settings: Optional[CorruptionSettings] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> CorruptionResult:
        """Return the plain and marked corrupted versions of *html*."""
        result, _ = self.corrupt_with_trace(html, settings, seed=seed, rng=rng)
        return result

    def corrupt_with_trace(
        self,
        html: str,
        settings: Optional[CorruptionSettings] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> Tuple[CorruptionResult, List[WordEvent]]:
        """
        Like ``corrupt`` but also return one ``WordEvent`` per word, giving
        its relative position and the error it received.

        Events of words inside a removed sentence keep their word-level
        category; the sentence removal itself is not an event.
        """
        if settings is None:
            settings = CorruptionSettings()
        if rng is None:
            rng = random.Random(seed)

        segments = tokenize(html)
        total_length = sum(len(seg.content) for seg in segments if not seg.is_markup)

        pieces: List[Piece] = []
        events: List[WordEvent] = []
        processed = 0
        sentence = 0
        sentence_closed = False
        has_words = False

        for segment in segments:
            if segment.is_markup:
                pieces.append(Piece(plain=segment.content, marked=segment.content))
                continue

            for token in split_words(segment.content):
                if token.isspace():
                    pieces.append(Piece(plain=token, marked=token, sentence=sentence))
                    continue

                if sentence_closed:
                    sentence += 1
                    sentence_closed = False
                has_words = True

                processed += len(token)
                factor = distribution_factor(processed, total_length)
                category = choose_category(settings.scaled(factor), rng)
                piece = self._corrupt_word(token, category, sentence, rng)
                pieces.append(piece)
                events.append(WordEvent(
                    position=processed / total_length,
                    category=piece.category,
                ))

                if token.endswith(SENTENCE_TERMINALS):
                    sentence_closed = True

        sentence_count = sentence + 1 if has_words else 0
        removed = self.sentence_remover.select(sentence_count, settings.missing_text, rng)
        if removed is not None:
            pieces = self.sentence_remover.remove(pieces, removed)

        # Counts come from the surviving pieces, so errors inside a removed
        # sentence drop out and the removal itself adds one missing-text error.
        counts = Counter(p.category for p in pieces if p.category is not None)
        error_counts = ErrorCounts(
            spelling=counts[SPELLING],
            punctuation=counts[PUNCTUATION],
            missing_text=counts[MISSING_TEXT] + (1 if removed is not None else 0),
        )
        result = CorruptionResult(
            plain_version="".join(p.plain for p in pieces),
            marked_version="".join(p.marked for p in pieces),
            error_counts=error_counts,
        )
        return result, events

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _corrupt_word(
        self,
        token: str,
        category: Optional[str],
        sentence: int,
        rng: random.Random,
    ) -> Piece:
        unchanged = Piece(plain=token, marked=token, sentence=sentence, is_word=True)
        if category is None:
            return unchanged

        word, punctuation = split_attached_punctuation(token)
        edit = self.corruptors[category].apply(word, punctuation, rng)
        if edit is None:
            return unchanged
        return Piece(
            plain=edit.plain,
            marked=edit.marked,
            sentence=sentence,
            category=category,
            is_word=True,
        )


def corrupt_text(
    html: str,
    settings: Optional[CorruptionSettings] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> CorruptionResult:
    """Corrupt *html* with the default lexicon tables."""
    return TextCorruptor().corrupt(html, settings, seed=seed, rng=rng)
