"""
Tests for the corruption engine: exact scenarios with forced random draws,
invariants over the sample corpus, and statistical properties over many
seeds.

Run with:
    pytest tests/test_engine.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
from typing import List

import pytest
from corruption import CorruptionSettings, ErrorCounts, TextCorruptor, corrupt_text, tokenize
from corruption.lexicon import PUNCTUATION_ERRORS
from corruption.markup import (
    MISSING_SENTENCE_MARKER,
    MISSING_TEXT_MARKER,
    mark_punctuation,
    mark_spelling,
    strip_tags,
)
from corruption.sentence import SentenceRemover
from corruption.base import Piece
from corpus.sample_documents import SAMPLE_DOCUMENTS
from metrics.counts import count_markers, counts_consistent, is_non_decreasing
from metrics.density import density_profile, edge_suppression_ratio


class _FixedRandom(random.Random):
    """Every draw returns the same value: every roll succeeds at 0.0."""

    value = 0.0

    def random(self):
        return self.value


class _ScriptedRandom(random.Random):
    """Returns the scripted draws in order, then 0.0 forever."""

    values: List[float] = []

    def random(self):
        return self.values.pop(0) if self.values else 0.0


def _fixed(value: float = 0.0) -> _FixedRandom:
    rng = _FixedRandom()
    rng.value = value
    return rng


def _scripted(values: List[float]) -> _ScriptedRandom:
    rng = _ScriptedRandom()
    rng.values = list(values)
    return rng


SAMPLE_HTML = [d["html"] for d in SAMPLE_DOCUMENTS]
MARKER_TAGS = {
    '<span class="spelling-error">',
    '<span class="punctuation-error">',
    '<span class="missing-text">',
    "</span>",
}


def _markup(document: str) -> List[str]:
    return [seg.content for seg in tokenize(document) if seg.is_markup]


# ===========================================================================
# Exact scenarios
# ===========================================================================

class TestScenarios:

    def test_spelling_on_every_word(self):
        result = corrupt_text(
            "<p>The big dog ran.</p>",
            CorruptionSettings(spelling=100, punctuation=0, missing_text=0),
            rng=_fixed(),
        )
        # lexicon for "The"; insertion of 'a' at position 0 for the rest
        assert result.plain_version == "<p>Teh abig adog aran.</p>"
        assert result.marked_version == (
            "<p>" + mark_spelling("Teh") + " " + mark_spelling("abig") + " "
            + mark_spelling("adog") + " " + mark_spelling("aran") + ".</p>"
        )
        assert result.error_counts == ErrorCounts(spelling=4, punctuation=0, missing_text=0)

    def test_punctuation_on_known_mark(self):
        result = corrupt_text(
            "aaaa bbbb cat. dddd eeee",
            CorruptionSettings(spelling=0, punctuation=100, missing_text=0),
            rng=_fixed(),
        )
        # bare words are only changed on a roll above 0.5, so only "cat." changes
        assert result.plain_version == "aaaa bbbb cat dddd eeee"
        assert result.marked_version == "aaaa bbbb cat" + mark_punctuation("") + " dddd eeee"
        assert result.error_counts.punctuation == 1

    @pytest.mark.parametrize("seed", range(20))
    def test_punctuation_replacement_comes_from_table(self, seed):
        # "cat." sits exactly mid-document, so its weight is 1.0 and it always fires
        result = corrupt_text(
            "aaaa bbbb cat. dddd eeee",
            CorruptionSettings(spelling=0, punctuation=100, missing_text=0),
            seed=seed,
        )
        token = result.plain_version.split()[2]
        assert token.startswith("cat")
        assert token[len("cat"):] in PUNCTUATION_ERRORS["."]
        assert result.error_counts.punctuation >= 1
        assert result.error_counts.spelling == 0

    def test_missing_text_on_every_word(self):
        result = corrupt_text(
            "<p>one two three four five</p>",
            CorruptionSettings(spelling=0, punctuation=0, missing_text=100),
            rng=_fixed(),
        )
        assert strip_tags(result.plain_version).strip() == ""
        assert result.plain_version == "<p>    </p>"
        assert result.marked_version.count(MISSING_TEXT_MARKER) == 5
        # a single sentence is never removed
        assert result.error_counts == ErrorCounts(spelling=0, punctuation=0, missing_text=5)

    def test_sentence_removal_applies_to_both_outputs(self):
        html = "<p>One two. Three four. Five six.</p>"
        # 6 words x 3 rolls that never fire, then the sentence roll fires
        rng = _scripted([0.99] * 18)
        result = TextCorruptor().corrupt(
            html, CorruptionSettings(spelling=0, punctuation=0, missing_text=60), rng=rng,
        )
        assert result.plain_version == "<p>One two. Five six.</p>"
        assert result.marked_version == (
            "<p>One two. " + MISSING_SENTENCE_MARKER + " Five six.</p>"
        )
        assert result.error_counts == ErrorCounts(spelling=0, punctuation=0, missing_text=1)

    def test_sentence_removal_drops_inner_word_errors(self):
        html = "<p>One two. Three four. Five six.</p>"
        result = corrupt_text(
            html, CorruptionSettings(spelling=0, punctuation=0, missing_text=100), rng=_fixed(),
        )
        # every word removed, then the middle sentence replaced by one marker
        assert result.plain_version == "<p>   </p>"
        assert result.marked_version == (
            "<p>" + MISSING_TEXT_MARKER + " " + MISSING_TEXT_MARKER + " "
            + MISSING_SENTENCE_MARKER + " "
            + MISSING_TEXT_MARKER + " " + MISSING_TEXT_MARKER + "</p>"
        )
        assert result.error_counts.missing_text == 5
        assert counts_consistent(result)

    def test_sentence_removal_keeps_markup(self):
        html = "<p>One. Two <b>three</b> four. Five.</p>"
        rng = _scripted([0.99] * 15)
        result = corrupt_text(
            html, CorruptionSettings(spelling=0, punctuation=0, missing_text=80), rng=rng,
        )
        assert result.plain_version == "<p>One. <b></b>Five.</p>"
        assert _markup(result.plain_version) == ["<p>", "<b>", "</b>", "</p>"]
        assert MISSING_SENTENCE_MARKER in result.marked_version

    def test_removed_sentence_whitespace_stays_outside_inline_tag(self):
        html = "<p>A. <b>B.</b> C.</p>"
        # 3 words x 3 rolls that never fire, then the sentence roll fires
        rng = _scripted([0.99] * 9)
        result = corrupt_text(
            html, CorruptionSettings(spelling=0, punctuation=0, missing_text=80), rng=rng,
        )
        assert result.plain_version == "<p>A. <b></b>C.</p>"
        assert result.marked_version == (
            "<p>A. <b>" + MISSING_SENTENCE_MARKER + "</b> C.</p>"
        )
        assert result.error_counts == ErrorCounts(spelling=0, punctuation=0, missing_text=1)

    def test_no_sentence_removal_at_threshold(self):
        html = "<p>One two. Three four. Five six.</p>"
        result = corrupt_text(
            html, CorruptionSettings(spelling=0, punctuation=0, missing_text=50),
            rng=_scripted([0.99] * 18),
        )
        assert result.plain_version == html
        assert result.error_counts.total == 0


# ===========================================================================
# Sentence remover
# ===========================================================================

class TestSentenceRemover:

    def test_select_requires_threshold(self):
        remover = SentenceRemover()
        assert remover.select(5, 50, _fixed()) is None
        assert remover.select(5, 51, _fixed()) == 1

    def test_select_requires_three_sentences(self):
        remover = SentenceRemover()
        assert remover.select(2, 100, _fixed()) is None
        assert remover.select(0, 100, _fixed()) is None
        assert remover.select(3, 100, _fixed()) == 1

    def test_select_roll_can_fail(self):
        # 0.6 * 100 = 60 is not under 100 / 2
        assert SentenceRemover().select(5, 100, _fixed(0.6)) is None

    @pytest.mark.parametrize("seed", range(50))
    def test_first_and_last_never_selected(self, seed):
        rng = random.Random(seed)
        for count in (3, 4, 7):
            index = SentenceRemover().select(count, 100, rng)
            if index is not None:
                assert 1 <= index <= count - 2

    def test_remove(self):
        pieces = [
            Piece("<p>", "<p>"),
            Piece("A.", "A.", sentence=0, is_word=True),
            Piece(" ", " ", sentence=0),
            Piece("B", "B", sentence=1, is_word=True),
            Piece(" ", " ", sentence=1),
            Piece("c.", "c.", sentence=1, is_word=True),
            Piece(" ", " ", sentence=1),
            Piece("D.", "D.", sentence=2, is_word=True),
            Piece("</p>", "</p>"),
        ]
        kept = SentenceRemover().remove(pieces, 1)
        assert "".join(p.plain for p in kept) == "<p>A. D.</p>"
        assert "".join(p.marked for p in kept) == "<p>A. " + MISSING_SENTENCE_MARKER + " D.</p>"


# ===========================================================================
# Invariants
# ===========================================================================

class TestInvariants:

    @pytest.mark.parametrize("html", SAMPLE_HTML)
    def test_zero_settings_is_identity(self, html):
        for seed in range(5):
            result = corrupt_text(html, CorruptionSettings(0, 0, 0), seed=seed)
            assert result.plain_version == html
            assert result.marked_version == html
            assert result.error_counts == ErrorCounts()

    def test_empty_input(self):
        result = corrupt_text("", CorruptionSettings(100, 100, 100), seed=0)
        assert result.plain_version == ""
        assert result.marked_version == ""
        assert result.error_counts == ErrorCounts()

    @pytest.mark.parametrize("html", SAMPLE_HTML)
    def test_markup_invariance(self, html):
        settings = CorruptionSettings(spelling=60, punctuation=60, missing_text=70)
        for seed in range(10):
            result = corrupt_text(html, settings, seed=seed)
            assert _markup(result.plain_version) == _markup(html)
            marked_tags = [t for t in _markup(result.marked_version) if t not in MARKER_TAGS]
            assert marked_tags == _markup(html)

    @pytest.mark.parametrize("html", SAMPLE_HTML)
    def test_count_consistency(self, html):
        settings = CorruptionSettings(spelling=50, punctuation=50, missing_text=90)
        for seed in range(20):
            result = corrupt_text(html, settings, seed=seed)
            assert count_markers(result.marked_version) == result.error_counts

    @pytest.mark.parametrize("html", [
        "<p>unterminated <b", ">>><<<", "a > b < c", "\n\t ", "<>", "x",
        "<p>one</p><p>two</p>", "... !!! ???",
    ])
    @pytest.mark.parametrize("settings", [
        CorruptionSettings(100, 100, 100),
        CorruptionSettings(-10, 1e9, 75),
        CorruptionSettings(float("nan"), float("inf"), float("nan")),
    ])
    def test_total_function(self, html, settings):
        for seed in range(5):
            result = corrupt_text(html, settings, seed=seed)
            assert isinstance(result.plain_version, str)
            assert isinstance(result.marked_version, str)

    def test_short_words_never_misspelled(self):
        html = "<p>an ox is in it, so we go up to my pa.</p>"
        for seed in range(20):
            result = corrupt_text(html, CorruptionSettings(100, 0, 0), seed=seed)
            assert result.plain_version == html
            assert result.error_counts.spelling == 0


# ===========================================================================
# Reproducibility
# ===========================================================================

class TestReproducibility:

    def test_same_seed_same_result(self):
        settings = CorruptionSettings(30, 30, 30)
        r1 = corrupt_text(SAMPLE_HTML[0], settings, seed=7)
        r2 = corrupt_text(SAMPLE_HTML[0], settings, seed=7)
        assert r1 == r2

    def test_seed_and_rng_equivalent(self):
        settings = CorruptionSettings(30, 30, 30)
        r1 = corrupt_text(SAMPLE_HTML[1], settings, seed=3)
        r2 = corrupt_text(SAMPLE_HTML[1], settings, rng=random.Random(3))
        assert r1 == r2

    def test_different_seeds_differ(self):
        settings = CorruptionSettings(40, 40, 40)
        r1 = corrupt_text(SAMPLE_HTML[0], settings, seed=1)
        r2 = corrupt_text(SAMPLE_HTML[0], settings, seed=2)
        assert r1.plain_version != r2.plain_version

    def test_trace_matches_words(self):
        corruptor = TextCorruptor()
        result, events = corruptor.corrupt_with_trace(SAMPLE_HTML[2], CorruptionSettings(20, 20, 20), seed=4)
        word_count = sum(
            len(seg.content.split()) for seg in tokenize(SAMPLE_HTML[2]) if not seg.is_markup
        )
        assert len(events) == word_count
        positions = [e.position for e in events]
        assert positions == sorted(positions)
        assert 0.0 < positions[0] and positions[-1] <= 1.0
        assert result == corruptor.corrupt(SAMPLE_HTML[2], CorruptionSettings(20, 20, 20), seed=4)


# ===========================================================================
# Statistical properties
# ===========================================================================

class TestStatistics:

    @pytest.mark.parametrize("category", ["spelling", "punctuation", "missing_text"])
    def test_monotonic_intensity(self, category):
        html = SAMPLE_HTML[0]
        means = []
        for level in (0, 10, 25, 50, 100):
            values = {"spelling": 0.0, "punctuation": 0.0, "missing_text": 0.0}
            values[category] = float(level)
            settings = CorruptionSettings(**values)
            counts = [
                corrupt_text(html, settings, seed=seed).error_counts.get(category)
                for seed in range(30)
            ]
            means.append(sum(counts) / len(counts))
        assert means[0] == 0
        assert is_non_decreasing(means, tolerance=0.5)
        assert means[-1] > means[1]

    def test_edge_suppression(self):
        html = "".join(SAMPLE_HTML)
        corruptor = TextCorruptor()
        runs = [
            corruptor.corrupt_with_trace(html, CorruptionSettings(60, 0, 0), seed=seed)[1]
            for seed in range(40)
        ]
        _, rates = density_profile(runs, bins=10)
        assert edge_suppression_ratio(rates) < 0.5
        assert rates[4] > rates[0] and rates[5] > rates[9]
