"""
HTML-aware tokenizer.

Splits an HTML string into an ordered list of segments, each either a single
tag (markup, preserved verbatim) or a run of text between tags (to be
corrupted).  Tokenization is lossless: joining every segment's content
reproduces the input exactly.

There is no real HTML parsing here.  A stray ``<`` without a closing ``>``
simply ends up inside a text segment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")
_WORD_PUNCT_RE = re.compile(r"^(\w+)(\W*)$")


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Segment:
    is_markup: bool
    content: str


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------

def _make_segment(chunk: str) -> Segment:
    return Segment(
        is_markup=chunk.startswith("<") and chunk.endswith(">"),
        content=chunk,
    )


def tokenize(html: str) -> List[Segment]:
    """
    Split *html* into markup and text segments in document order.

    A chunk is flushed whenever a ``<`` starts or a ``>`` ends a tag.  Chunks
    that start with ``<`` and end with ``>`` are markup; everything else
    (including unterminated tag fragments) is text.
    """
    segments: List[Segment] = []
    current: List[str] = []

    for ch in html:
        if ch == "<":
            if current:
                segments.append(_make_segment("".join(current)))
                current = []
            current.append(ch)
        elif ch == ">":
            current.append(ch)
            segments.append(_make_segment("".join(current)))
            current = []
        else:
            current.append(ch)

    if current:
        segments.append(_make_segment("".join(current)))

    return segments


def split_words(text: str) -> List[str]:
    """Split on whitespace, keeping the whitespace runs as their own tokens."""
    return [token for token in _WHITESPACE_SPLIT_RE.split(text) if token]


def split_attached_punctuation(word: str) -> Tuple[str, str]:
    """
    Split a word into (word_run, trailing_punctuation).

    E.g. 'hello,' → ('hello', ','), 'end?!' → ('end', '?!').
    Words that are not a word-character run followed by non-word characters
    (e.g. "don't", '"quoted') come back whole with empty punctuation.
    """
    match = _WORD_PUNCT_RE.match(word)
    if match is None:
        return word, ""
    return match.group(1), match.group(2)
