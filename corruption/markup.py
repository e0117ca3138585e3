"""
Markers used in the marked output, plus small helpers for presenting the
two output documents (tag stripping, review header, output file naming).
"""

from __future__ import annotations

import html
import re

from .base import ErrorCounts
from .tokenizer import tokenize

SPELLING_ERROR_CLASS = "spelling-error"
PUNCTUATION_ERROR_CLASS = "punctuation-error"
MISSING_TEXT_CLASS = "missing-text"

MISSING_TEXT_MARKER = f'<span class="{MISSING_TEXT_CLASS}">&lt;Missing Text&gt;</span>'
MISSING_SENTENCE_MARKER = f'<span class="{MISSING_TEXT_CLASS}">&lt;Missing Sentence&gt;</span>'

_WHITESPACE_RE = re.compile(r"\s+")


def mark_spelling(word: str) -> str:
    return f'<span class="{SPELLING_ERROR_CLASS}">{word}</span>'


def mark_punctuation(punctuation: str) -> str:
    return f'<span class="{PUNCTUATION_ERROR_CLASS}">{punctuation}</span>'


def strip_tags(document: str) -> str:
    """Return the text content of *document* with every tag removed."""
    return "".join(seg.content for seg in tokenize(document) if not seg.is_markup)


def build_report_header(
    counts: ErrorCounts,
    candidate_name: str = "",
    assignment_name: str = "",
) -> str:
    """
    Review header prepended to the marked document.

    Only produced when a candidate or assignment name is known; returns an
    empty string otherwise.
    """
    if not (candidate_name or assignment_name):
        return ""

    parts = ['<div class="report-header">']
    if candidate_name:
        parts.append(f'<div class="candidate">Candidate: {html.escape(candidate_name)}</div>')
    if assignment_name:
        parts.append(f'<div class="assignment">Assignment: {html.escape(assignment_name)}</div>')
    parts.append('<div class="error-summary">')
    parts.append(f"<div>Spelling Errors: {counts.spelling}</div>")
    parts.append(f"<div>Punctuation Errors: {counts.punctuation}</div>")
    parts.append(f"<div>Missing Text: {counts.missing_text}</div>")
    parts.append("</div>")
    parts.append("</div>")
    return "".join(parts)


def output_basename(candidate_name: str = "", assignment_name: str = "") -> str:
    """'Jane Doe', 'Essay 1' → 'Jane_Doe_Essay_1'; blanks fall back to defaults."""
    name_part = _WHITESPACE_RE.sub("_", candidate_name.strip()) or "Candidate"
    assignment_part = _WHITESPACE_RE.sub("_", assignment_name.strip()) or "Assignment"
    return f"{name_part}_{assignment_part}"
