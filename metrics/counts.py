"""
Error-count metrics.

Counting is done on the marked output: each injected error is a span with a
category class, so the counts reported by the engine can be checked against
what a reviewer actually sees.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

from corruption.base import CATEGORIES, CorruptionResult, ErrorCounts
from corruption.markup import (
    MISSING_TEXT_CLASS,
    PUNCTUATION_ERROR_CLASS,
    SPELLING_ERROR_CLASS,
)


def _class_pattern(css_class: str) -> "re.Pattern[str]":
    return re.compile(r'<span class="' + re.escape(css_class) + r'">')


_SPELLING_RE = _class_pattern(SPELLING_ERROR_CLASS)
_PUNCTUATION_RE = _class_pattern(PUNCTUATION_ERROR_CLASS)
_MISSING_RE = _class_pattern(MISSING_TEXT_CLASS)


# ---------------------------------------------------------------------------
# Marker counting
# ---------------------------------------------------------------------------

def count_markers(marked: str) -> ErrorCounts:
    """Count error marker spans per category in a marked document."""
    return ErrorCounts(
        spelling=len(_SPELLING_RE.findall(marked)),
        punctuation=len(_PUNCTUATION_RE.findall(marked)),
        missing_text=len(_MISSING_RE.findall(marked)),
    )


def counts_consistent(result: CorruptionResult) -> bool:
    """True if the reported counts match the markers in the marked version."""
    return count_markers(result.marked_version) == result.error_counts


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def _mean_std(values: List[float]) -> Tuple[float, float]:
    n = len(values)
    if n == 0:
        return 0.0, 0.0
    mean = sum(values) / n
    variance = sum((v - mean) ** 2 for v in values) / n
    return mean, variance ** 0.5


def aggregate_counts(counts: List[ErrorCounts]) -> Dict[str, float]:
    """
    Mean and standard deviation of each category over a list of runs.

    Returns keys like ``spelling_mean``, ``spelling_std``, ..., ``total_mean``,
    ``total_std`` and ``n``.
    """
    out: Dict[str, float] = {"n": float(len(counts))}
    for category in CATEGORIES:
        mean, std = _mean_std([float(c.get(category)) for c in counts])
        out[f"{category}_mean"] = mean
        out[f"{category}_std"] = std
    mean, std = _mean_std([float(c.total) for c in counts])
    out["total_mean"] = mean
    out["total_std"] = std
    return out


def build_response_curve(
    counts_by_level: Dict[float, List[ErrorCounts]],
    category: str,
) -> Tuple[List[float], List[float]]:
    """
    Build sorted (levels, mean_counts) lists for one category from runs keyed
    by intensity level.
    """
    pairs = [
        (level, aggregate_counts(runs)[f"{category}_mean"])
        for level, runs in counts_by_level.items()
    ]
    pairs.sort(key=lambda x: x[0])
    levels = [p[0] for p in pairs]
    means = [p[1] for p in pairs]
    return levels, means


def is_non_decreasing(values: List[float], tolerance: float = 0.0) -> bool:
    """True if each value is at least the previous one minus *tolerance*."""
    return all(b >= a - tolerance for a, b in zip(values, values[1:]))
