"""
Positional weighting and per-word category selection.

Corruption is suppressed near the start and end of a document with a
parabolic weight:

    factor(x) = 4 * x * (1 - x),   x = relative position in [0, 1]

which is 0 at both edges and peaks at 1.0 in the middle.
"""

from __future__ import annotations

import random
from typing import List, Optional

from .base import CATEGORIES, CorruptionSettings


def distribution_factor(processed_length: int, total_length: int) -> float:
    """Parabolic weight for a word ending at *processed_length* characters."""
    if total_length <= 0:
        return 0.0
    relative = processed_length / total_length
    return 4.0 * relative * (1.0 - relative)


def eligible_categories(adjusted: CorruptionSettings, rng: random.Random) -> List[str]:
    """Roll once per category; a category is eligible if its roll lands under its intensity."""
    eligible: List[str] = []
    for category in CATEGORIES:
        roll = rng.random() * 100
        if roll < adjusted.get(category):
            eligible.append(category)
    return eligible


def choose_category(adjusted: CorruptionSettings, rng: random.Random) -> Optional[str]:
    """Pick uniformly among eligible categories, or None if no roll succeeded."""
    eligible = eligible_categories(adjusted, rng)
    if not eligible:
        return None
    return rng.choice(eligible)
