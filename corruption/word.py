"""
Word-level corruptor: removes the whole word.

The word and its attached punctuation disappear from the plain output; the
marked output shows a "missing text" marker in their place.  Surrounding
whitespace is untouched.
"""

from __future__ import annotations

import random
from typing import Optional

from .base import MISSING_TEXT, BaseCorruptor, WordEdit
from .markup import MISSING_TEXT_MARKER


class MissingTextCorruptor(BaseCorruptor):

    category = MISSING_TEXT

    def __init__(self, marker: str = MISSING_TEXT_MARKER) -> None:
        self.marker = marker

    def apply(self, word: str, punctuation: str, rng: random.Random) -> Optional[WordEdit]:
        return WordEdit(plain="", marked=self.marker)
