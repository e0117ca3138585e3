"""
Static lexicon tables used by the spelling and punctuation corruptors.

These are read-only module constants.  A corruptor instance may be given its
own tables instead (see ``load_misspellings`` for reading one from JSON).
"""

from __future__ import annotations

import json
import os
from typing import Dict, List, Tuple

# ---------------------------------------------------------------------------
# Common misspellings for frequent English words
# ---------------------------------------------------------------------------

COMMON_MISSPELLINGS: Dict[str, List[str]] = {
    "the": ["teh", "hte", "te", "tthe"],
    "and": ["adn", "nad", "annd", "an"],
    "that": ["taht", "tht", "thta", "tat"],
    "have": ["ahve", "hve", "haev", "habe"],
    "for": ["fro", "fo", "forr", "fer"],
    "not": ["ont", "nto", "nott", "nat"],
    "with": ["wiht", "wth", "witth", "whit"],
    "this": ["tihs", "ths", "thsi", "tis"],
    "from": ["form", "frm", "fomr", "frum"],
    "they": ["tehy", "thye", "tey", "tthey"],
    "would": ["wuold", "wold", "wouuld", "wuld"],
    "there": ["theer", "ther", "tehre", "thre"],
    "their": ["thier", "thir", "theri", "ther"],
    "what": ["waht", "wht", "whta", "wat"],
    "which": ["whcih", "wich", "whihc", "wich"],
    "when": ["wehn", "whn", "wheen", "wen"],
    "were": ["wrer", "wre", "weer", "whre"],
    "will": ["wlil", "wll", "willl", "wiil"],
    "more": ["mroe", "mor", "moer", "morre"],
    "about": ["aobut", "abut", "abuot", "abotu"],
}


# ---------------------------------------------------------------------------
# Punctuation errors: mark → plausible wrong replacements ("" = dropped)
# ---------------------------------------------------------------------------

PUNCTUATION_ERRORS: Dict[str, List[str]] = {
    ".": ["", ",", "!", "?", ".."],
    ",": ["", ".", ";", ":"],
    "!": ["", ".", "?", "!!"],
    "?": ["", ".", "!", "??"],
    ";": ["", ":", ",", "."],
    ":": ["", ";", "."],
    "'": ["", "`"],
}

INJECTED_PUNCTUATION: Tuple[str, ...] = (",", ".", ";", ":")
"""Marks that may be appended to a word that had no trailing punctuation."""

MUTATION_ALPHABET = "abcdefghijklmnoprstuvwxyz"
"""Letters used for insertion / substitution (25 letters, no 'q')."""

SENTENCE_TERMINALS: Tuple[str, ...] = (".", "!", "?")


# ---------------------------------------------------------------------------
# Loading custom tables
# ---------------------------------------------------------------------------

def load_misspellings(path: str) -> Dict[str, List[str]]:
    """
    Read a misspelling table from a JSON object of the form
    ``{"word": ["variant", ...], ...}``.

    Keys are lowercased so lookups match the corruptor's behaviour.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Lexicon JSON not found: {path}")
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError("Lexicon JSON must be an object mapping words to lists of variants.")

    table: Dict[str, List[str]] = {}
    for word, variants in data.items():
        if not isinstance(variants, list) or not variants:
            raise ValueError(f"Lexicon entry '{word}' must be a non-empty list of strings.")
        if not all(isinstance(v, str) and v for v in variants):
            raise ValueError(f"Lexicon entry '{word}' contains an empty or non-string variant.")
        table[word.lower()] = list(variants)
    return table
