"""
Central configuration for the HTML text corruptor.
All tunable parameters live here so runner.py and analysis.py stay clean.

Environment variables (loaded from .env if present) override defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from dotenv import load_dotenv

load_dotenv(dotenv_path=os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"))


# ---------------------------------------------------------------------------
# Default intensities (percent)
# ---------------------------------------------------------------------------

DEFAULT_SPELLING = float(os.environ.get("CORRUPTION_SPELLING", "3"))
DEFAULT_PUNCTUATION = float(os.environ.get("CORRUPTION_PUNCTUATION", "2"))
DEFAULT_MISSING_TEXT = float(os.environ.get("CORRUPTION_MISSING_TEXT", "4"))

_seed = os.environ.get("CORRUPTION_SEED", "")
DEFAULT_SEED: Optional[int] = int(_seed) if _seed else None
"""Seed for reproducible runs; unset means a fresh random run each time."""

SENTENCE_REMOVAL_THRESHOLD = 50.0
"""Missing-text intensity above which whole sentences may be removed."""


# ---------------------------------------------------------------------------
# Simulation sweep (analysis.py)
# ---------------------------------------------------------------------------

INTENSITY_LEVELS: List[float] = [round(v, 1) for v in np.linspace(0.0, 100.0, 11).tolist()]
"""11 intensity levels: 0, 10, 20, ..., 100"""

SIMULATION_SEEDS = int(os.environ.get("SIMULATION_SEEDS", "20"))
"""Independent corruption runs per (document, intensity level)."""

POSITION_BINS = 10
"""Number of positional bins for the error density profile."""

CATEGORY_LABELS = {
    "spelling": "Spelling",
    "punctuation": "Punctuation",
    "missing_text": "Missing text",
}


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
OUTPUT_DIR = os.path.join(BASE_DIR, "output")
PLOTS_DIR = os.path.join(BASE_DIR, "plots")
RESULTS_FILENAME = "results.jsonl"


# ---------------------------------------------------------------------------
# Dataclass for a simulation sweep
# ---------------------------------------------------------------------------

@dataclass
class SweepConfig:
    intensity_levels: List[float] = field(default_factory=lambda: INTENSITY_LEVELS)
    categories: List[str] = field(default_factory=lambda: list(CATEGORY_LABELS))
    seeds: int = SIMULATION_SEEDS
    position_bins: int = POSITION_BINS
    max_docs: Optional[int] = None  # cap number of documents (useful for quick tests)
