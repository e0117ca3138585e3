"""
Positional error density.

The engine weights corruption by 4x(1-x) over the document.  Given the
per-word events of many runs, these helpers estimate the empirical error rate
per positional bin so the profile can be compared with that parabola.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from corruption.base import WordEvent


def density_profile(
    runs: List[List[WordEvent]],
    bins: int = 10,
    category: Optional[str] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Fraction of words that received an error, per positional bin.

    Parameters
    ----------
    runs     : one list of WordEvent per corruption run
    bins     : number of equal-width bins over [0, 1]
    category : count only this category (None = any error)

    Returns
    -------
    (bin_centers, rates); bins without any word have rate 0.
    """
    events = [e for run in runs for e in run]
    positions = np.array([e.position for e in events], dtype=float)
    hits = np.array(
        [e.category is not None and (category is None or e.category == category) for e in events],
        dtype=float,
    )

    edges = np.linspace(0.0, 1.0, bins + 1)
    words_per_bin, _ = np.histogram(positions, bins=edges)
    hits_per_bin, _ = np.histogram(positions, bins=edges, weights=hits)

    rates = np.divide(
        hits_per_bin,
        words_per_bin,
        out=np.zeros(bins, dtype=float),
        where=words_per_bin > 0,
    )
    centers = (edges[:-1] + edges[1:]) / 2.0
    return centers, rates


def expected_profile(centers: np.ndarray) -> np.ndarray:
    """The positional weight 4x(1-x) evaluated at *centers*."""
    return 4.0 * centers * (1.0 - centers)


def edge_suppression_ratio(rates: np.ndarray, edge_bins: int = 1) -> float:
    """
    Mean rate of the outermost *edge_bins* bins on each side divided by the
    mean rate of the remaining central bins.

    Values well below 1 mean corruption is concentrated mid-document.
    Returns 0.0 when the central bins saw no errors.
    """
    rates = np.asarray(rates, dtype=float)
    if len(rates) <= 2 * edge_bins:
        return 0.0
    edges = np.concatenate([rates[:edge_bins], rates[-edge_bins:]])
    center = rates[edge_bins:-edge_bins]
    center_mean = float(center.mean())
    if center_mean == 0.0:
        return 0.0
    return float(edges.mean()) / center_mean
