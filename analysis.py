"""
Simulation analysis and plotting.

Runs the corruption engine many times over a corpus to check its
statistical behaviour:

  1. Intensity response – mean error count per category as that category's
     intensity is swept (others held at 0).  Should be non-decreasing.
  2. Positional density – error rate per positional bin, compared with the
     4x(1-x) weighting.  Should be suppressed at both document edges.

Usage
-----
python analysis.py
python analysis.py --seeds 50 --density-intensity 40
python analysis.py --corpus-json my_corpus.json --no-plots   # tables only
"""

from __future__ import annotations

import argparse
import os
import sys
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

# ---------------------------------------------------------------------------
# Local imports
# ---------------------------------------------------------------------------
from config import CATEGORY_LABELS, PLOTS_DIR, SweepConfig
from corpus.loader import CorpusLoader, DocumentEntry
from corruption import CorruptionSettings, ErrorCounts, TextCorruptor, WordEvent
from metrics.counts import build_response_curve, is_non_decreasing
from metrics.density import density_profile, edge_suppression_ratio, expected_profile


# ---------------------------------------------------------------------------
# Simulations
# ---------------------------------------------------------------------------

def _settings_for(category: str, level: float) -> CorruptionSettings:
    values = {c: 0.0 for c in CATEGORY_LABELS}
    values[category] = level
    return CorruptionSettings(**values)


def run_intensity_sweep(
    documents: List[DocumentEntry],
    config: SweepConfig,
    corruptor: Optional[TextCorruptor] = None,
) -> Dict[str, Dict[float, List[ErrorCounts]]]:
    """
    Returns {category: {level: [ErrorCounts, ...]}} with one entry per
    (document, seed) at every level.
    """
    if corruptor is None:
        corruptor = TextCorruptor()

    sweep: Dict[str, Dict[float, List[ErrorCounts]]] = {}
    for category in config.categories:
        by_level: Dict[float, List[ErrorCounts]] = defaultdict(list)
        for level in config.intensity_levels:
            settings = _settings_for(category, level)
            for doc in documents:
                for seed in range(config.seeds):
                    result = corruptor.corrupt(doc.html, settings, seed=seed)
                    by_level[level].append(result.error_counts)
        sweep[category] = dict(by_level)
    return sweep


def run_density_simulation(
    documents: List[DocumentEntry],
    settings: CorruptionSettings,
    seeds: int,
    corruptor: Optional[TextCorruptor] = None,
) -> List[List[WordEvent]]:
    """One list of WordEvent per (document, seed)."""
    if corruptor is None:
        corruptor = TextCorruptor()
    runs: List[List[WordEvent]] = []
    for doc in documents:
        for seed in range(seeds):
            _, events = corruptor.corrupt_with_trace(doc.html, settings, seed=seed)
            runs.append(events)
    return runs


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

def summarise_sweep(
    sweep: Dict[str, Dict[float, List[ErrorCounts]]],
) -> Dict[str, Tuple[List[float], List[float]]]:
    """{category: (levels, mean_counts)}; prints one table per category."""
    curves: Dict[str, Tuple[List[float], List[float]]] = {}
    for category, by_level in sweep.items():
        levels, means = build_response_curve(by_level, category)
        curves[category] = (levels, means)
        monotone = is_non_decreasing(means, tolerance=0.5)
        print(f"\n  {CATEGORY_LABELS.get(category, category)} "
              f"(non-decreasing: {'yes' if monotone else 'NO'})")
        print(f"    {'Level':>7}  {'Mean count':>10}")
        for level, mean in zip(levels, means):
            print(f"    {level:>7.1f}  {mean:>10.2f}")
    return curves


def summarise_density(runs: List[List[WordEvent]], bins: int):
    centers, rates = density_profile(runs, bins=bins)
    expected = expected_profile(centers)
    peak = rates.max() if len(rates) and rates.max() > 0 else 1.0
    print(f"\n  Positional density ({len(runs)} runs)")
    print(f"    {'Position':>8}  {'Rate':>7}  {'Scaled':>7}  {'4x(1-x)':>7}")
    for c, r, e in zip(centers, rates, expected):
        print(f"    {c:>8.2f}  {r:>7.3f}  {r / peak:>7.3f}  {e:>7.3f}")
    ratio = edge_suppression_ratio(rates)
    print(f"    Edge / centre ratio: {ratio:.3f}")
    return centers, rates


# ---------------------------------------------------------------------------
# Plotting
# ---------------------------------------------------------------------------

def plot_results(
    curves: Dict[str, Tuple[List[float], List[float]]],
    centers,
    rates,
    plots_dir: str,
) -> List[str]:
    """Save the intensity response and density figures; return their paths."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # type: ignore[import]

    os.makedirs(plots_dir, exist_ok=True)
    paths: List[str] = []

    fig, ax = plt.subplots(figsize=(6, 4))
    for category, (levels, means) in curves.items():
        ax.plot(levels, means, marker="o", label=CATEGORY_LABELS.get(category, category))
    ax.set_xlabel("Intensity (%)")
    ax.set_ylabel("Mean errors per document")
    ax.set_title("Intensity response")
    ax.legend()
    ax.grid(alpha=0.3)
    path = os.path.join(plots_dir, "intensity_response.png")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    paths.append(path)

    fig, ax = plt.subplots(figsize=(6, 4))
    peak = max(float(rates.max()), 1e-9)
    ax.bar(centers, rates / peak, width=0.8 / len(centers), alpha=0.6, label="Observed (scaled)")
    ax.plot(centers, expected_profile(centers), color="black", label="4x(1-x)")
    ax.set_xlabel("Relative position in document")
    ax.set_ylabel("Error rate (scaled to peak)")
    ax.set_title("Positional error density")
    ax.legend()
    path = os.path.join(plots_dir, "positional_density.png")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    paths.append(path)

    return paths


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = SweepConfig()
    parser = argparse.ArgumentParser(description="Simulate and analyse corruption statistics.")
    parser.add_argument("--corpus-json", type=str, default=None,
                        help="Path to a JSON corpus file (default: built-in sample documents)")
    parser.add_argument("--html-dir", type=str, default=None,
                        help="Directory of .html files")
    parser.add_argument("--max-docs", type=int, default=None,
                        help="Cap the number of documents")
    parser.add_argument("--seeds", type=int, default=defaults.seeds,
                        help="Corruption runs per (document, level)")
    parser.add_argument("--bins", type=int, default=defaults.position_bins,
                        help="Positional bins for the density profile")
    parser.add_argument("--density-intensity", type=float, default=30.0,
                        help="Intensity used for every category in the density simulation")
    parser.add_argument("--plots-dir", type=str, default=PLOTS_DIR)
    parser.add_argument("--no-plots", action="store_true", help="Skip plot generation")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    loader = CorpusLoader(json_path=args.corpus_json, html_dir=args.html_dir, max_docs=args.max_docs)
    documents = loader.load()
    if not documents:
        print("ERROR: No documents loaded. Check your corpus source.", file=sys.stderr)
        sys.exit(1)
    print(f"Loaded {len(documents)} documents.")

    config = SweepConfig(seeds=args.seeds, position_bins=args.bins, max_docs=args.max_docs)
    corruptor = TextCorruptor()

    print("\n=== Intensity response ===")
    sweep = run_intensity_sweep(documents, config, corruptor)
    curves = summarise_sweep(sweep)

    print("\n=== Positional density ===")
    level = args.density_intensity
    runs = run_density_simulation(
        documents,
        CorruptionSettings(spelling=level, punctuation=level, missing_text=level),
        seeds=config.seeds,
        corruptor=corruptor,
    )
    centers, rates = summarise_density(runs, config.position_bins)

    if not args.no_plots:
        for path in plot_results(curves, centers, rates, args.plots_dir):
            print(f"  Saved: {path}")


if __name__ == "__main__":
    main()
