from .counts import (
    count_markers,
    counts_consistent,
    aggregate_counts,
    build_response_curve,
    is_non_decreasing,
)
from .density import (
    density_profile,
    expected_profile,
    edge_suppression_ratio,
)

__all__ = [
    # counts
    "count_markers",
    "counts_consistent",
    "aggregate_counts",
    "build_response_curve",
    "is_non_decreasing",
    # positional density
    "density_profile",
    "expected_profile",
    "edge_suppression_ratio",
]
