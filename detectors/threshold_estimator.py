"""
Adaptive thresholds from edge statistics.

This module provides:
    • percentile(sorted_values, p)
    • estimate_thresholds(edges)
"""

import math
from typing import List, Optional, Sequence

from models.scored_edge import ScoredEdge
from models.thresholds import Thresholds
from config import get_active_params


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """
    Nearest-rank percentile of an ascending-sorted sequence.

    index = floor(p/100 * len), clamped to [0, len - 1]. No interpolation,
    so the 50th percentile of an even-length sequence is the upper median.

    Example:
        percentile([1, 2, 3, 4], 50) → 3
    """
    if len(sorted_values) == 0:
        raise ValueError("percentile of an empty sequence is undefined")

    idx = math.floor((p / 100) * len(sorted_values))
    idx = max(0, min(len(sorted_values) - 1, idx))
    return sorted_values[idx]


def estimate_thresholds(
    edges: List[ScoredEdge],
    high_percentile: Optional[float] = None,
    low_ratio: Optional[float] = None,
    connect_percentile: Optional[float] = None,
    connect_scale: Optional[float] = None,
) -> Thresholds:
    """
    Derives the run's thresholds from the scored edges:

        high    = percentile(strengths, 90)
        low     = 0.5 * high
        connect = 0.75 * percentile(lengths, 50)

    The percentages and factors default to config.get_active_params().
    """
    if not edges:
        raise ValueError("Threshold estimation needs at least one scored edge")

    params = get_active_params()
    if high_percentile is None:
        high_percentile = params["HIGH_PERCENTILE"]
    if low_ratio is None:
        low_ratio = params["LOW_RATIO"]
    if connect_percentile is None:
        connect_percentile = params["CONNECT_PERCENTILE"]
    if connect_scale is None:
        connect_scale = params["CONNECT_SCALE"]

    strengths = sorted(e.strength for e in edges)
    lengths = sorted(e.length for e in edges)

    high = percentile(strengths, high_percentile)
    return Thresholds(
        high=high,
        low=low_ratio * high,
        connect=connect_scale * percentile(lengths, connect_percentile),
    )
