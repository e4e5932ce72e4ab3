"""
Edge scorer: turns a point set + neighbor graph into scored edges.

This module provides:
    • score_edges(points, graph, sampler)
    • intensity_at(point, sampler)
"""

import math
from typing import List, Sequence

from models.point import Point
from models.scored_edge import ScoredEdge
from utils.geometry import distance


def intensity_at(point: Point, sampler) -> float:
    """
    Brightness under a point, sampled at its floored pixel coordinate.
    The sampler clamps coordinates that fall outside the image.
    """
    return sampler.at(math.floor(point.x), math.floor(point.y))


def score_edges(points: Sequence[Point], graph, sampler) -> List[ScoredEdge]:
    """
    Scores every undirected neighbor-graph edge exactly once.

    Parameters
    ----------
    points : sequence[Point]
        Point set with stable indices for this run.
    graph : object with neighbors(i) -> iterable[int]
        Symmetric planar adjacency (e.g. DelaunayNeighborGraph).
    sampler : object with at(x, y) -> float
        Brightness lookup (e.g. ImageIntensitySampler).

    Returns
    -------
    list[ScoredEdge]
        One edge per pair, emitted from its lower-indexed endpoint, with
        strength = |I(i) - I(j)| and length = |p_i - p_j|.

    Raises
    ------
    ValueError  empty point set, or a point listed as its own neighbor
    IndexError  neighbor index outside the point set
    """
    n = len(points)
    if n == 0:
        raise ValueError("Edge scorer needs a non-empty point set")

    intensities = [intensity_at(p, sampler) for p in points]
    edges = []

    for i in range(n):
        for j in graph.neighbors(i):
            if j < 0 or j >= n:
                raise IndexError(
                    f"Neighbor graph reported index {j} for point {i}; "
                    f"valid range is [0, {n})"
                )
            if j == i:
                raise ValueError(f"Neighbor graph lists point {i} as its own neighbor")

            # the pair is emitted once, when visited from its lower index
            if j < i:
                continue

            edges.append(ScoredEdge(
                a=points[i],
                b=points[j],
                strength=abs(intensities[i] - intensities[j]),
                length=distance(points[i], points[j]),
            ))

    return edges
