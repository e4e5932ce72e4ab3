"""
Two-threshold hysteresis over a graph of scored edges.

This module provides:
    • edges_touch(e1, e2, tolerance)
    • split_by_strength(edges, thresholds)
    • apply_hysteresis(edges, thresholds)

Canny-style edge linking generalised from the pixel grid to an arbitrary
planar graph: strong edges seed the kept set, and a weak edge is kept
only if a chain of touching weak edges connects it to some strong edge.
"""

from typing import List, Tuple

from models.scored_edge import ScoredEdge
from models.thresholds import Thresholds
from utils.geometry import within_tolerance


def edges_touch(e1: ScoredEdge, e2: ScoredEdge, tolerance: float) -> bool:
    """
    True if any endpoint of e1 lies strictly within `tolerance` of any
    endpoint of e2 (a-a, a-b, b-a, b-b).
    """
    return (
        within_tolerance(e1.a, e2.a, tolerance)
        or within_tolerance(e1.a, e2.b, tolerance)
        or within_tolerance(e1.b, e2.a, tolerance)
        or within_tolerance(e1.b, e2.b, tolerance)
    )


def split_by_strength(
    edges: List[ScoredEdge], thresholds: Thresholds
) -> Tuple[List[ScoredEdge], List[ScoredEdge]]:
    """
    strong: strength >= high
    weak:   low <= strength < high
    Everything below low is dropped.
    """
    strong = [e for e in edges if e.strength >= thresholds.high]
    weak = [e for e in edges if thresholds.low <= e.strength < thresholds.high]
    return strong, weak


def apply_hysteresis(edges: List[ScoredEdge], thresholds: Thresholds) -> List[ScoredEdge]:
    """
    Depth-first flood fill from the strong edges through touching weak edges.

    Returns
    -------
    list[ScoredEdge]
        The kept edges in insertion order: all strong edges (input order),
        then weak edges in the order they were reached. Every returned edge
        has `selected = True`; every other input edge has `selected = False`.

    Notes
    -----
    The stack is LIFO and weak candidates are scanned in input order.
    Changing either affects discovery order only, never membership.
    """
    for e in edges:
        e.selected = False

    strong, weak = split_by_strength(edges, thresholds)

    kept = []
    for e in strong:
        e.selected = True
        kept.append(e)

    stack = list(strong)
    while stack:
        cur = stack.pop()
        for e in weak:
            if e.selected:
                continue
            if edges_touch(cur, e, thresholds.connect):
                e.selected = True
                kept.append(e)
                stack.append(e)

    return kept
