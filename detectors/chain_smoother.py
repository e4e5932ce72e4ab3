"""
Corner-cutting subdivision for open chains.

This module provides:
    • corner_cut(points)
    • smooth_chain(chain, iterations)
    • smooth_chains(chains, iterations)
"""

from typing import List, Optional

from models.chain import Chain
from models.point import Point
from utils.geometry import lerp
from config import get_active_params


def corner_cut(points: List[Point]) -> List[Point]:
    """
    One open-curve pass:
        [p0, p1, ..., pn] → [p0, Q0, R0, ..., Qn-1, Rn-1, pn]
    with Q = lerp(pi, pi+1, 0.25) and R = lerp(pi, pi+1, 0.75).

    Fewer than 3 points are returned unchanged.
    """
    if len(points) < 3:
        return points

    out = [points[0]]
    for p, q in zip(points, points[1:]):
        out.append(lerp(p, q, 0.25))
        out.append(lerp(p, q, 0.75))
    out.append(points[-1])
    return out


def smooth_chain(chain: Chain, iterations: Optional[int] = None) -> Chain:
    """
    Applies `iterations` corner-cutting passes and returns a new Chain
    (same edges, smoothed points). Endpoints are preserved exactly.
    """
    if iterations is None:
        iterations = get_active_params()["SMOOTH_ITERATIONS"]
    if iterations < 0:
        raise ValueError(f"Smoothing iterations must be >= 0, got {iterations}")

    pts = list(chain.points)
    for _ in range(iterations):
        pts = corner_cut(pts)

    return Chain(points=pts, edges=list(chain.edges))


def smooth_chains(chains: List[Chain], iterations: Optional[int] = None) -> List[Chain]:
    if iterations is None:
        iterations = get_active_params()["SMOOTH_ITERATIONS"]
    return [smooth_chain(c, iterations) for c in chains]
