"""
This module provides:
    - distance
    - within_tolerance   (shared "touching" predicate)
    - lerp
    - clamp
"""

import math

from models.point import Point


# ----------------------------------------------------------------------
#  EUCLIDEAN DISTANCE
# ----------------------------------------------------------------------

def distance(p: Point, q: Point) -> float:
    return math.hypot(p.x - q.x, p.y - q.y)


# ----------------------------------------------------------------------
#  TOUCHING PREDICATE
# ----------------------------------------------------------------------

def within_tolerance(p: Point, q: Point, tolerance: float) -> bool:
    """
    True when p and q are strictly closer than `tolerance`.

    Used both by hysteresis (edge touches edge) and by the chain builder
    (edge endpoint touches chain head/tail). A tolerance of 0 never matches.
    """
    return distance(p, q) < tolerance


# ----------------------------------------------------------------------
#  LINEAR INTERPOLATION
# ----------------------------------------------------------------------

def lerp(p: Point, q: Point, t: float) -> Point:
    """
    Point at fraction t along p -> q.

    Example: lerp(Point(0, 0), Point(4, 0), 0.25) → Point(1, 0)
    """
    return Point(p.x + (q.x - p.x) * t, p.y + (q.y - p.y) * t)


# ----------------------------------------------------------------------
#  CLAMP
# ----------------------------------------------------------------------

def clamp(value, lo, hi):
    return max(lo, min(hi, value))
