"""
Weighted stippling: the point-distribution phase that runs before edge
extraction.

This module provides:
    • generate_weighted_points(sampler, n, rng)
    • relax_points(points, sampler, rate)
    • stipple(sampler, n, iterations, rate, rng)

Points are biased toward dark regions: rejection sampling seeds them,
then weighted Lloyd relaxation pulls each point toward the
darkness-weighted centroid of the pixels nearest to it.
"""

from typing import List, Optional

import numpy as np
from scipy.spatial import cKDTree

from models.point import Point
from sampling.intensity import ImageIntensitySampler
from config import get_active_params


# ----------------------------------------------------------------------
# 1. INITIAL DISTRIBUTION (rejection sampling)
# ----------------------------------------------------------------------

def generate_weighted_points(
    sampler: ImageIntensitySampler,
    n: int,
    rng: Optional[np.random.Generator] = None,
) -> List[Point]:
    """
    Draws n points uniformly over the image, keeping each with probability
    1 - brightness/255.
    """
    if n <= 0:
        raise ValueError(f"Point count must be positive, got {n}")
    if not np.any(sampler.brightness < 255):
        raise ValueError("Image has no dark pixels to stipple")

    if rng is None:
        rng = np.random.default_rng()

    accepted_x = []
    accepted_y = []
    remaining = n

    while remaining > 0:
        batch = max(remaining * 2, 64)
        xs = rng.uniform(0, sampler.width, batch)
        ys = rng.uniform(0, sampler.height, batch)
        bright = sampler.sample(xs, ys)

        keep = rng.uniform(0, 100, batch) > bright / 255.0 * 100
        xs, ys = xs[keep][:remaining], ys[keep][:remaining]

        accepted_x.append(xs)
        accepted_y.append(ys)
        remaining -= len(xs)

    xs = np.concatenate(accepted_x)
    ys = np.concatenate(accepted_y)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


# ----------------------------------------------------------------------
# 2. ONE WEIGHTED LLOYD STEP
# ----------------------------------------------------------------------

def relax_points(
    points: List[Point],
    sampler: ImageIntensitySampler,
    rate: Optional[float] = None,
) -> List[Point]:
    """
    Moves every point `rate` of the way toward the darkness-weighted
    centroid of its Voronoi cell (pixels whose nearest point it is).

    Points whose cell carries no weight stay where they are.
    Returns a new list; the input is not modified.
    """
    if not points:
        raise ValueError("Cannot relax an empty point set")

    if rate is None:
        rate = get_active_params()["RELAX_RATE"]

    coords = np.array([[p.x, p.y] for p in points], dtype=np.float64)

    ys, xs = np.mgrid[0:sampler.height, 0:sampler.width]
    xs = xs.ravel().astype(np.float64)
    ys = ys.ravel().astype(np.float64)
    w = sampler.darkness().ravel()

    _, owner = cKDTree(coords).query(np.column_stack([xs, ys]))

    count = len(points)
    weights = np.bincount(owner, weights=w, minlength=count)
    cx = np.bincount(owner, weights=xs * w, minlength=count)
    cy = np.bincount(owner, weights=ys * w, minlength=count)

    has_weight = weights > 0
    target = coords.copy()
    target[has_weight, 0] = cx[has_weight] / weights[has_weight]
    target[has_weight, 1] = cy[has_weight] / weights[has_weight]

    moved = coords + (target - coords) * rate
    return [Point(float(x), float(y)) for x, y in moved]


# ----------------------------------------------------------------------
# 3. FULL DISTRIBUTION PHASE
# ----------------------------------------------------------------------

def stipple(
    sampler: ImageIntensitySampler,
    n: Optional[int] = None,
    iterations: Optional[int] = None,
    rate: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
    verbose: bool = False,
) -> List[Point]:
    """
    Generates n weighted points and relaxes them `iterations` times.
    Missing arguments come from config.get_active_params().
    """
    params = get_active_params()
    if n is None:
        n = params["POINT_COUNT"]
    if iterations is None:
        iterations = params["STIPPLE_ITERATIONS"]
    if rate is None:
        rate = params["RELAX_RATE"]
    if rng is None:
        rng = np.random.default_rng(params["RANDOM_SEED"])

    points = generate_weighted_points(sampler, n, rng)

    for k in range(iterations):
        points = relax_points(points, sampler, rate)
        if verbose and ((k + 1) % 10 == 0 or k + 1 == iterations):
            print(f"[INFO] Stippling iteration {k + 1}/{iterations}")

    return points
