"""
Visualization utilities for stipple points, kept edges and chains.

This module provides:
    • blank_canvas(shape_hw)
    • draw_points(img, points)
    • draw_voronoi_cells(img, points)
    • draw_kept_edges(img, edges)
    • draw_chains(img, chains)
    • build_edge_mask(edges, shape_hw)

Used by:
    - visualization.save_outputs
"""

from typing import List, Sequence, Tuple

import cv2
import numpy as np
from scipy.spatial import Voronoi, QhullError

from models.chain import Chain
from models.point import Point
from models.scored_edge import ScoredEdge
from utils.bresenham_utils import bres_line
from config import COLOR_POINT, COLOR_KEPT, COLOR_CHAIN, COLOR_VORONOI, COLOR_BACKGROUND


def blank_canvas(shape_hw: Tuple[int, int]) -> np.ndarray:
    h, w = shape_hw
    canvas = np.empty((h, w, 3), dtype=np.uint8)
    canvas[:] = COLOR_BACKGROUND
    return canvas


# ---------------------------------------------------------------------
#  Stipple points
# ---------------------------------------------------------------------

def draw_points(
    image,
    points: Sequence[Point],
    color: Tuple[int, int, int] = COLOR_POINT,
    radius: int = 1
):
    for p in points:
        cv2.circle(image, p.as_pixel(), radius, color, thickness=-1)
    return image


# ---------------------------------------------------------------------
#  Kept edges (straight segments)
# ---------------------------------------------------------------------

def draw_kept_edges(
    image,
    edges: List[ScoredEdge],
    color: Tuple[int, int, int] = COLOR_KEPT,
    thickness: int = 1
):
    for e in edges:
        cv2.line(image, e.a.as_pixel(), e.b.as_pixel(), color, thickness)
    return image


# ---------------------------------------------------------------------
#  Smoothed chains (open polylines)
# ---------------------------------------------------------------------

def draw_chains(
    image,
    chains: List[Chain],
    color: Tuple[int, int, int] = COLOR_CHAIN,
    thickness: int = 1
):
    """
    Strokes every chain as an open polyline (never closed, even when the
    chain ends where it started).
    """
    polylines = [
        np.array([p.as_pixel() for p in c.points], dtype=np.int32).reshape(-1, 1, 2)
        for c in chains
        if len(c.points) >= 2
    ]
    if polylines:
        cv2.polylines(image, polylines, isClosed=False, color=color,
                      thickness=thickness, lineType=cv2.LINE_AA)
    return image


# ---------------------------------------------------------------------
#  Binary mask of kept edges
# ---------------------------------------------------------------------

def build_edge_mask(edges: List[ScoredEdge], shape_hw: Tuple[int, int]) -> np.ndarray:
    """
    Rasterises every kept edge with Bresenham into a 0/255 uint8 mask.
    Pixels outside the image are ignored.
    """
    h, w = shape_hw
    mask = np.zeros((h, w), dtype=np.uint8)

    for e in edges:
        x1, y1 = e.a.as_pixel()
        x2, y2 = e.b.as_pixel()
        for x, y in bres_line(x1, y1, x2, y2):
            if 0 <= x < w and 0 <= y < h:
                mask[y, x] = 255

    return mask


# ---------------------------------------------------------------------
#  Voronoi cells of the stipple points
# ---------------------------------------------------------------------

def draw_voronoi_cells(
    image,
    points: Sequence[Point],
    color: Tuple[int, int, int] = COLOR_VORONOI,
    thickness: int = 1
):
    """
    Outlines every bounded Voronoi cell as a closed polygon.

    Unbounded border cells, and cells with a vertex further than one
    image size outside the canvas, are skipped.
    """
    if len(points) < 3:
        raise ValueError(f"Voronoi diagram needs at least 3 points, got {len(points)}")

    coords = np.array([[p.x, p.y] for p in points], dtype=np.float64)
    try:
        vor = Voronoi(coords)
    except QhullError as exc:
        raise ValueError(f"Cannot build Voronoi diagram: {exc}") from exc

    h, w = image.shape[:2]
    polygons = []
    for region_idx in vor.point_region:
        region = vor.regions[region_idx]
        if not region or -1 in region:
            continue

        verts = vor.vertices[region]
        if (verts[:, 0] < -w).any() or (verts[:, 0] > 2 * w).any():
            continue
        if (verts[:, 1] < -h).any() or (verts[:, 1] > 2 * h).any():
            continue

        polygons.append(np.round(verts).astype(np.int32).reshape(-1, 1, 2))

    if polygons:
        cv2.polylines(image, polygons, isClosed=True, color=color, thickness=thickness)
    return image
