"""
Centralized output-saving utilities for the edge-extraction pipeline.

This module provides:
    • save_all_outputs(...)
    • save_voronoi(...)
    • save_stipple(...)
    • save_kept_edges(...)
    • save_edge_mask(...)
    • save_chains(...)
    • save_sobel(...)

Uses draw_edges and sobel to visualize and utils.image_io for filesystem
handling.
"""

from typing import List, Sequence, Tuple

import numpy as np

from models.chain import Chain
from models.point import Point
from models.scored_edge import ScoredEdge

from visualization.draw_edges import (
    blank_canvas,
    draw_points,
    draw_voronoi_cells,
    draw_kept_edges,
    draw_chains,
    build_edge_mask,
)
from visualization.sobel import build_sobel_image
from utils.image_io import save_image, ensure_output_dir


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_voronoi(path: str, shape_hw: Tuple[int, int], points: Sequence[Point]):
    save_image(path, draw_voronoi_cells(blank_canvas(shape_hw), points))


def save_stipple(path: str, shape_hw: Tuple[int, int], points: Sequence[Point]):
    save_image(path, draw_points(blank_canvas(shape_hw), points))


def save_kept_edges(path: str, shape_hw: Tuple[int, int], edges: List[ScoredEdge]):
    save_image(path, draw_kept_edges(blank_canvas(shape_hw), edges))


def save_edge_mask(path: str, shape_hw: Tuple[int, int], edges: List[ScoredEdge]):
    """
    Writes the 0/255 Bresenham mask of the kept edges.
    """
    save_image(path, build_edge_mask(edges, shape_hw))


def save_chains(path: str, shape_hw: Tuple[int, int], chains: List[Chain]):
    save_image(path, draw_chains(blank_canvas(shape_hw), chains))


def save_sobel(path: str, base_image: np.ndarray):
    save_image(path, build_sobel_image(base_image))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    image_id: str,
    base_image: np.ndarray,
    points: Sequence[Point],
    kept_edges: List[ScoredEdge],
    smoothed_chains: List[Chain]
):
    """
    Saves every output artifact for one processed image.

    Example output:
        <id>_voronoi.png
        <id>_stipple.png
        <id>_edges.png
        <id>_mask.png
        <id>_chains.png
        <id>_sobel.png
    """

    ensure_output_dir(output_dir)
    shape_hw = base_image.shape[:2]

    # 1) Voronoi cells of the final stipple
    save_voronoi(f"{output_dir}/{image_id}_voronoi.png", shape_hw, points)

    # 2) Stipple points
    save_stipple(f"{output_dir}/{image_id}_stipple.png", shape_hw, points)

    # 3) Kept edges as straight segments
    save_kept_edges(f"{output_dir}/{image_id}_edges.png", shape_hw, kept_edges)

    # 4) Kept-edge mask
    save_edge_mask(f"{output_dir}/{image_id}_mask.png", shape_hw, kept_edges)

    # 5) Smoothed chains
    save_chains(f"{output_dir}/{image_id}_chains.png", shape_hw, smoothed_chains)

    # 6) Sobel magnitude for comparison
    save_sobel(f"{output_dir}/{image_id}_sobel.png", base_image)
