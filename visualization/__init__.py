"""
Visualization Tools

Provides drawing utilities for:
- Stipple points and their Voronoi cells
- Kept edges and their Bresenham mask
- Smoothed chains
- Sobel gradient magnitude (comparison edge map)
"""

from .draw_edges import (
    blank_canvas,
    draw_points,
    draw_voronoi_cells,
    draw_kept_edges,
    draw_chains,
    build_edge_mask,
)
from .sobel import build_sobel_image
from .save_outputs import (
    save_all_outputs,
    save_voronoi,
    save_stipple,
    save_kept_edges,
    save_edge_mask,
    save_chains,
    save_sobel,
)

__all__ = [
    "blank_canvas",
    "draw_points",
    "draw_voronoi_cells",
    "draw_kept_edges",
    "draw_chains",
    "build_edge_mask",
    "build_sobel_image",
    "save_all_outputs",
    "save_voronoi",
    "save_stipple",
    "save_kept_edges",
    "save_edge_mask",
    "save_chains",
    "save_sobel",
]
