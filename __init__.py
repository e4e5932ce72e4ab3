"""
Stipple Edges Package

Turns a weighted stipple point distribution and its source image into
smoothed contour-like polylines, including:

- Weighted stippling & Delaunay neighbor graph
- Contrast scoring of graph edges
- Adaptive (percentile) thresholds
- Graph hysteresis selection
- Greedy chain building
- Corner-cutting smoothing
- Output visualization utilities
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "sampling",
    "utils",
    "visualization",
]
