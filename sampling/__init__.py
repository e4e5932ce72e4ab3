"""
Sampling Package

Collaborators that feed the edge-extraction pipeline:
- Image intensity sampling
- Delaunay neighbor graph
- Weighted stippling (point distribution)
"""

from .intensity import ImageIntensitySampler
from .neighbors import DelaunayNeighborGraph
from .stippling import generate_weighted_points, relax_points, stipple

__all__ = [
    "ImageIntensitySampler",
    "DelaunayNeighborGraph",
    "generate_weighted_points",
    "relax_points",
    "stipple",
]
