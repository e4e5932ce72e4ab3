"""
Planar neighbor graph over a point set.

This module provides:
    • DelaunayNeighborGraph(points)
    • DelaunayNeighborGraph.neighbors(i)

Adjacency comes from scipy's Delaunay triangulation, so the relation is
symmetric: j in neighbors(i) <=> i in neighbors(j).
"""

from typing import List, Sequence

import numpy as np
from scipy.spatial import Delaunay, QhullError

from models.point import Point


class DelaunayNeighborGraph:

    def __init__(self, points: Sequence[Point]):
        if len(points) < 3:
            raise ValueError(
                f"Delaunay neighbor graph needs at least 3 points, got {len(points)}"
            )

        coords = np.array([[p.x, p.y] for p in points], dtype=np.float64)

        try:
            self.triangulation = Delaunay(coords)
        except QhullError as exc:
            raise ValueError(f"Cannot triangulate point set: {exc}") from exc

        self.indptr, self.indices = self.triangulation.vertex_neighbor_vertices
        self._count = len(points)

    def neighbors(self, i: int) -> List[int]:
        """
        Indices of all points sharing a triangulation edge with point i.
        Coincident points dropped by the triangulation have no neighbors.
        """
        if i < 0 or i >= self._count:
            raise IndexError(f"Point index {i} out of range [0, {self._count})")
        return [int(j) for j in self.indices[self.indptr[i]:self.indptr[i + 1]]]

    def __len__(self):
        return self._count
