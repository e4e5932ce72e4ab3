from dataclasses import dataclass, field
from typing import List

from models.point import Point
from models.scored_edge import ScoredEdge


@dataclass
class Chain:
    """
    An open polyline assembled from kept edges.

    `points` is in discovery order (head first). `edges` lists the kept
    edges consumed to build it, in consumption order. Smoothing replaces
    `points` but carries `edges` over unchanged.
    """

    points: List[Point] = field(default_factory=list)
    edges: List[ScoredEdge] = field(default_factory=list)

    @property
    def head(self) -> Point:
        return self.points[0]

    @property
    def tail(self) -> Point:
        return self.points[-1]

    def append(self, p: Point, edge: ScoredEdge):
        self.points.append(p)
        self.edges.append(edge)

    def prepend(self, p: Point, edge: ScoredEdge):
        self.points.insert(0, p)
        self.edges.append(edge)

    def __len__(self):
        return len(self.points)

    def __repr__(self):
        return f"Chain(points={len(self.points)}, edges={len(self.edges)})"
