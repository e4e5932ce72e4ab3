from dataclasses import dataclass

from models.point import Point


@dataclass(eq=False)
class ScoredEdge:
    """
    One undirected neighbor-graph edge with its contrast score.

      • a, b      endpoint Points (order carries no meaning)
      • strength  |intensity(a) - intensity(b)|
      • length    Euclidean distance between a and b
      • selected  set only by the hysteresis selector

    Compared by identity: two edges with the same geometry are still two
    distinct graph edges.
    """

    a: Point
    b: Point
    strength: float
    length: float
    selected: bool = False

    def __repr__(self):
        return (
            f"ScoredEdge({self.a} - {self.b}, strength={self.strength:.1f}, "
            f"length={self.length:.2f}, selected={self.selected})"
        )
