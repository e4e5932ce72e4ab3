from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    A 2D coordinate. Immutable once created; edges and chains share
    Point objects instead of copying them.
    """

    x: float
    y: float

    def as_pixel(self):
        """Integer pixel position (used by cv2 drawing calls)."""
        return (int(round(self.x)), int(round(self.y)))

    def __repr__(self):
        return f"Point({self.x:.2f}, {self.y:.2f})"
