import pytest

from models.point import Point


class FakeGraph:
    """Symmetric adjacency from an explicit list of index pairs."""

    def __init__(self, count, pairs):
        self.adj = {i: [] for i in range(count)}
        for i, j in pairs:
            self.adj[i].append(j)
            self.adj[j].append(i)

    def neighbors(self, i):
        return list(self.adj[i])


class FakeSampler:
    """Brightness lookup keyed by floored pixel coordinate."""

    def __init__(self, values, default=0.0):
        self.values = dict(values)
        self.default = default
        self.calls = []

    def at(self, x, y):
        self.calls.append((x, y))
        return self.values.get((x, y), self.default)


@pytest.fixture
def unit_square():
    """
    Four corners of a 10px square with alternating intensities 10/200,
    triangulated along one diagonal.
    """
    points = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    sampler = FakeSampler({(0, 0): 10, (10, 0): 200, (10, 10): 10, (0, 10): 200})
    graph = FakeGraph(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)])
    return points, graph, sampler
