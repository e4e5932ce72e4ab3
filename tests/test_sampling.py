import random

import numpy as np
import pytest

from models.point import Point
from sampling.intensity import ImageIntensitySampler
from sampling.neighbors import DelaunayNeighborGraph
from sampling.stippling import generate_weighted_points, relax_points, stipple


def _half_dark_image(h=20, w=40):
    img = np.full((h, w, 3), 255, dtype=np.uint8)
    img[:, : w // 2] = 0
    return img


# ---------------------------------------------------------------
# Intensity sampling
# ---------------------------------------------------------------

def test_brightness_is_channel_mean():
    img = np.zeros((4, 5, 3), dtype=np.uint8)
    img[2, 3] = (30, 60, 90)
    sampler = ImageIntensitySampler(img)
    assert sampler.at(3, 2) == pytest.approx(60)
    assert (sampler.width, sampler.height) == (5, 4)


def test_out_of_bounds_is_clamped():
    img = np.zeros((4, 5), dtype=np.uint8)
    img[0, 0] = 10
    img[3, 4] = 250
    sampler = ImageIntensitySampler(img)
    assert sampler.at(-7, -1) == 10
    assert sampler.at(99, 99) == 250


def test_vectorised_sampling_floors():
    img = np.arange(12, dtype=np.uint8).reshape(3, 4)
    sampler = ImageIntensitySampler(img)
    out = sampler.sample(np.array([1.9, 3.5, -2.0]), np.array([0.2, 2.9, 1.0]))
    assert list(out) == [1, 11, 4]


def test_empty_image_rejected():
    with pytest.raises(ValueError):
        ImageIntensitySampler(np.zeros((0, 0), dtype=np.uint8))


# ---------------------------------------------------------------
# Delaunay neighbor graph
# ---------------------------------------------------------------

def test_neighbor_relation_is_symmetric():
    rnd = random.Random(2)
    points = [Point(rnd.uniform(0, 100), rnd.uniform(0, 100)) for _ in range(60)]
    graph = DelaunayNeighborGraph(points)

    assert len(graph) == 60
    for i in range(len(points)):
        nbrs = graph.neighbors(i)
        assert nbrs
        assert i not in nbrs
        for j in nbrs:
            assert i in graph.neighbors(j)


def test_square_with_center():
    points = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(5, 5)]
    graph = DelaunayNeighborGraph(points)
    assert sorted(graph.neighbors(4)) == [0, 1, 2, 3]


def test_neighbor_index_out_of_range():
    graph = DelaunayNeighborGraph([Point(0, 0), Point(1, 0), Point(0, 1)])
    with pytest.raises(IndexError):
        graph.neighbors(3)


def test_too_few_points():
    with pytest.raises(ValueError):
        DelaunayNeighborGraph([Point(0, 0), Point(1, 1)])


def test_collinear_points_rejected():
    with pytest.raises(ValueError):
        DelaunayNeighborGraph([Point(0, 0), Point(1, 1), Point(2, 2)])


# ---------------------------------------------------------------
# Stippling
# ---------------------------------------------------------------

def test_points_land_on_dark_pixels_only():
    sampler = ImageIntensitySampler(_half_dark_image())
    points = generate_weighted_points(sampler, 200, np.random.default_rng(1))

    assert len(points) == 200
    assert all(0 <= p.x < 20 and 0 <= p.y < 20 for p in points)


def test_white_image_rejected():
    sampler = ImageIntensitySampler(np.full((10, 10), 255, dtype=np.uint8))
    with pytest.raises(ValueError):
        generate_weighted_points(sampler, 10, np.random.default_rng(0))


def test_non_positive_count_rejected():
    sampler = ImageIntensitySampler(_half_dark_image())
    with pytest.raises(ValueError):
        generate_weighted_points(sampler, 0)


def test_relax_with_zero_rate_is_identity():
    sampler = ImageIntensitySampler(_half_dark_image())
    points = [Point(3, 3), Point(15, 10), Point(30, 5)]
    assert relax_points(points, sampler, 0.0) == points


def test_relax_moves_toward_dark_centroid():
    sampler = ImageIntensitySampler(_half_dark_image())
    # lone point owns every pixel; dark centroid is (9.5, 9.5)
    moved = relax_points([Point(30, 10)], sampler, 1.0)
    assert moved[0].x == pytest.approx(9.5)
    assert moved[0].y == pytest.approx(9.5)


def test_point_on_white_cell_stays():
    sampler = ImageIntensitySampler(_half_dark_image())
    points = [Point(5, 10), Point(39, 10)]
    moved = relax_points(points, sampler, 0.5)
    assert moved[1] == Point(39, 10)
    assert moved[0] != points[0]


def test_stipple_returns_requested_count():
    sampler = ImageIntensitySampler(_half_dark_image())
    points = stipple(sampler, n=50, iterations=3, rate=0.1, rng=np.random.default_rng(4))
    assert len(points) == 50
