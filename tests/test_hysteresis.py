import random

from detectors.edge_scorer import score_edges
from detectors.hysteresis import apply_hysteresis, edges_touch, split_by_strength
from detectors.threshold_estimator import estimate_thresholds
from models.point import Point
from models.scored_edge import ScoredEdge
from models.thresholds import Thresholds


def _edge(ax, ay, bx, by, strength):
    a, b = Point(ax, ay), Point(bx, by)
    return ScoredEdge(a, b, strength, ((bx - ax) ** 2 + (by - ay) ** 2) ** 0.5)


def _random_edges(rnd, count):
    edges = []
    for _ in range(count):
        x, y = rnd.uniform(0, 50), rnd.uniform(0, 50)
        edges.append(_edge(x, y, x + rnd.uniform(-3, 3), y + rnd.uniform(-3, 3),
                           rnd.uniform(0, 100)))
    return edges


T = Thresholds(high=100, low=50, connect=2)


def test_touch_uses_all_four_endpoint_pairs():
    base = _edge(0, 0, 1, 0, 0)
    assert edges_touch(base, _edge(0.5, 0, 9, 9, 0), 1)     # a-a
    assert edges_touch(base, _edge(9, 9, 0.5, 0, 0), 1)     # a-b
    assert edges_touch(base, _edge(1.5, 0, 9, 9, 0), 1)     # b-a
    assert edges_touch(base, _edge(9, 9, 1.5, 0, 0), 1)     # b-b
    assert not edges_touch(base, _edge(5, 5, 9, 9, 0), 1)


def test_touch_is_strict():
    assert not edges_touch(_edge(0, 0, 1, 0, 0), _edge(3, 0, 4, 0, 0), 2)


def test_split_by_strength():
    strong_e = _edge(0, 0, 1, 0, 100)
    weak_e = _edge(0, 0, 1, 0, 50)
    low_e = _edge(0, 0, 1, 0, 49.9)
    strong, weak = split_by_strength([strong_e, weak_e, low_e], T)
    assert strong == [strong_e]
    assert weak == [weak_e]


def test_weak_edges_propagate_from_strong_seed():
    strong = _edge(0, 0, 1, 0, 120)
    weak1 = _edge(1.5, 0, 2.5, 0, 60)
    weak2 = _edge(4, 0, 5, 0, 60)   # touches weak1 only
    kept = apply_hysteresis([weak2, weak1, strong], T)

    assert kept == [strong, weak1, weak2]
    assert all(e.selected for e in kept)


def test_isolated_weak_edge_is_dropped():
    strong = _edge(0, 0, 1, 0, 120)
    isolated = _edge(50, 50, 51, 50, 75)
    kept = apply_hysteresis([strong, isolated], T)

    assert kept == [strong]
    assert not isolated.selected


def test_below_low_never_kept_even_when_touching():
    strong = _edge(0, 0, 1, 0, 120)
    faint = _edge(1.2, 0, 2, 0, 10)
    kept = apply_hysteresis([strong, faint], T)
    assert faint not in kept
    assert not faint.selected


def test_monotonicity_on_random_graphs():
    rnd = random.Random(5)
    for _ in range(10):
        edges = _random_edges(rnd, 80)
        t = estimate_thresholds(edges)
        kept = apply_hysteresis(edges, t)
        kept_ids = {id(e) for e in kept}

        for e in edges:
            if e.strength >= t.high:
                assert id(e) in kept_ids
            if e.strength < t.low:
                assert id(e) not in kept_ids
            assert e.selected == (id(e) in kept_ids)
        assert len(kept_ids) == len(kept)


def test_membership_independent_of_edge_order():
    rnd = random.Random(9)
    edges = _random_edges(rnd, 150)
    t = estimate_thresholds(edges)
    reference = {id(e) for e in apply_hysteresis(edges, t)}

    for _ in range(5):
        shuffled = list(edges)
        rnd.shuffle(shuffled)
        assert {id(e) for e in apply_hysteresis(shuffled, t)} == reference


def test_rerun_resets_selection():
    strong = _edge(0, 0, 1, 0, 120)
    weak = _edge(1.5, 0, 2.5, 0, 60)
    apply_hysteresis([strong, weak], T)

    strict = Thresholds(high=100, low=50, connect=0.1)
    kept = apply_hysteresis([strong, weak], strict)
    assert kept == [strong]
    assert not weak.selected


def test_square_keeps_only_high_contrast_sides(unit_square):
    points, graph, sampler = unit_square
    edges = score_edges(points, graph, sampler)
    t = estimate_thresholds(edges)
    kept = apply_hysteresis(edges, t)

    assert len(kept) == 4
    assert all(e.strength == 190 for e in kept)
