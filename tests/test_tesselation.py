import math
from collections import Counter

import pytest
from hypothesis import given, strategies as st

from meshcore.tesselation import tesselate
from meshcore.types import InvalidInputError


def _regular_polygon(n, radius=1.0, phase=0.0):
    return [
        (
            radius * math.cos(phase + 2 * math.pi * k / n),
            radius * math.sin(phase + 2 * math.pi * k / n),
            0.0,
        )
        for k in range(n)
    ]


def _triangle_area(p0, p1, p2):
    ax, ay = p1[0] - p0[0], p1[1] - p0[1]
    bx, by = p2[0] - p0[0], p2[1] - p0[1]
    return abs(ax * by - ay * bx) / 2


def _shoelace(points):
    n = len(points)
    s = sum(
        points[k][0] * points[(k + 1) % n][1] - points[(k + 1) % n][0] * points[k][1]
        for k in range(n)
    )
    return abs(s) / 2


def _edge_counts(triangles):
    counts = Counter()
    for a, b, c in triangles:
        for e in ((a, b), (b, c), (a, c)):
            counts[frozenset(e)] += 1
    return counts


def test_triangle_is_returned_unchanged():
    pts = [(0, 0, 0), (1, 0, 0), (0, 1, 0)]
    assert tesselate(pts) == [(0, 1, 2)]


def test_square_uses_second_diagonal_on_tie():
    pts = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    assert tesselate(pts) == [(0, 1, 3), (1, 2, 3)]


def test_dart_quad_avoids_outside_diagonal():
    # corner 3 is reflex, so the diagonal 0-2 lies outside the polygon
    pts = [(0, 0, 0), (2, 1, 0), (0, 2, 0), (0.5, 1, 0)]
    tris = tesselate(pts)
    assert len(tris) == 2
    assert all(not ({0, 2} <= set(t)) for t in tris)


def test_kite_quad_uses_short_weight_diagonal():
    pts = [(0, 0, 0), (1, -1, 0), (3, 0, 0), (1, 1, 0)]
    tris = tesselate(pts)
    assert len(tris) == 2
    assert all({0, 2} <= set(t) for t in tris)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_too_few_points_raise(n):
    with pytest.raises(InvalidInputError):
        tesselate([(float(k), 0.0, 0.0) for k in range(n)])


def test_pentagon_first_triangle_spans_whole_polygon():
    tris = tesselate(_regular_polygon(5))
    assert tris[0][0] == 0
    assert tris[0][2] == 4
    assert len(tris) == 3


def test_l_shape_covers_all_corners():
    pts = [(0, 0, 0), (2, 0, 0), (2, 1, 0), (1, 1, 0), (1, 2, 0), (0, 2, 0)]
    tris = tesselate(pts)
    assert len(tris) == 4
    assert {i for t in tris for i in t} == set(range(6))
    counts = _edge_counts(tris)
    for k in range(6):
        assert counts[frozenset((k, (k + 1) % 6))] == 1


@given(
    n=st.integers(min_value=3, max_value=14),
    radius=st.floats(min_value=0.1, max_value=100.0),
    phase=st.floats(min_value=0.0, max_value=2 * math.pi),
)
def test_convex_polygon_triangulation_invariants(n, radius, phase):
    pts = _regular_polygon(n, radius, phase)
    tris = tesselate(pts)

    assert len(tris) == n - 2
    assert all(0 <= a < b < c < n for a, b, c in tris)

    counts = _edge_counts(tris)
    boundary = {frozenset((k, (k + 1) % n)) for k in range(n)}
    for edge in boundary:
        assert counts[edge] == 1
    for edge, count in counts.items():
        if edge not in boundary:
            assert count == 2

    total = sum(_triangle_area(pts[a], pts[b], pts[c]) for a, b, c in tris)
    assert total == pytest.approx(_shoelace(pts), rel=1e-9)