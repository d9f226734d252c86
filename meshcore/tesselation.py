"""Triangulation of a single polygon that minimizes the sum of squared triangle areas."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from meshcore.types import InvalidInputError

Triangle = tuple[int, int, int]

_SCALAR_MAX = sys.float_info.max


def _squared_area(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float]) -> float:
    """Squared norm of ``(p1 - p0) x (p2 - p0)``."""
    ax, ay, az = p1[0] - p0[0], p1[1] - p0[1], p1[2] - p0[2]
    bx, by, bz = p2[0] - p0[0], p2[1] - p0[1], p2[2] - p0[2]
    cx = ay * bz - az * by
    cy = az * bx - ax * bz
    cz = ax * by - ay * bx
    return cx * cx + cy * cy + cz * cz


def tesselate(points: Sequence[Sequence[float]]) -> list[Triangle]:
    """Split a polygon into triangles given as index triples into ``points``.

    The triangulation minimizes the sum of squared triangle areas, which
    avoids overlapping or folded triangles for non-convex polygons.
    Triangles and quads are handled directly; larger polygons by dynamic
    programming.
    """
    n = len(points)
    if n < 3:
        raise InvalidInputError(f"a polygon needs at least 3 corners, got {n}")

    if n == 3:
        return [(0, 1, 2)]

    if n == 4:
        p0, p1, p2, p3 = points
        if _squared_area(p0, p1, p2) + _squared_area(p0, p2, p3) < _squared_area(
            p0, p1, p3
        ) + _squared_area(p1, p2, p3):
            return [(0, 1, 2), (0, 2, 3)]
        return [(0, 1, 3), (1, 2, 3)]

    # cost[i][k]: minimal weight of the sub-polygon i..k; split[i][k]: its apex
    cost = [[0.0] * n for _ in range(n)]
    split = [[-1] * n for _ in range(n)]

    for j in range(2, n):
        for i in range(n - j):
            k = i + j
            wmin = _SCALAR_MAX
            imin = -1
            for m in range(i + 1, k):
                w = cost[i][m] + _squared_area(points[i], points[m], points[k]) + cost[m][k]
                if w < wmin:
                    wmin = w
                    imin = m
            cost[i][k] = wmin
            split[i][k] = imin

    triangles: list[Triangle] = []
    todo = [(0, n - 1)]
    while todo:
        start, end = todo.pop()
        if end - start < 2:
            continue
        apex = split[start][end]
        if apex < 0:
            raise InvalidInputError("polygon cannot be triangulated")
        triangles.append((start, apex, end))
        todo.append((start, apex))
        todo.append((apex, end))
    return triangles