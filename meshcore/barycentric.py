"""Barycentric coordinates of a point with respect to a triangle in 3D."""

from __future__ import annotations

from collections.abc import Sequence

Vec3 = Sequence[float]


def _sub(a: Vec3, b: Vec3) -> tuple[float, float, float]:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def barycentric_coordinates(
    p: Vec3, u: Vec3, v: Vec3, w: Vec3
) -> tuple[float, float, float]:
    """Barycentric coordinates of ``p`` in triangle ``(u, v, w)``.

    The problem is projected onto the coordinate plane in which the triangle
    has the largest area. For a degenerate triangle the barycenter
    ``(1/3, 1/3, 1/3)`` is returned.
    """
    vu = _sub(v, u)
    wu = _sub(w, u)
    pu = _sub(p, u)

    nx = vu[1] * wu[2] - vu[2] * wu[1]
    ny = vu[2] * wu[0] - vu[0] * wu[2]
    nz = vu[0] * wu[1] - vu[1] * wu[0]
    ax, ay, az = abs(nx), abs(ny), abs(nz)

    if ax > ay:
        max_coord = 0 if ax > az else 2
    else:
        max_coord = 1 if ay > az else 2

    if max_coord == 0:
        if 1.0 + ax == 1.0:
            return (1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0)
        b1 = 1.0 + (pu[1] * wu[2] - pu[2] * wu[1]) / nx - 1.0
        b2 = 1.0 + (vu[1] * pu[2] - vu[2] * pu[1]) / nx - 1.0
    elif max_coord == 1:
        if 1.0 + ay == 1.0:
            return (1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0)
        b1 = 1.0 + (pu[2] * wu[0] - pu[0] * wu[2]) / ny - 1.0
        b2 = 1.0 + (vu[2] * pu[0] - vu[0] * pu[2]) / ny - 1.0
    else:
        if 1.0 + az == 1.0:
            return (1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0)
        b1 = 1.0 + (pu[0] * wu[1] - pu[1] * wu[0]) / nz - 1.0
        b2 = 1.0 + (vu[0] * pu[1] - vu[1] * pu[0]) / nz - 1.0

    return (1.0 - b1 - b2, b1, b2)