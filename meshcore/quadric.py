"""Error quadrics stored as the upper triangle of a symmetric 4x4 matrix."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import astuple, dataclass, fields


@dataclass
class Quadric:
    """Symmetric 4x4 matrix, upper triangle row by row.

    ::

        a b c d
          e f g
            h i
              j
    """

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 0.0
    f: float = 0.0
    g: float = 0.0
    h: float = 0.0
    i: float = 0.0
    j: float = 0.0

    @classmethod
    def from_plane(
        cls, a: float = 0.0, b: float = 0.0, c: float = 0.0, d: float = 0.0
    ) -> "Quadric":
        """Quadric of the plane ``ax + by + cz + d = 0``."""
        return cls(
            a * a, a * b, a * c, a * d,
            b * b, b * c, b * d,
            c * c, c * d,
            d * d,
        )

    @classmethod
    def from_point_normal(
        cls, normal: Sequence[float], point: Sequence[float]
    ) -> "Quadric":
        """Quadric of the plane through ``point`` with normal ``normal``."""
        d = -(normal[0] * point[0] + normal[1] * point[1] + normal[2] * point[2])
        return cls.from_plane(normal[0], normal[1], normal[2], d)

    def clear(self) -> None:
        """Set all entries to zero."""
        for fld in fields(self):
            setattr(self, fld.name, 0.0)

    def __iadd__(self, other: "Quadric") -> "Quadric":
        for fld in fields(self):
            setattr(self, fld.name, getattr(self, fld.name) + getattr(other, fld.name))
        return self

    def __add__(self, other: "Quadric") -> "Quadric":
        return Quadric(*(x + y for x, y in zip(astuple(self), astuple(other))))

    def __imul__(self, s: float) -> "Quadric":
        for fld in fields(self):
            setattr(self, fld.name, getattr(self, fld.name) * s)
        return self

    def __mul__(self, s: float) -> "Quadric":
        return Quadric(*(x * s for x in astuple(self)))

    def __call__(self, p: Sequence[float]) -> float:
        """Evaluate ``p^T Q p`` for the homogeneous point ``(x, y, z, 1)``."""
        x, y, z = float(p[0]), float(p[1]), float(p[2])
        return (
            self.a * x * x + 2.0 * self.b * x * y + 2.0 * self.c * x * z + 2.0 * self.d * x
            + self.e * y * y + 2.0 * self.f * y * z + 2.0 * self.g * y
            + self.h * z * z + 2.0 * self.i * z
            + self.j
        )