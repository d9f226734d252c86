"""Cones of normal directions, grown by merging."""

from __future__ import annotations

import math
from collections.abc import Sequence

Normal = tuple[float, float, float]


class NormalCone:
    """A cone given by a unit center normal and an opening angle in radians."""

    def __init__(self, center_normal: Sequence[float], angle: float = 0.0) -> None:
        self.center_normal: Normal = (
            float(center_normal[0]),
            float(center_normal[1]),
            float(center_normal[2]),
        )
        self.angle = float(angle)

    def __repr__(self) -> str:
        return f"NormalCone({self.center_normal!r}, {self.angle!r})"

    def merge(self, other: "NormalCone | Sequence[float]") -> "NormalCone":
        """Grow this cone so that it also encloses ``other`` (a cone or a normal)."""
        if not isinstance(other, NormalCone):
            other = NormalCone(other)

        n0 = self.center_normal
        n1 = other.center_normal
        dp = n0[0] * n1[0] + n0[1] * n1[1] + n0[2] * n1[2]

        if dp > 0.99999:
            self.angle = max(self.angle, other.angle)
        elif dp < -0.99999:
            self.angle = 2 * math.pi
        else:
            center_angle = math.acos(dp)
            min_angle = min(-self.angle, center_angle - other.angle)
            max_angle = max(self.angle, center_angle + other.angle)
            self.angle = 0.5 * (max_angle - min_angle)

            axis_angle = 0.5 * (min_angle + max_angle)
            s0 = math.sin(center_angle - axis_angle)
            s1 = math.sin(axis_angle)
            denom = math.sin(center_angle)
            self.center_normal = (
                (n0[0] * s0 + n1[0] * s1) / denom,
                (n0[1] * s0 + n1[1] * s1) / denom,
                (n0[2] * s0 + n1[2] * s1) / denom,
            )
        return self