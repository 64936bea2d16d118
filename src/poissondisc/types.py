"""Core value types shared by the sampler."""
from __future__ import annotations

import math
from typing import Callable, NamedTuple

INFINITY = math.inf


class Point(NamedTuple):
    """A 2D point. ``Point()`` is the "no point" sentinel."""

    x: float = INFINITY
    y: float = INFINITY

    @property
    def is_set(self) -> bool:
        return self.x != INFINITY

    def squared_distance(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


NO_POINT = Point()

RandomSource = Callable[[float], float]
AreaPredicate = Callable[[Point], bool]
OutputSink = Callable[[Point], None]

__all__ = [
    "INFINITY",
    "NO_POINT",
    "Point",
    "RandomSource",
    "AreaPredicate",
    "OutputSink",
]
