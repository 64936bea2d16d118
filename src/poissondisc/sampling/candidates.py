"""Candidate generation around active points."""
from __future__ import annotations

import math

from ..types import Point, RandomSource

TWO_PI = 2.0 * math.pi


def point_around(p: Point, min_distance: float, random: RandomSource) -> Point:
    """Return a random point in the annulus ``[min_distance, 2*min_distance)`` around ``p``.

    The radius is ``min_distance * sqrt(u + 1)`` with ``u`` uniform in
    ``[0, 3)``, which spreads candidates uniformly over the annulus area
    rather than uniformly over the radius.
    """
    radius = min_distance * math.sqrt(random(3.0) + 1.0)
    angle = random(TWO_PI)
    return Point(p[0] + math.cos(angle) * radius, p[1] + math.sin(angle) * radius)


def random_point_in(width: float, height: float, random: RandomSource) -> Point:
    return Point(random(width), random(height))


__all__ = ["point_around", "random_point_in"]
