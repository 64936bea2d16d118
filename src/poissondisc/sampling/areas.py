"""Area predicates for carving non-rectangular sampling regions.

Every builder excludes points outside ``[0, width) x [0, height)`` so the
predicates can be handed straight to the sampler.
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from ..types import AreaPredicate, Point


def rect_area(width: float, height: float, strict: bool = False) -> AreaPredicate:
    """Accept the whole domain.

    With ``strict=True`` the lower edges are excluded as well
    (``0 < x < width``, ``0 < y < height``).
    """
    w, h = float(width), float(height)
    if strict:
        return lambda p: 0.0 < p[0] < w and 0.0 < p[1] < h
    return lambda p: 0.0 <= p[0] < w and 0.0 <= p[1] < h


def disc_area(width: float, height: float, center: Tuple[float, float], radius: float) -> AreaPredicate:
    if radius <= 0:
        raise ValueError("radius must be > 0")
    inside = rect_area(width, height)
    cx, cy = float(center[0]), float(center[1])
    r2 = float(radius) * float(radius)

    def _pred(p: Point) -> bool:
        if not inside(p):
            return False
        dx, dy = p[0] - cx, p[1] - cy
        return dx * dx + dy * dy <= r2

    return _pred


def polygon_area(width: float, height: float, vertices: Sequence[Tuple[float, float]]) -> AreaPredicate:
    """Even-odd ray casting against a simple or self-intersecting polygon."""
    poly = np.asarray(vertices, dtype=float)
    if poly.ndim != 2 or poly.shape[1] != 2 or poly.shape[0] < 3:
        raise ValueError("polygon must be (N,2) with N >= 3")
    if not np.all(np.isfinite(poly)):
        raise ValueError("polygon vertices must be finite")
    inside = rect_area(width, height)
    xs, ys = poly[:, 0], poly[:, 1]
    xs2, ys2 = np.roll(xs, -1), np.roll(ys, -1)

    def _pred(p: Point) -> bool:
        if not inside(p):
            return False
        x, y = p[0], p[1]
        straddle = (ys > y) != (ys2 > y)
        with np.errstate(divide="ignore", invalid="ignore"):
            x_cross = xs + (y - ys) * (xs2 - xs) / (ys2 - ys)
        hits = np.count_nonzero(straddle & (x < x_cross))
        return bool(hits % 2)

    return _pred


def intersect(*preds: AreaPredicate) -> AreaPredicate:
    if not preds:
        raise ValueError("intersect needs at least one predicate")
    return lambda p: all(f(p) for f in preds)


def subtract(base: AreaPredicate, *holes: AreaPredicate) -> AreaPredicate:
    return lambda p: base(p) and not any(h(p) for h in holes)


__all__ = ["rect_area", "disc_area", "polygon_area", "intersect", "subtract"]
