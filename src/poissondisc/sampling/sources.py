"""Random sources of the form ``random(limit) -> float in [0, limit)``."""
from __future__ import annotations

from itertools import cycle
from typing import Iterable

import numpy as np

from ..types import RandomSource


def numpy_source(rng: np.random.Generator) -> RandomSource:
    """Adapt a numpy ``Generator`` to the ``random(limit)`` callback."""

    def _random(limit: float) -> float:
        return float(rng.random()) * limit

    return _random


def sequence_source(values: Iterable[float]) -> RandomSource:
    """Replay fractions in ``[0, 1)`` endlessly, each scaled by ``limit``."""
    fractions = [float(v) for v in values]
    if not fractions:
        raise ValueError("sequence_source needs at least one value")
    for i, v in enumerate(fractions):
        if not 0.0 <= v < 1.0:
            raise ValueError(f"values[{i}]={v} not in [0, 1)")
    it = cycle(fractions)

    def _random(limit: float) -> float:
        return next(it) * limit

    return _random


__all__ = ["numpy_source", "sequence_source"]
