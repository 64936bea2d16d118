"""Poisson-disc sampling (Bridson, "Fast Poisson Disk Sampling in Arbitrary Dimensions")."""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..config.schema import SamplerConfig
from ..errors import DomainEmptyError, PoissonDiscError
from ..types import AreaPredicate, OutputSink, Point, RandomSource
from ..utils.logging import logger
from .areas import rect_area
from .candidates import point_around, random_point_in
from .grid import AccelerationGrid
from .sources import numpy_source


class PoissonDiscSampler:
    """One run of the sampler over a single domain.

    Owns the acceleration grid and the active list for the lifetime of one
    :meth:`run`. Instances are single-use and not thread-safe; run independent
    distributions on independent instances.

    Parameters
    ----------
    config : SamplerConfig
        Domain extents, ``min_distance``, ``max_attempts`` and optional seed.
    random : callable
        ``random(limit) -> float`` uniform in ``[0, limit)``.
    in_area : callable
        ``in_area(point) -> bool``. Must reject every point outside
        ``[0, width) x [0, height)``; accepting one raises
        :class:`~poissondisc.errors.OutOfDomainError`.
    """

    def __init__(self, config: SamplerConfig, random: RandomSource, in_area: AreaPredicate):
        self.config = config
        self.random = random
        self.in_area = in_area
        self.grid = AccelerationGrid(config.width, config.height, config.min_distance)
        self.active: List[Point] = []
        self._output: Optional[OutputSink] = None
        self._started = False

    def _seed(self) -> Point:
        conf = self.config
        if conf.start.is_set:
            return conf.start

        attempts = 0
        while True:
            p = random_point_in(conf.width, conf.height, self.random)
            attempts += 1
            if self.in_area(p):
                logger.debug("seed (%.4f, %.4f) after %d draws", p.x, p.y, attempts)
                return p
            if conf.max_seed_attempts is not None and attempts >= conf.max_seed_attempts:
                raise DomainEmptyError(attempts)

    def _add(self, p: Point) -> None:
        self.grid.record(p)
        self.active.append(p)
        self._output(p)

    def run(self, output: OutputSink) -> int:
        """Emit every accepted point to ``output``, seed first.

        Returns the number of accepted points.
        """
        if self._started:
            raise PoissonDiscError("PoissonDiscSampler instances run only once")
        self._started = True
        self._output = output

        conf = self.config
        self._add(self._seed())

        while self.active:
            point = self.active.pop()
            for _ in range(conf.max_attempts):
                p = point_around(point, conf.min_distance, self.random)
                if self.in_area(p) and not self.grid.is_too_close(p):
                    self._add(p)

        logger.debug(
            "poisson disc: %d points on %gx%g, min_distance=%g",
            len(self.grid),
            conf.width,
            conf.height,
            conf.min_distance,
        )
        return len(self.grid)


def poisson_disc_distribution(
    config: SamplerConfig,
    random: RandomSource,
    in_area: AreaPredicate,
    output: OutputSink,
) -> int:
    """Generate a Poisson-disc distribution, passing each point to ``output``.

    No two points are closer than ``config.min_distance`` and each point
    after the seed lies within twice that distance of the point that spawned
    it. Runs in O(n) for n accepted points.

    ``in_area`` may carve arbitrary shapes but must reject anything outside
    ``[0, width) x [0, height)``. If it rejects the whole domain and
    ``config.max_seed_attempts`` is ``None`` the seed search never ends.
    """
    return PoissonDiscSampler(config, random, in_area).run(output)


def poisson_disc(
    rng: np.random.Generator,
    width: float,
    height: float,
    r_min: float,
    k: int = 30,
    x0: float = 0.0,
    y0: float = 0.0,
    in_area: Optional[AreaPredicate] = None,
    start: Optional[tuple[float, float]] = None,
) -> np.ndarray:
    """Generate 2D Poisson-disc samples inside a rectangle.

    Parameters
    ----------
    rng : np.random.Generator
        Random number generator.
    width, height : float
        Size of the sampling rectangle.
    r_min : float
        Minimum distance between samples.
    k : int, optional
        Candidates per active point, by default ``30``.
    x0, y0 : float, optional
        Origin of the rectangle, by default ``(0,0)``.
    in_area : callable, optional
        Extra predicate on rectangle-relative points, intersected with the
        rectangle.
    start : tuple, optional
        Absolute seed point; random when omitted.

    Returns
    -------
    np.ndarray
        ``(n, 2)`` samples in acceptance order.
    """
    conf = SamplerConfig(
        width=width,
        height=height,
        min_distance=r_min,
        max_attempts=k,
        start=None if start is None else (start[0] - x0, start[1] - y0),
    )
    inside = rect_area(width, height)
    pred = inside if in_area is None else (lambda p: inside(p) and in_area(p))

    samples: List[Point] = []
    poisson_disc_distribution(conf, numpy_source(rng), pred, samples.append)
    out = np.asarray(samples, dtype=float).reshape(-1, 2)
    out[:, 0] += x0
    out[:, 1] += y0
    return out


__all__ = ["PoissonDiscSampler", "poisson_disc_distribution", "poisson_disc"]
