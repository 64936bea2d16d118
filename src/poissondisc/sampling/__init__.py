"""Poisson-disc sampling: grid, candidate generation and the driving loop."""

from .areas import disc_area, intersect, polygon_area, rect_area, subtract
from .candidates import point_around, random_point_in
from .grid import AccelerationGrid
from .poisson import PoissonDiscSampler, poisson_disc, poisson_disc_distribution
from .sources import numpy_source, sequence_source

__all__ = [
    "AccelerationGrid",
    "PoissonDiscSampler",
    "poisson_disc",
    "poisson_disc_distribution",
    "point_around",
    "random_point_in",
    "numpy_source",
    "sequence_source",
    "rect_area",
    "disc_area",
    "polygon_area",
    "intersect",
    "subtract",
]
