"""Exceptions raised by :mod:`poissondisc`."""
from __future__ import annotations


class PoissonDiscError(RuntimeError):
    """Base class for sampler failures."""


class OutOfDomainError(PoissonDiscError, IndexError):
    """A point was mapped to a grid cell outside the sampling domain.

    Raised when the area predicate accepts a point outside
    ``[0, width) x [0, height)``.
    """

    def __init__(self, message: str, point=None):
        super().__init__(message)
        self.point = point


class DomainEmptyError(PoissonDiscError):
    """No seed point was accepted by the area predicate within the cap."""

    def __init__(self, attempts: int):
        super().__init__(f"area predicate rejected all {attempts} seed candidates")
        self.attempts = attempts


__all__ = ["PoissonDiscError", "OutOfDomainError", "DomainEmptyError"]
