"""Background acceleration grid for Poisson-disc sampling."""
from __future__ import annotations

import math
from typing import Iterator, List, Tuple

from ..errors import OutOfDomainError
from ..types import NO_POINT, Point


class AccelerationGrid:
    """Uniform spatial hash over ``[0, width) x [0, height)``.

    The cell size is ``min_distance / sqrt(2)`` so a cell holds at most one
    accepted point and a ``min_distance`` disc never reaches past the two
    surrounding rings of cells.

    Parameters
    ----------
    width, height : float
        Extents of the sampling domain.
    min_distance : float
        Smallest allowed distance between two recorded points.
    """

    def __init__(self, width: float, height: float, min_distance: float):
        if min_distance <= 0:
            raise ValueError("min_distance must be > 0")
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = float(width)
        self.height = float(height)
        self.min_distance = float(min_distance)
        self.cell_size = self.min_distance / math.sqrt(2.0)
        self.grid_width = int(math.ceil(self.width / self.cell_size))
        self.grid_height = int(math.ceil(self.height / self.cell_size))
        self._cells: List[Point] = [NO_POINT] * (self.grid_width * self.grid_height)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def cell_of(self, p: Point) -> Tuple[int, int]:
        """Return the ``(ix, iy)`` cell containing ``p``."""
        x, y = p
        if not (0.0 <= x < self.width and 0.0 <= y < self.height):
            # also rejects NaN and the infinite sentinel
            raise OutOfDomainError(
                f"point ({x}, {y}) outside domain [0, {self.width}) x [0, {self.height})",
                point=p,
            )
        # x < width can still round up to grid_width when width/cell_size is integral
        ix = min(int(math.floor(x / self.cell_size)), self.grid_width - 1)
        iy = min(int(math.floor(y / self.cell_size)), self.grid_height - 1)
        return ix, iy

    def index(self, ix: int, iy: int) -> int:
        """Validated ``(ix, iy) -> linear index`` conversion."""
        if not (0 <= ix < self.grid_width and 0 <= iy < self.grid_height):
            raise OutOfDomainError(
                f"cell ({ix}, {iy}) outside grid {self.grid_width}x{self.grid_height}"
            )
        return iy * self.grid_width + ix

    def at(self, ix: int, iy: int) -> Point:
        return self._cells[self.index(ix, iy)]

    def record(self, p: Point) -> None:
        p = Point(*p)
        i = self.index(*self.cell_of(p))
        if not self._cells[i].is_set:
            self._count += 1
        self._cells[i] = p

    def is_too_close(self, p: Point) -> bool:
        """True if a recorded point lies within ``min_distance`` of ``p``."""
        p = Point(*p)
        x_index, y_index = self.cell_of(p)
        if self._cells[self.index(x_index, y_index)].is_set:
            return True

        min_dist_sq = self.min_distance * self.min_distance
        min_x = max(x_index - 2, 0)
        min_y = max(y_index - 2, 0)
        max_x = min(x_index + 2, self.grid_width - 1)
        max_y = min(y_index + 2, self.grid_height - 1)

        for iy in range(min_y, max_y + 1):
            row = iy * self.grid_width
            for ix in range(min_x, max_x + 1):
                q = self._cells[row + ix]
                if q.is_set and p.squared_distance(q) < min_dist_sq:
                    return True
        return False

    def points(self) -> Iterator[Point]:
        """Yield recorded points in row-major cell order."""
        return (q for q in self._cells if q.is_set)


__all__ = ["AccelerationGrid"]
