"""Square food grid for the Santa Fe trail.

The grid keeps two parallel NumPy arrays indexed as ``[y, x]``: a boolean
food layer and an integer visit-count layer. Callers reach single cells
through :class:`Cell`, a thin view that reads and writes those arrays, so a
cell handed out by :meth:`Grid.cell_at` always reflects the current grid.

Note
----
Every public coordinate accessor bounds-checks and raises
:class:`~santafe.errors.OutOfBoundsError`; nothing ever wraps around or
returns a null cell.
"""
import logging
from enum import IntEnum
from typing import Iterable, Iterator, List, Tuple

import numpy as np

from .errors import InvalidSizeError, NilSourceError, OutOfBoundsError

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Cardinal facings, listed clockwise so +1 is a right turn."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit step ``(dx, dy)`` for this facing. North is towards y = 0."""
        return int(DX[self]), int(DY[self])

    def clockwise(self) -> "Direction":
        return Direction((self + 1) % len(Direction))

    def counterclockwise(self) -> "Direction":
        # three rights make a left, keeps the index non-negative
        return Direction((self + 3) % len(Direction))


# Offsets indexed by Direction: new_x = x + DX[direction]
DX = np.array([0, 1, 0, -1], dtype=np.int8)
DY = np.array([-1, 0, 1, 0], dtype=np.int8)


class Cell:
    """View onto one grid coordinate."""

    __slots__ = ("_grid", "x", "y")

    def __init__(self, grid: "Grid", x: int, y: int):
        self._grid = grid
        self.x = x
        self.y = y

    @property
    def has_food(self) -> bool:
        return bool(self._grid._food[self.y, self.x])

    @property
    def visit_count(self) -> int:
        return int(self._grid._visits[self.y, self.x])

    def set_food(self, has_food: bool) -> None:
        self._grid._food[self.y, self.x] = bool(has_food)

    def visit(self) -> None:
        """Log a visit and consume whatever food is here."""
        self._grid._visits[self.y, self.x] += 1
        self._grid._food[self.y, self.x] = False

    def token(self) -> str:
        """Display token: ``'*'`` for food, otherwise the visit count."""
        return "*" if self.has_food else str(self.visit_count)

    def __repr__(self) -> str:
        return f"Cell(x={self.x}, y={self.y}, has_food={self.has_food}, visit_count={self.visit_count})"


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _check_size(size) -> int:
    if not _is_int(size) or size <= 0:
        raise InvalidSizeError(size)
    return int(size)


class Grid:
    """Square ``size x size`` map of food and visit counts.

    Build one with ``Grid(size)`` for an empty map,
    :meth:`from_coordinates` to place food, or :meth:`copy_of` to clone an
    existing grid. Copies never share storage with their source.
    """

    def __init__(self, size: int):
        self.size = _check_size(size)
        self._food = np.zeros((self.size, self.size), dtype=bool)
        self._visits = np.zeros((self.size, self.size), dtype=np.int32)

    @classmethod
    def from_coordinates(cls, size: int, coordinates: Iterable[Tuple[int, int]]) -> "Grid":
        """Return a grid with food at every ``(x, y)`` in ``coordinates``.

        Duplicate coordinates are harmless. Any coordinate outside the grid
        raises :class:`OutOfBoundsError` before a grid is handed back, so a
        partially loaded map is never observable.
        """
        size = _check_size(size)
        try:
            coords = np.asarray(list(coordinates))
        except ValueError:
            # ragged input
            raise ValueError("food coordinates must be pairs of integers (x, y)") from None
        if coords.size == 0:
            coords = np.empty((0, 2), dtype=np.int64)
        elif coords.dtype.kind not in "iu" or coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("food coordinates must be pairs of integers (x, y)")

        xs, ys = coords[:, 0], coords[:, 1]
        bad = (xs < 0) | (xs >= size) | (ys < 0) | (ys >= size)
        if np.any(bad):
            i = int(np.nonzero(bad)[0][0])
            logger.debug("rejecting map: food #%d at (%d, %d) outside size %d", i, xs[i], ys[i], size)
            raise OutOfBoundsError(int(xs[i]), int(ys[i]), size)

        grid = cls(size)
        grid._food[ys, xs] = True
        return grid

    @classmethod
    def copy_of(cls, source: "Grid") -> "Grid":
        """Return an independent cell-by-cell copy of ``source``."""
        if source is None or not isinstance(source, Grid):
            raise NilSourceError()
        grid = cls.__new__(cls)
        grid.size = source.size
        grid._food = source._food.copy()
        grid._visits = source._visits.copy()
        return grid

    def copy(self) -> "Grid":
        return Grid.copy_of(self)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` is a cell of this grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def _require(self, x: int, y: int) -> None:
        if not (_is_int(x) and _is_int(y)):
            raise ValueError(f"cell coordinates must be integers, got ({x!r}, {y!r})")
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)

    def cell_at(self, x: int, y: int) -> Cell:
        self._require(x, y)
        return Cell(self, x, y)

    def visit_cell(self, x: int, y: int) -> None:
        """Bump the visit count at ``(x, y)`` and clear its food."""
        self.cell_at(x, y).visit()

    def food_count(self) -> int:
        """Number of cells still holding food."""
        return int(np.count_nonzero(self._food))

    def food_positions(self) -> List[Tuple[int, int]]:
        """Coordinates ``(x, y)`` of remaining food, in row-major order."""
        ys, xs = np.nonzero(self._food)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def food(self) -> np.ndarray:
        """Read-only snapshot of the food layer, ``[y, x]``."""
        out = self._food.copy()
        out.flags.writeable = False
        return out

    def visits(self) -> np.ndarray:
        """Read-only snapshot of the visit counts, ``[y, x]``."""
        out = self._visits.copy()
        out.flags.writeable = False
        return out

    def render_rows(self) -> Iterator[List[str]]:
        """Yield each row as a list of display tokens, top row first.

        A cell with food renders as ``'*'``; any other cell renders as its
        decimal visit count. Each call starts over from the first row.
        """
        for y in range(self.size):
            yield [Cell(self, x, y).token() for x in range(self.size)]

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.size == other.size
            and np.array_equal(self._food, other._food)
            and np.array_equal(self._visits, other._visits)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, food={self.food_count()})"
