"""Trail configuration.

Describes a trail map as plain data: the grid side length and the food
coordinates. ``validate()`` catches mistakes before a grid is built.
"""
from dataclasses import dataclass, field
from typing import Tuple

from .errors import OutOfBoundsError
from .grid import Grid, _check_size, _is_int


@dataclass
class TrailConfig:
    """Trail settings.

    ``food`` holds ``(x, y)`` pairs; duplicates are allowed and collapse to
    one food cell.
    """
    size: int = 32
    food: Tuple[Tuple[int, int], ...] = field(default=())

    def __post_init__(self):
        # Normalize lists of lists into hashable tuples
        self.food = tuple(tuple(p) for p in self.food)

    def validate(self) -> None:
        """Sanity-check the configuration.

        Raises `InvalidSizeError` for a non-positive size, `ValueError` for a
        malformed coordinate and `OutOfBoundsError` for food off the grid.
        """
        _check_size(self.size)

        for p in self.food:
            if len(p) != 2 or not all(_is_int(v) for v in p):
                raise ValueError(f"food coordinate must be a pair of integers (x, y), got {p!r}")
            x, y = p
            if not (0 <= x < self.size and 0 <= y < self.size):
                raise OutOfBoundsError(x, y, self.size)

    def build_grid(self) -> Grid:
        """Validate and return a fresh grid for this trail."""
        self.validate()
        return Grid.from_coordinates(self.size, self.food)
