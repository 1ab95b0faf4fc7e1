"""Error types raised by the grid and ant primitives."""


class TrailError(ValueError):
    """Base class for errors raised while building or querying a trail."""


class InvalidSizeError(TrailError):
    """Grid side length is not a positive integer."""

    def __init__(self, size):
        self.size = size
        super().__init__(f"grid size must be a positive integer, got {size!r}")


class OutOfBoundsError(TrailError):
    """Coordinate lies outside the square grid."""

    def __init__(self, x, y, size):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(f"coordinate ({x}, {y}) outside grid of size {size}")


class NilSourceError(TrailError):
    """A grid was required but none was given."""

    def __init__(self, what="source grid"):
        super().__init__(f"{what} is missing")
