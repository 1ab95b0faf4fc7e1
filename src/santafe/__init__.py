"""Santa Fe trail package exports."""
import logging

from .ant import Action, Ant
from .config import TrailConfig
from .errors import InvalidSizeError, NilSourceError, OutOfBoundsError, TrailError
from .grid import DX, DY, Cell, Direction, Grid

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Action",
    "Ant",
    "Cell",
    "Direction",
    "DX",
    "DY",
    "Grid",
    "InvalidSizeError",
    "NilSourceError",
    "OutOfBoundsError",
    "TrailConfig",
    "TrailError",
]
