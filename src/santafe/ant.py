"""Ant that walks a grid looking for food.

The ant only exposes primitives (turn, move, look, visit). Choosing which
primitive to call next is left to whatever drives the ant, typically an
evolved program; :meth:`Ant.act` and :meth:`Ant.run` accept those choices
as :class:`Action` values.
"""
import logging
from enum import Enum
from typing import Iterable, Tuple

from .errors import NilSourceError
from .grid import Direction, Grid

logger = logging.getLogger(__name__)


class Action(Enum):
    """Decisions an external policy can hand to the ant."""

    TURN_LEFT = "left"
    TURN_RIGHT = "right"
    MOVE_FORWARD = "move"
    VISIT = "visit"
    NOOP = "noop"


class Ant:
    """Single ant state: position, facing, counters and a private grid."""

    def __init__(self, grid: Grid):
        """Bind the ant to its own copy of ``grid``.

        The ant starts at (0, 0) facing east. Anything it eats is removed
        from the copy only, never from the caller's grid.
        """
        if grid is None:
            raise NilSourceError("ant grid")
        self.grid = Grid.copy_of(grid)
        self.x = 0
        self.y = 0
        self.direction = Direction.EAST
        self.food_eaten = 0
        self.moves_made = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def food_remaining(self) -> int:
        return self.grid.food_count()

    def turn_right(self) -> None:
        self.direction = self.direction.clockwise()

    def turn_left(self) -> None:
        self.direction = self.direction.counterclockwise()

    def _ahead(self) -> Tuple[int, int]:
        dx, dy = self.direction.offset
        return self.x + dx, self.y + dy

    def move_forward(self) -> None:
        """Step one cell ahead; stay put when the step would leave the grid."""
        nx, ny = self._ahead()
        if self.grid.in_bounds(nx, ny):
            self.x, self.y = nx, ny
            self.moves_made += 1

    def look_ahead(self) -> bool:
        """Return True if the cell in front has food.

        Facing the edge of the grid reads the same as facing an empty cell.
        """
        nx, ny = self._ahead()
        if not self.grid.in_bounds(nx, ny):
            return False
        return self.grid.cell_at(nx, ny).has_food

    def visit(self) -> None:
        """Eat food here if there is any, otherwise step towards visible food."""
        if self.grid.cell_at(self.x, self.y).has_food:
            self.food_eaten += 1
            self.grid.visit_cell(self.x, self.y)
            logger.debug("ate food at %s, total=%d", self.position, self.food_eaten)
        elif self.look_ahead():
            self.move_forward()
        # otherwise the next move belongs to whoever drives the ant

    def act(self, action: Action) -> None:
        """Apply one decision from an external policy."""
        action = Action(action)
        if action is Action.TURN_LEFT:
            self.turn_left()
        elif action is Action.TURN_RIGHT:
            self.turn_right()
        elif action is Action.MOVE_FORWARD:
            self.move_forward()
        elif action is Action.VISIT:
            self.visit()

    def run(self, actions: Iterable[Action]) -> None:
        """Apply ``actions`` in order."""
        for action in actions:
            self.act(action)

    def __repr__(self) -> str:
        return (
            f"Ant(x={self.x}, y={self.y}, direction={self.direction.name}, "
            f"food_eaten={self.food_eaten}, moves_made={self.moves_made})"
        )
