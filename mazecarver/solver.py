"""
Solver: moves a position through a carved grid, one cell at a time.
"""

import enum
import logging


logger = logging.getLogger(__name__)


class MoveDirection(enum.Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self):
        return self.value


# Which derived wall blocks each move
_WALL_FOR_MOVE = {
    MoveDirection.UP: "north",
    MoveDirection.DOWN: "south",
    MoveDirection.LEFT: "west",
    MoveDirection.RIGHT: "east",
}


class SolveState:
    def __init__(self, position):
        self.position = position

    def __repr__(self):
        return f"SolveState(position={self.position})"


class Solver:
    """
    Tracks the player's cell on a finished grid
    - starts bottom-left at (0, height-1)
    - goal is top-right at (width-1, 0)
    - a blocked move is silently ignored
    """

    def __init__(self, grid):
        self.grid = grid
        self.start = (0, grid.height - 1)
        self.goal = (grid.width - 1, 0)
        self.state = SolveState(self.start)
        self.moves = 0

    @property
    def position(self):
        return self.state.position

    def can_move(self, direction):
        """
        True if the wall on that side of the current cell is open
        and the destination is inside the grid
        """
        x, y = self.state.position
        walls = self.grid.get_walls(x, y)
        if getattr(walls, _WALL_FOR_MOVE[direction]):
            return False

        dx, dy = direction.delta
        return self.grid.in_bounds(x + dx, y + dy)

    def move(self, direction):
        """
        Try to step one cell in `direction`. Returns True if the position changed.
        """
        if not self.can_move(direction):
            logger.debug("Blocked move %s at %s", direction.name, self.state.position)
            return False

        x, y = self.state.position
        dx, dy = direction.delta
        self.state.position = (x + dx, y + dy)
        self.moves += 1
        logger.debug("Moved %s to %s", direction.name, self.state.position)

        if self.is_solved():
            logger.info("Reached goal %s after %d moves", self.goal, self.moves)
        return True

    def is_solved(self):
        return self.state.position == self.goal

    def reset(self):
        """
        Put the position back on the start cell
        """
        self.state = SolveState(self.start)
        self.moves = 0
