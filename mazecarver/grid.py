"""
Grid data model for the maze carver.

Brief Description:
    - each cell stores only its north and east walls
    - south and west walls are derived from the neighbor below / to the left
    - anything beyond the boundary counts as a wall
"""

import logging
from collections import namedtuple


logger = logging.getLogger(__name__)


# -----------------------------
# Errors
# -----------------------------
class MazeError(Exception):
    """
    Base class for every error raised by the maze core
    """


class InvalidDimensionError(MazeError, ValueError):
    """
    Width or height outside the accepted range
    """

    def __init__(self, width, height, message=None):
        self.width = width
        self.height = height
        if message is None:
            message = f"Invalid maze dimensions {width}x{height}: both must be >= 1"
        super().__init__(message)


class OutOfBoundsError(MazeError, IndexError):
    """
    Coordinate lookup outside the grid
    """

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        super().__init__(f"Coordinate ({x}, {y}) out of bounds for {width}x{height} grid")


# -----------------------------
# Cells
# -----------------------------
Walls = namedtuple("Walls", ["north", "east", "south", "west"])


class Cell:
    """
    One grid unit with its two stored wall flags
    """

    __slots__ = ("x", "y", "has_north_wall", "has_east_wall")

    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.has_north_wall = True
        self.has_east_wall = True

    def __repr__(self):
        return f"Cell({self.x},{self.y} N={self.has_north_wall} E={self.has_east_wall})"


# -----------------------------
# Grid
# -----------------------------
class Grid:
    """
    Rectangular width x height grid of cells
    - (x, y) is 0-indexed, x grows rightward, y grows downward
    - starts fully enclosed: every stored wall is present
    """

    def __init__(self, width, height):
        if width < 1 or height < 1:
            raise InvalidDimensionError(width, height)

        self.width = width
        self.height = height

        # Row-major: self.cells[y][x]
        self.cells = [[Cell(x, y) for x in range(width)] for y in range(height)]

    @classmethod
    def create(cls, width, height):
        """
        Build a fully walled grid
        """
        grid = cls(width, height)
        logger.debug("Created %dx%d grid", width, height)
        return grid

    # ---------- Coordinate helpers ----------

    def in_bounds(self, x, y):
        """
        Check if (x, y) is inside the grid
        """
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x, y):
        """
        Return the stored cell at (x, y), raising OutOfBoundsError otherwise
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self.cells[y][x]

    def positions(self):
        """
        Yield every (x, y) in raster order (left to right, top to bottom)
        """
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    # ---------- Walls ----------

    def get_walls(self, x, y):
        """
        Return Walls(north, east, south, west) for (x, y)
        - south is the north wall of (x, y+1), or present on the bottom edge
        - west is the east wall of (x-1, y), or present on the left edge
        """
        cell = self.cell(x, y)

        if y + 1 < self.height:
            south = self.cells[y + 1][x].has_north_wall
        else:
            south = True

        if x - 1 >= 0:
            west = self.cells[y][x - 1].has_east_wall
        else:
            west = True

        return Walls(cell.has_north_wall, cell.has_east_wall, south, west)

    def clear_north_wall(self, x, y):
        """
        Open the passage between (x, y) and (x, y-1). Idempotent.
        """
        self.cell(x, y).has_north_wall = False

    def clear_east_wall(self, x, y):
        """
        Open the passage between (x, y) and (x+1, y). Idempotent.
        """
        self.cell(x, y).has_east_wall = False

    # ---------- Inspection ----------

    def open_neighbors(self, x, y):
        """
        Yield the in-bounds neighbors of (x, y) reachable through an open wall
        """
        walls = self.get_walls(x, y)
        if not walls.north and y - 1 >= 0:
            yield (x, y - 1)
        if not walls.east and x + 1 < self.width:
            yield (x + 1, y)
        if not walls.south and y + 1 < self.height:
            yield (x, y + 1)
        if not walls.west and x - 1 >= 0:
            yield (x - 1, y)

    def removed_wall_count(self):
        """
        Number of interior walls that have been opened.
        Boundary flags (north on the top row, east on the right column)
        are not passages and are not counted.
        """
        count = 0
        for x, y in self.positions():
            cell = self.cells[y][x]
            if not cell.has_north_wall and y > 0:
                count += 1
            if not cell.has_east_wall and x < self.width - 1:
                count += 1
        return count

    def is_perfect(self):
        """
        True if the passages form a spanning tree:
        every cell reachable from (0, 0) and exactly width*height - 1 openings
        """
        if self.removed_wall_count() != self.width * self.height - 1:
            return False

        seen = {(0, 0)}
        stack = [(0, 0)]
        while stack:
            x, y = stack.pop()
            for neighbor in self.open_neighbors(x, y):
                if neighbor not in seen:
                    seen.add(neighbor)
                    stack.append(neighbor)

        return len(seen) == self.width * self.height

    def wall_state(self):
        """
        Hashable snapshot of every stored wall flag, row by row
        """
        return tuple(
            tuple((cell.has_north_wall, cell.has_east_wall) for cell in row)
            for row in self.cells
        )

    def copy(self):
        """
        Independent deep copy, used as a read-only snapshot for renderers
        """
        clone = Grid(self.width, self.height)
        for x, y in self.positions():
            src = self.cells[y][x]
            dst = clone.cells[y][x]
            dst.has_north_wall = src.has_north_wall
            dst.has_east_wall = src.has_east_wall
        return clone

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            self.wall_state() == other.wall_state()

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, removed={self.removed_wall_count()})"


def render_ascii(grid):
    """
    Text picture of a grid, one 2-line band per row plus the bottom edge

    +--+--+
    |     |
    +  +--+
    """
    lines = []
    for y in range(grid.height):
        top = "+"
        middle = ""
        for x in range(grid.width):
            walls = grid.get_walls(x, y)
            top += ("--" if walls.north else "  ") + "+"
            middle += ("|" if walls.west else " ") + "  "
        middle += "|" if grid.get_walls(grid.width - 1, y).east else " "
        lines.append(top)
        lines.append(middle)
    lines.append("+" + "--+" * grid.width)
    return "\n".join(lines)
