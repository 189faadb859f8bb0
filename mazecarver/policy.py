"""
Wall-removal decisions for the Binary Tree and Sidewinder algorithms.

Nothing in here touches a grid or draws random numbers: the caller passes
in the coin outcome and gets back a decision to apply.
"""

import enum
from collections import namedtuple


class Algorithm(enum.Enum):
    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"

    @classmethod
    def parse(cls, value):
        """
        Accept an Algorithm or its name ("binary_tree", "Sidewinder", "binary-tree")
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        for algorithm in cls:
            if algorithm.value == key:
                return algorithm
        raise ValueError(f"Unknown maze algorithm: {value!r}")

    @property
    def label(self):
        return self.value.replace("_", " ").title()


class Direction(enum.Enum):
    NORTH = "N"
    EAST = "E"


class Coin(enum.Enum):
    HEADS = "heads"
    TAILS = "tails"


# -----------------------------
# Decisions
# -----------------------------
RemoveWall = namedtuple("RemoveWall", ["direction", "position"])
RemoveRandomWallFromRun = namedtuple("RemoveRandomWallFromRun", ["direction", "candidates"])


class NoOp:
    """
    No wall is removed this step
    """

    def __repr__(self):
        return "NO_OP"


NO_OP = NoOp()


# -----------------------------
# Rules
# -----------------------------
def _boundary_decision(position, width):
    """
    Decision forced by the grid edges, or None for an interior cell
    - northeast corner: nothing can be opened
    - top row: north is the boundary, so open east
    - right column: east is the boundary, so open north
    """
    x, y = position
    on_top = y == 0
    on_right = x == width - 1

    if on_top and on_right:
        return NO_OP
    if on_top:
        return RemoveWall(Direction.EAST, position)
    if on_right:
        return RemoveWall(Direction.NORTH, position)
    return None


def binary_tree(position, width, coin):
    """
    Binary Tree: every interior cell opens north on heads, east on tails
    """
    forced = _boundary_decision(position, width)
    if forced is not None:
        return forced

    if coin is Coin.HEADS:
        return RemoveWall(Direction.NORTH, position)
    return RemoveWall(Direction.EAST, position)


def sidewinder(position, run, width, coin):
    """
    Sidewinder: like Binary Tree, except that heads on an interior cell opens
    north from a random member of the run instead of from the cell itself.

    The current cell closes the run, so it is a candidate too. Top-row
    members are dropped since their north side is the boundary.
    """
    forced = _boundary_decision(position, width)
    if forced is not None:
        return forced

    if coin is Coin.TAILS:
        return RemoveWall(Direction.EAST, position)

    candidates = [(x, y) for (x, y) in list(run) + [position] if y > 0]
    if not candidates:
        return NO_OP
    return RemoveRandomWallFromRun(Direction.NORTH, tuple(candidates))


def decide(algorithm, position, run, width, height, coin):
    """
    Dispatch to the rule for `algorithm`
    - position: (x, y) of the cell being carved
    - run: cells in the current horizontal streak (ignored by Binary Tree)
    - width, height: grid dimensions
    - coin: Coin outcome supplied by the caller
    """
    x, y = position
    assert 0 <= x < width and 0 <= y < height, f"{position} outside {width}x{height}"

    if algorithm is Algorithm.BINARY_TREE:
        return binary_tree(position, width, coin)
    if algorithm is Algorithm.SIDEWINDER:
        return sidewinder(position, run, width, coin)
    raise ValueError(f"Unsupported algorithm: {algorithm!r}")
