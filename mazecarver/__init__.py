"""
Maze carving core: grid, Binary Tree / Sidewinder carving and a solver.
"""

from .carver import Carver, CarveState, StepResult
from .grid import (
    Cell,
    Grid,
    InvalidDimensionError,
    MazeError,
    OutOfBoundsError,
    Walls,
    render_ascii,
)
from .policy import (
    NO_OP,
    Algorithm,
    Coin,
    Direction,
    NoOp,
    RemoveRandomWallFromRun,
    RemoveWall,
    binary_tree,
    decide,
    sidewinder,
)
from .randomness import RandomExhaustedError, RecordingRandom, ScriptedRandom, SeededRandom
from .session import (
    InvalidDelayError,
    Session,
    current_solve_position,
    is_carved,
    new_maze,
    request_move,
    snapshot_grid,
    step,
)
from .solver import MoveDirection, Solver, SolveState

__version__ = "0.1.0"
