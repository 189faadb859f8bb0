"""
Session: one maze from first carving step to the last solver move.

A session owns its grid. While carving, only the carver mutates it; once
carving is done a solver takes over. Changing size, algorithm or delay
never edits a session in place: a new one is built and the old one dropped.
"""

import logging

from .carver import Carver
from .grid import Grid, InvalidDimensionError, MazeError
from .policy import Algorithm
from .randomness import SeededRandom
from .solver import MoveDirection, Solver


logger = logging.getLogger(__name__)


# -----------------------------
# Configuration
# -----------------------------
MIN_SIZE = 1
MAX_SIZE = 80

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_ALGORITHM = Algorithm.BINARY_TREE
DEFAULT_DELAY_MS = 0


class InvalidDelayError(MazeError, ValueError):
    """
    Negative inter-step delay
    """


# -----------------------------
# Session
# -----------------------------
class Session:
    """
    Carving then solving on a single grid
    - delay_ms == 0: carved synchronously on creation
    - delay_ms > 0: carved one cell per step()/advance() tick
    """

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT,
                 algorithm=DEFAULT_ALGORITHM, delay_ms=DEFAULT_DELAY_MS,
                 random_source=None, seed=None):
        _check_dimensions(width, height)
        if delay_ms < 0:
            raise InvalidDelayError(f"Delay must be >= 0 ms, got {delay_ms}")

        self.algorithm = Algorithm.parse(algorithm)
        self.delay_ms = delay_ms
        self.seed = seed
        self.random_source = random_source if random_source is not None else SeededRandom(seed)

        self.grid = Grid.create(width, height)
        self.carver = Carver(self.grid, self.algorithm, self.random_source)
        self.solver = None
        self._pending_ms = 0

        logger.info(
            "New %dx%d %s maze (delay %d ms)",
            width, height, self.algorithm.label, delay_ms,
        )

        if delay_ms == 0:
            self.finish()

    # ---------- Properties ----------

    @property
    def width(self):
        return self.grid.width

    @property
    def height(self):
        return self.grid.height

    @property
    def steps_taken(self):
        return self.carver.steps_taken

    @property
    def carve_position(self):
        """
        Cell the carver will visit next, None once carved
        """
        return self.carver.position

    @property
    def current_run(self):
        return self.carver.run

    # ---------- Carving ----------

    def is_carved(self):
        return self.carver.is_carved

    def step(self):
        """
        Carve one cell. No-op once carved. Returns the StepResult or None.
        """
        result = self.carver.step()
        if self.carver.is_carved and self.solver is None:
            self._start_solving()
        return result

    def finish(self):
        """
        Carve every remaining cell now
        """
        while not self.is_carved():
            self.step()
        return self

    def advance(self, elapsed_ms):
        """
        Pacing helper for a frame loop: one step per full delay_ms of elapsed time.
        Returns the number of steps carried out.
        """
        if self.is_carved():
            return 0
        if self.delay_ms == 0:
            before = self.steps_taken
            self.finish()
            return self.steps_taken - before

        self._pending_ms += elapsed_ms
        steps = 0
        while self._pending_ms >= self.delay_ms and not self.is_carved():
            self._pending_ms -= self.delay_ms
            self.step()
            steps += 1
        if self.is_carved():
            self._pending_ms = 0
        return steps

    def _start_solving(self):
        self.solver = Solver(self.grid)
        logger.info("Maze carved; solving from %s to %s", self.solver.start, self.solver.goal)

    # ---------- Solving ----------

    def request_move(self, direction):
        """
        Try to move the solver. Ignored while still carving.
        Returns True if the position changed.
        """
        if self.solver is None:
            logger.debug("Ignoring move %s while carving", direction)
            return False
        if not isinstance(direction, MoveDirection):
            direction = MoveDirection[str(direction).upper()]
        return self.solver.move(direction)

    def current_solve_position(self):
        """
        Solver position, or None while still carving
        """
        if self.solver is None:
            return None
        return self.solver.position

    def is_solved(self):
        return self.solver is not None and self.solver.is_solved()

    def reset_solver(self):
        """
        Back to the start cell on the same maze
        """
        if self.solver is not None:
            self.solver.reset()

    @property
    def moves(self):
        return 0 if self.solver is None else self.solver.moves

    # ---------- Snapshots / restarts ----------

    def snapshot_grid(self):
        """
        Read-only copy of the grid for a renderer
        """
        return self.grid.copy()

    def restart(self, seed=None, random_source=None):
        """
        Same configuration, brand-new grid and carver
        """
        return Session(
            self.width, self.height, self.algorithm, self.delay_ms,
            random_source=random_source, seed=seed,
        )

    def reconfigure(self, width=None, height=None, algorithm=None, delay_ms=None,
                    seed=None, random_source=None):
        """
        New session with some settings changed; generation starts from scratch
        """
        return Session(
            self.width if width is None else width,
            self.height if height is None else height,
            self.algorithm if algorithm is None else algorithm,
            self.delay_ms if delay_ms is None else delay_ms,
            random_source=random_source, seed=seed,
        )

    def __repr__(self):
        state = "carved" if self.is_carved() else f"carving at {self.carve_position}"
        return f"Session({self.width}x{self.height}, {self.algorithm.value}, {state})"


def _check_dimensions(width, height):
    if not (MIN_SIZE <= width <= MAX_SIZE and MIN_SIZE <= height <= MAX_SIZE):
        raise InvalidDimensionError(
            width, height,
            f"Invalid maze dimensions {width}x{height}: each must be in [{MIN_SIZE}, {MAX_SIZE}]",
        )


# -----------------------------
# Function-style API
# -----------------------------
def new_maze(width, height, algorithm=DEFAULT_ALGORITHM, delay_ms=DEFAULT_DELAY_MS,
             random_source=None, seed=None):
    return Session(width, height, algorithm, delay_ms, random_source=random_source, seed=seed)


def step(session):
    session.step()
    return session


def is_carved(session):
    return session.is_carved()


def snapshot_grid(session):
    return session.snapshot_grid()


def request_move(session, direction):
    session.request_move(direction)
    return session


def current_solve_position(session):
    return session.current_solve_position()
