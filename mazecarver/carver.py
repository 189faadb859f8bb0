"""
Carver: the step-by-step generation state machine.

Each step visits one cell in raster order, asks the policy what to open,
applies it to the grid and advances. The same steps run either all at once
(carve_all) or one per external tick (step); the result only depends on
the random outcomes, never on the pacing.
"""

import logging

from .policy import (
    Algorithm,
    Direction,
    NoOp,
    RemoveRandomWallFromRun,
    RemoveWall,
    decide,
)


logger = logging.getLogger(__name__)


class CarveState:
    """
    Mutable state while carving
    - position: cell about to be carved
    - run: cells visited since the last north opening, oldest first
    """

    def __init__(self, position=(0, 0)):
        self.position = position
        self.run = []

    def __repr__(self):
        return f"CarveState(position={self.position}, run={self.run})"


class StepResult:
    """
    What one step did, for renderers and tests
    - position: the cell that was carved
    - decision: the policy output
    - cleared: (direction, (x, y)) actually opened, or None
    """

    __slots__ = ("position", "decision", "cleared")

    def __init__(self, position, decision, cleared):
        self.position = position
        self.decision = decision
        self.cleared = cleared

    def __repr__(self):
        return f"StepResult({self.position}, cleared={self.cleared})"


class Carver:
    """
    Drives one generation over `grid`
    - state is None once every cell has been visited (Carved)
    """

    def __init__(self, grid, algorithm, random_source):
        self.grid = grid
        self.algorithm = Algorithm.parse(algorithm)
        self.random_source = random_source
        self.state = CarveState((0, 0))
        self.steps_taken = 0

    @property
    def is_carved(self):
        return self.state is None

    @property
    def position(self):
        return None if self.state is None else self.state.position

    @property
    def run(self):
        return () if self.state is None else tuple(self.state.run)

    # ---------- Stepping ----------

    def step(self):
        """
        Carve the current cell and move on. Returns a StepResult,
        or None if carving already finished.
        """
        if self.state is None:
            return None

        state = self.state
        position = state.position

        # One coin per cell, whether or not the rule looks at it
        coin = self.random_source.flip()
        decision = decide(
            self.algorithm, position, state.run,
            self.grid.width, self.grid.height, coin,
        )
        cleared = self._apply(decision)

        if cleared is not None and cleared[0] is Direction.NORTH:
            # A vertical opening closes the streak
            state.run = []
        else:
            state.run.append(position)

        logger.debug("Carved %s with %s -> %s", position, coin.value, cleared)

        self.steps_taken += 1
        self._advance()
        return StepResult(position, decision, cleared)

    def carve_all(self):
        """
        Run every remaining step synchronously. Returns the number of steps.
        """
        count = 0
        while self.step() is not None:
            count += 1
        return count

    def _apply(self, decision):
        """
        Open the wall named by `decision` and return (direction, target)
        """
        if isinstance(decision, NoOp):
            return None

        if isinstance(decision, RemoveRandomWallFromRun):
            candidates = decision.candidates
            target = candidates[self.random_source.choose(len(candidates))]
            direction = decision.direction
        elif isinstance(decision, RemoveWall):
            target = decision.position
            direction = decision.direction
        else:
            raise TypeError(f"Unknown wall decision: {decision!r}")

        x, y = target
        # The policy never proposes a boundary or off-grid wall
        if direction is Direction.NORTH:
            assert self.grid.in_bounds(x, y) and y > 0, f"north wall of {target} is not interior"
            self.grid.clear_north_wall(x, y)
        else:
            assert self.grid.in_bounds(x, y) and x < self.grid.width - 1, \
                f"east wall of {target} is not interior"
            self.grid.clear_east_wall(x, y)

        return (direction, target)

    def _advance(self):
        """
        Raster order: right along the row, then down to the next row
        """
        x, y = self.state.position
        if x + 1 < self.grid.width:
            self.state.position = (x + 1, y)
        elif y + 1 < self.grid.height:
            self.state.position = (0, y + 1)
        else:
            logger.info(
                "Finished %s carving of %dx%d grid in %d steps",
                self.algorithm.label, self.grid.width, self.grid.height, self.steps_taken,
            )
            self.state = None
