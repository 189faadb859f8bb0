"""
Random outcomes consumed by the carver.

The policy never draws on its own; the carver asks a RandomSource for a
coin flip every step and for an index only when a run member has to be
picked.
"""

import random

from .grid import MazeError
from .policy import Coin


class RandomExhaustedError(MazeError):
    """
    A scripted source ran out of outcomes
    """


class SeededRandom:
    """
    Draws from a local random.Random so seeding does not touch global state
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = random.Random(seed)

    def flip(self):
        return Coin.HEADS if self._rng.random() < 0.5 else Coin.TAILS

    def choose(self, n):
        """
        Uniform index in [0, n)
        """
        if n < 1:
            raise ValueError("choose() needs at least one candidate")
        return self._rng.randrange(n)

    def __repr__(self):
        return f"SeededRandom(seed={self.seed!r})"


class ScriptedRandom:
    """
    Replays fixed outcomes, for tests and for replaying a recorded maze
    - coins: sequence of Coin (or "H"/"T" strings)
    - choices: sequence of indices handed out by choose()
    """

    def __init__(self, coins, choices=()):
        self._coins = [_to_coin(c) for c in coins]
        self._choices = list(choices)
        self._coin_pos = 0
        self._choice_pos = 0

    def flip(self):
        if self._coin_pos >= len(self._coins):
            raise RandomExhaustedError(f"No scripted coin left after {self._coin_pos} flips")
        coin = self._coins[self._coin_pos]
        self._coin_pos += 1
        return coin

    def choose(self, n):
        if self._choice_pos >= len(self._choices):
            raise RandomExhaustedError(f"No scripted choice left after {self._choice_pos} picks")
        index = self._choices[self._choice_pos]
        self._choice_pos += 1
        if not 0 <= index < n:
            raise ValueError(f"Scripted choice {index} outside [0, {n})")
        return index

    @property
    def flips_used(self):
        return self._coin_pos

    @property
    def choices_used(self):
        return self._choice_pos


class RecordingRandom:
    """
    Wraps another source and remembers every outcome it hands out,
    so the same maze can be replayed through ScriptedRandom
    """

    def __init__(self, source):
        self.source = source
        self.coins = []
        self.choices = []

    def flip(self):
        coin = self.source.flip()
        self.coins.append(coin)
        return coin

    def choose(self, n):
        index = self.source.choose(n)
        self.choices.append(index)
        return index

    def replay(self):
        return ScriptedRandom(self.coins, self.choices)


def _to_coin(value):
    if isinstance(value, Coin):
        return value
    text = str(value).strip().upper()
    if text in ("H", "HEADS"):
        return Coin.HEADS
    if text in ("T", "TAILS"):
        return Coin.TAILS
    raise ValueError(f"Not a coin outcome: {value!r}")
