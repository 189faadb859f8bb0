# tests/test_policy.py
import os
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from mazecarver import (
    NO_OP,
    Algorithm,
    Coin,
    Direction,
    RemoveRandomWallFromRun,
    RemoveWall,
    decide,
)

WIDTH = 5
HEIGHT = 4


def _interior_cells():
    return [(x, y) for y in range(1, HEIGHT) for x in range(WIDTH - 1)]


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("coin", list(Coin))
def test_northeast_corner_is_always_noop(algorithm, coin):
    decision = decide(algorithm, (WIDTH - 1, 0), [(0, 0), (1, 0)], WIDTH, HEIGHT, coin)

    assert decision is NO_OP


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("coin", list(Coin))
def test_top_row_always_opens_east(algorithm, coin):
    for x in range(WIDTH - 1):
        decision = decide(algorithm, (x, 0), [], WIDTH, HEIGHT, coin)

        assert decision == RemoveWall(Direction.EAST, (x, 0))


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("coin", list(Coin))
def test_right_column_always_opens_north(algorithm, coin):
    for y in range(1, HEIGHT):
        run = [(1, y), (2, y), (3, y)]
        decision = decide(algorithm, (WIDTH - 1, y), run, WIDTH, HEIGHT, coin)

        assert decision == RemoveWall(Direction.NORTH, (WIDTH - 1, y))


def test_binary_tree_interior_follows_the_coin():
    for position in _interior_cells():
        heads = decide(Algorithm.BINARY_TREE, position, [], WIDTH, HEIGHT, Coin.HEADS)
        tails = decide(Algorithm.BINARY_TREE, position, [], WIDTH, HEIGHT, Coin.TAILS)

        assert heads == RemoveWall(Direction.NORTH, position)
        assert tails == RemoveWall(Direction.EAST, position)


def test_sidewinder_on_tails_matches_binary_tree_everywhere():
    for y in range(HEIGHT):
        for x in range(WIDTH):
            run = [(i, y) for i in range(x)]
            sidewinder = decide(Algorithm.SIDEWINDER, (x, y), run, WIDTH, HEIGHT, Coin.TAILS)
            binary_tree = decide(Algorithm.BINARY_TREE, (x, y), run, WIDTH, HEIGHT, Coin.TAILS)

            assert sidewinder == binary_tree


def test_sidewinder_heads_defers_to_the_run():
    run = [(0, 2), (1, 2)]

    decision = decide(Algorithm.SIDEWINDER, (2, 2), run, WIDTH, HEIGHT, Coin.HEADS)

    assert decision == RemoveRandomWallFromRun(Direction.NORTH, ((0, 2), (1, 2), (2, 2)))


def test_sidewinder_heads_with_empty_run_only_offers_the_current_cell():
    decision = decide(Algorithm.SIDEWINDER, (0, 3), [], WIDTH, HEIGHT, Coin.HEADS)

    assert decision == RemoveRandomWallFromRun(Direction.NORTH, ((0, 3),))


def test_sidewinder_drops_top_row_members_from_candidates():
    # The run carries over from the top row into row 1 until a north opening
    run = [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (0, 1)]

    decision = decide(Algorithm.SIDEWINDER, (1, 1), run, WIDTH, HEIGHT, Coin.HEADS)

    assert decision.direction is Direction.NORTH
    assert decision.candidates == ((0, 1), (1, 1))
    assert all(y > 0 for _, y in decision.candidates)


def test_decide_rejects_positions_outside_the_grid():
    with pytest.raises(AssertionError):
        decide(Algorithm.BINARY_TREE, (WIDTH, 0), [], WIDTH, HEIGHT, Coin.HEADS)


@pytest.mark.parametrize("name,expected", [
    ("binary_tree", Algorithm.BINARY_TREE),
    ("Binary-Tree", Algorithm.BINARY_TREE),
    ("SIDEWINDER", Algorithm.SIDEWINDER),
    (Algorithm.SIDEWINDER, Algorithm.SIDEWINDER),
])
def test_algorithm_parse(name, expected):
    assert Algorithm.parse(name) is expected


def test_algorithm_parse_rejects_unknown_names():
    with pytest.raises(ValueError):
        Algorithm.parse("prim")
