# tests/test_grid.py
import os
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from mazecarver import (
    Grid,
    InvalidDimensionError,
    MazeError,
    OutOfBoundsError,
    Walls,
    render_ascii,
)


def test_new_grid_is_fully_walled():
    grid = Grid.create(4, 3)

    for x, y in grid.positions():
        assert grid.get_walls(x, y) == Walls(True, True, True, True)
    assert grid.removed_wall_count() == 0


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 5), (0, 0)])
def test_create_rejects_non_positive_dimensions(width, height):
    with pytest.raises(InvalidDimensionError):
        Grid.create(width, height)


def test_errors_share_a_base_class():
    assert issubclass(InvalidDimensionError, MazeError)
    assert issubclass(InvalidDimensionError, ValueError)
    assert issubclass(OutOfBoundsError, MazeError)
    assert issubclass(OutOfBoundsError, IndexError)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2), (5, 5)])
def test_lookups_outside_the_grid_raise(x, y):
    grid = Grid.create(3, 2)

    with pytest.raises(OutOfBoundsError):
        grid.get_walls(x, y)
    with pytest.raises(OutOfBoundsError):
        grid.clear_north_wall(x, y)
    with pytest.raises(OutOfBoundsError):
        grid.clear_east_wall(x, y)


def test_raster_order():
    grid = Grid.create(3, 2)

    assert list(grid.positions()) == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]


def test_clearing_is_idempotent():
    grid = Grid.create(3, 3)

    grid.clear_east_wall(0, 1)
    grid.clear_east_wall(0, 1)
    grid.clear_north_wall(2, 2)
    grid.clear_north_wall(2, 2)

    assert grid.removed_wall_count() == 2
    assert not grid.get_walls(0, 1).east
    assert not grid.get_walls(2, 2).north


def test_south_and_west_are_views_of_neighbors():
    grid = Grid.create(3, 3)
    grid.clear_north_wall(1, 2)
    grid.clear_east_wall(0, 1)

    assert not grid.get_walls(1, 1).south
    assert not grid.get_walls(1, 1).west
    # Neighbors on the other sides are untouched
    assert grid.get_walls(1, 1).north
    assert grid.get_walls(1, 1).east


def test_derivation_holds_for_every_cell():
    grid = Grid.create(5, 4)
    for x, y in [(1, 1), (3, 2), (4, 3), (0, 3), (2, 1)]:
        grid.clear_north_wall(x, y)
    for x, y in [(0, 0), (2, 2), (3, 3), (1, 0)]:
        grid.clear_east_wall(x, y)

    for x, y in grid.positions():
        walls = grid.get_walls(x, y)
        if y + 1 < grid.height:
            assert walls.south == grid.get_walls(x, y + 1).north
        else:
            assert walls.south
        if x - 1 >= 0:
            assert walls.west == grid.get_walls(x - 1, y).east
        else:
            assert walls.west


def test_open_neighbors_follow_passages():
    grid = Grid.create(3, 3)
    grid.clear_north_wall(1, 1)
    grid.clear_east_wall(1, 1)
    grid.clear_north_wall(1, 2)

    assert sorted(grid.open_neighbors(1, 1)) == [(1, 0), (1, 2), (2, 1)]
    assert list(grid.open_neighbors(0, 0)) == []


def test_is_perfect_detects_cycles_and_islands():
    grid = Grid.create(2, 2)
    grid.clear_east_wall(0, 0)
    grid.clear_north_wall(0, 1)
    grid.clear_east_wall(0, 1)
    assert grid.is_perfect()

    grid.clear_north_wall(1, 1)
    assert not grid.is_perfect()

    island = Grid.create(2, 2)
    island.clear_east_wall(0, 0)
    island.clear_east_wall(0, 1)
    assert not island.is_perfect()


def test_copy_is_independent():
    grid = Grid.create(3, 3)
    grid.clear_east_wall(0, 0)
    snapshot = grid.copy()

    grid.clear_north_wall(2, 2)

    assert snapshot != grid
    assert snapshot.get_walls(2, 2).north
    assert not snapshot.get_walls(0, 0).east


def test_render_ascii():
    grid = Grid.create(2, 2)
    grid.clear_east_wall(0, 0)
    grid.clear_north_wall(1, 1)
    grid.clear_east_wall(0, 1)

    assert render_ascii(grid) == "\n".join([
        "+--+--+",
        "|     |",
        "+--+  +",
        "|     |",
        "+--+--+",
    ])
