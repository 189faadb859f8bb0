# tests/test_controls.py
import os
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

pygame = pytest.importorskip("pygame")
pytest.importorskip("OpenGL.GL")

import maze
from mazecarver import MoveDirection


def test_arrow_and_wasd_keys_map_to_moves():
    assert maze.key_to_direction(pygame.K_UP) is MoveDirection.UP
    assert maze.key_to_direction(pygame.K_a) is MoveDirection.LEFT
    assert maze.key_to_direction(pygame.K_s) is MoveDirection.DOWN
    assert maze.key_to_direction(pygame.K_RIGHT) is MoveDirection.RIGHT
    assert maze.key_to_direction(pygame.K_n) is None


def test_clamp_size():
    assert maze.clamp_size(0) == 1
    assert maze.clamp_size(40) == 40
    assert maze.clamp_size(81) == 80


def test_adjust_delay_walks_the_notches():
    assert maze.adjust_delay(20, 1) == 50
    assert maze.adjust_delay(20, -1) == 10
    assert maze.adjust_delay(0, -1) == 0
    assert maze.adjust_delay(500, 1) == 500
    assert maze.adjust_delay(23, 0) == 20


def test_parse_args_defaults_and_overrides():
    args = maze.parse_args(["--width", "12", "--algorithm", "sidewinder", "--delay", "0"])

    assert args.width == 12
    assert args.height == maze.MAZE_HEIGHT
    assert args.algorithm == "sidewinder"
    assert args.delay == 0
    assert args.seed is None
