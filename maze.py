# -*- coding: utf-8 -*-
"""
Project: Maze Carver
Start Date: 10/18/2026

Brief Description:
    - Language: Python
    - Stack: pygame, PyOpenGL
    - Watch a Binary Tree / Sidewinder maze being carved, then walk it
      from the bottom-left corner to the top-right corner
"""

# Pylint notes:
# - We intentionally use wildcard imports from pygame.locals and PyOpenGL
#   for convenience in a real-time graphics script.
# - These modules are C extensions / dynamic, so pylint cannot reliably
#   see the symbols and reports them as undefined.
# For THIS file, we disable those specific checks.
# pylint: disable=wildcard-import, unused-wildcard-import, no-member, undefined-variable

import sys
import time
import logging
import argparse

import pygame
from pygame.locals import *

from OpenGL.GL import *

from mazecarver import Algorithm, MoveDirection, Session
from mazecarver.session import MAX_SIZE, MIN_SIZE


# -----------------------------
# Configuration
# -----------------------------
MAZE_WIDTH = 20
MAZE_HEIGHT = 20
MAZE_CELL_SIZE = 28           # pixels, cosmetic only
MAZE_ALGORITHM = "binary_tree"
MAZE_DELAY_MS = 20

HUD_HEIGHT = 90
MARGIN = 20
TARGET_FPS = 60

DELAY_STEPS_MS = [0, 1, 5, 10, 20, 50, 100, 200, 500]

FLOOR_COLOR = (0.22, 0.24, 0.26)
WALL_COLOR = (0.85, 0.85, 0.85)
CURSOR_COLOR = (0.90, 0.30, 0.30)
RUN_COLOR = (0.30, 0.35, 0.65)
PLAYER_COLOR = (0.25, 0.80, 0.35)
GOAL_COLOR = (0.85, 0.55, 0.15)


# -----------------------------
# Input helpers
# -----------------------------
KEY_DIRECTIONS = {
    K_UP: MoveDirection.UP,
    K_w: MoveDirection.UP,
    K_DOWN: MoveDirection.DOWN,
    K_s: MoveDirection.DOWN,
    K_LEFT: MoveDirection.LEFT,
    K_a: MoveDirection.LEFT,
    K_RIGHT: MoveDirection.RIGHT,
    K_d: MoveDirection.RIGHT,
}


def key_to_direction(key):
    """
    Map a pygame key to a solver move, or None
    """
    return KEY_DIRECTIONS.get(key)


def clamp_size(value):
    return max(MIN_SIZE, min(MAX_SIZE, value))


def adjust_delay(delay_ms, step):
    """
    Move `step` notches along DELAY_STEPS_MS from the closest notch to delay_ms
    """
    closest = min(range(len(DELAY_STEPS_MS)), key=lambda i: abs(DELAY_STEPS_MS[i] - delay_ms))
    index = max(0, min(len(DELAY_STEPS_MS) - 1, closest + step))
    return DELAY_STEPS_MS[index]


# -----------------------------
# Game (main loop + glue)
# -----------------------------
class Game:
    """
    Game ties together:
        - Window + OpenGL setup
        - the maze Session (carving, then solving)
        - Event handling, update, render loop
    """

    def __init__(self, width=MAZE_WIDTH, height=MAZE_HEIGHT, algorithm=MAZE_ALGORITHM,
                 delay_ms=MAZE_DELAY_MS, cell_size=MAZE_CELL_SIZE, seed=None):
        pygame.init()
        pygame.display.set_caption("Maze Carver")

        self.font = pygame.font.SysFont("consolas", 18)
        self.cell_size = cell_size
        self.seed = seed
        self.running = True

        # Maze session
        self.session = Session(width, height, algorithm, delay_ms, seed=seed)

        self.window_width = 0
        self.window_height = 0
        self.open_window()

        # Timing
        self.clock = pygame.time.Clock()
        self.start_time = time.time()
        self.elapsed_time = 0.0

    # ---------- Window ----------

    def open_window(self):
        """
        (Re)create the window to fit the current maze and reset the projection
        """
        width = self.session.width * self.cell_size + 2 * MARGIN
        height = self.session.height * self.cell_size + 2 * MARGIN + HUD_HEIGHT
        width = max(width, 420)

        if (width, height) != (self.window_width, self.window_height):
            flags = DOUBLEBUF | OPENGL  # pylint: disable=unsupported-binary-operation
            pygame.display.set_mode((width, height), flags)
            self.window_width = width
            self.window_height = height

        self.init_opengl()

    def init_opengl(self):
        """
        Orthographic projection with (0, 0) at the top-left pixel
        """
        glViewport(0, 0, self.window_width, self.window_height)
        glDisable(GL_DEPTH_TEST)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.window_width, self.window_height, 0, -1, 1)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        glLineWidth(2.0)

    # ---------- Events ----------

    def handle_events(self):
        """
        Handle pygame events and forward user intents to the session
        """
        for event in pygame.event.get():
            if event.type == QUIT:
                self.running = False

            elif event.type == KEYDOWN:
                if event.key == K_ESCAPE:
                    self.running = False

                # Movement
                elif key_to_direction(event.key) is not None:
                    if self.session.request_move(key_to_direction(event.key)) \
                            and self.session.is_solved():
                        print(f"Solved in {self.session.moves} moves, {self.elapsed_time:.1f}s")

                # Algorithm choice
                elif event.key == K_1:
                    self.reconfigure(algorithm=Algorithm.BINARY_TREE)
                elif event.key == K_2:
                    self.reconfigure(algorithm=Algorithm.SIDEWINDER)

                # Size
                elif event.key == K_LEFTBRACKET:
                    self.reconfigure(width=clamp_size(self.session.width - 1))
                elif event.key == K_RIGHTBRACKET:
                    self.reconfigure(width=clamp_size(self.session.width + 1))
                elif event.key == K_MINUS:
                    self.reconfigure(height=clamp_size(self.session.height - 1))
                elif event.key == K_EQUALS:
                    self.reconfigure(height=clamp_size(self.session.height + 1))

                # Speed
                elif event.key == K_COMMA:
                    self.reconfigure(delay_ms=adjust_delay(self.session.delay_ms, -1))
                elif event.key == K_PERIOD:
                    self.reconfigure(delay_ms=adjust_delay(self.session.delay_ms, 1))

                # Restart from entrance
                elif event.key == K_r:
                    self.restart_from_entrance()
                    print("Restarted from entrance")

                # Regenerate maze
                elif event.key == K_n:
                    self.regenerate_maze()
                    print("Regenerated maze")

    def reconfigure(self, **changes):
        """
        Any settings change throws the current maze away and carves a new one
        """
        self.session = self.session.reconfigure(seed=self.seed, **changes)
        self.open_window()
        self.reset_timer()
        print(f"Maze: {self.session.width}x{self.session.height}, "
              f"{self.session.algorithm.label}, delay {self.session.delay_ms} ms")

    def restart_from_entrance(self):
        """
        Reset player to the start cell and reset timer.
        """
        self.session.reset_solver()
        self.reset_timer()

    def regenerate_maze(self):
        """
        Create a new maze with the same settings, reset timer.
        """
        self.session = self.session.restart()
        self.reset_timer()

    def reset_timer(self):
        self.start_time = time.time()
        self.elapsed_time = 0.0

    # ---------- Update ----------

    def update(self, dt_ms):
        """
        Advance carving by the elapsed frame time, then the timer
        """
        if not self.session.is_carved():
            self.session.advance(dt_ms)
            self.reset_timer()
            return

        if not self.session.is_solved():
            self.elapsed_time = time.time() - self.start_time

    # ---------- Drawing ----------

    def cell_origin(self, x, y):
        """
        Top-left pixel of cell (x, y)
        """
        return MARGIN + x * self.cell_size, HUD_HEIGHT + MARGIN + y * self.cell_size

    def draw_scene(self):
        """
        Render the maze and the HUD.
        """
        glClearColor(0.08, 0.08, 0.12, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

        grid = self.session.grid

        glColor3f(*FLOOR_COLOR)
        for x, y in grid.positions():
            self._fill_cell(x, y)

        if self.session.is_carved():
            glColor3f(*GOAL_COLOR)
            self._fill_cell(*self.session.solver.goal, inset=0.2)
            glColor3f(*PLAYER_COLOR)
            self._fill_cell(*self.session.current_solve_position(), inset=0.25)
        else:
            glColor3f(*RUN_COLOR)
            for x, y in self.session.current_run:
                self._fill_cell(x, y)
            glColor3f(*CURSOR_COLOR)
            self._fill_cell(*self.session.carve_position)

        glColor3f(*WALL_COLOR)
        self._draw_all_walls(grid)

        self.draw_hud()

    def _fill_cell(self, x, y, inset=0.0):
        """
        Draw a quad covering cell (x, y), shrunk by `inset` of the cell size on each side
        """
        x0, y0 = self.cell_origin(x, y)
        pad = self.cell_size * inset
        x1 = x0 + self.cell_size - pad
        y1 = y0 + self.cell_size - pad
        x0 += pad
        y0 += pad

        glBegin(GL_QUADS)
        glVertex2f(x0, y0)
        glVertex2f(x1, y0)
        glVertex2f(x1, y1)
        glVertex2f(x0, y1)
        glEnd()

    def _draw_all_walls(self, grid):
        """
        Draw each wall once:
        - for every cell, north and west
        - for the last row, also south
        - for the last column, also east
        """
        glBegin(GL_LINES)
        for x, y in grid.positions():
            walls = grid.get_walls(x, y)
            x0, y0 = self.cell_origin(x, y)
            x1 = x0 + self.cell_size
            y1 = y0 + self.cell_size

            if walls.north:
                glVertex2f(x0, y0)
                glVertex2f(x1, y0)
            if walls.west:
                glVertex2f(x0, y0)
                glVertex2f(x0, y1)
            if y == grid.height - 1 and walls.south:
                glVertex2f(x0, y1)
                glVertex2f(x1, y1)
            if x == grid.width - 1 and walls.east:
                glVertex2f(x1, y0)
                glVertex2f(x1, y1)
        glEnd()

    def _draw_text_2d(self, x, y, text, color=(255, 255, 255, 255)):
        """
        Draw text at screen coordinates (x, y) using a temporary texture.
        (0,0) is top-left of the window.
        """
        if not text:
            return

        surface = self.font.render(text, True, color[:3])
        text_data = pygame.image.tostring(surface, "RGBA", False)
        w, h = surface.get_size()

        tex_id = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, tex_id)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0,
                     GL_RGBA, GL_UNSIGNED_BYTE, text_data)

        glEnable(GL_TEXTURE_2D)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glColor4f(1.0, 1.0, 1.0, 1.0)

        glBegin(GL_QUADS)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y + h)
        glEnd()

        glDisable(GL_BLEND)
        glDisable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, 0)
        glDeleteTextures([tex_id])

    def draw_hud(self):
        """
        Draw HUD with settings, carving/solving state and elapsed time.
        """
        session = self.session
        config_text = (f"{session.algorithm.label}  {session.width}x{session.height}"
                       f"  delay {session.delay_ms} ms")

        if not session.is_carved():
            state_text = f"Carving {session.carve_position}  step {session.steps_taken}"
        elif session.is_solved():
            state_text = f"Solved! {session.moves} moves"
        else:
            state_text = f"Cell: {session.current_solve_position()}  moves {session.moves}"

        total_seconds = int(self.elapsed_time)
        time_text = f"Time: {total_seconds // 60:02d}:{total_seconds % 60:02d}"

        self._draw_text_2d(10, 10, config_text)
        self._draw_text_2d(10, 35, state_text)
        self._draw_text_2d(10, 60, time_text)

    def run(self):
        """
        Main game loop
        """
        while self.running:
            dt_ms = self.clock.tick(TARGET_FPS)

            self.handle_events()
            self.update(dt_ms)
            self.draw_scene()

            pygame.display.flip()

        pygame.quit()
        sys.exit()


# -----------------------------
# Entry point
# -----------------------------
def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Binary Tree / Sidewinder maze carver")
    parser.add_argument("--width", type=int, default=MAZE_WIDTH, help="cells per row")
    parser.add_argument("--height", type=int, default=MAZE_HEIGHT, help="cells per column")
    parser.add_argument("--algorithm", default=MAZE_ALGORITHM,
                        choices=[a.value for a in Algorithm], help="carving algorithm")
    parser.add_argument("--delay", type=int, default=MAZE_DELAY_MS,
                        help="milliseconds between carving steps (0 = instant)")
    parser.add_argument("--cell-size", type=int, default=MAZE_CELL_SIZE, help="cell size in pixels")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible maze")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    Game(args.width, args.height, args.algorithm, args.delay, args.cell_size, args.seed).run()


if __name__ == "__main__":
    main()
