"""
This module defines the core data models for the maze game.

It serves as the "Model" in the MVC architecture. It contains the cell kinds that
make up the grid and the Maze aggregate, which owns the grid, the player position
and the exit position, and implements all movement and win logic.

Architecture Role:
    - Model: Encapsulates application state and business logic.
    - State Management: Handles maze construction, movement and the win check.

Modification History:
    - 2026-10-17: Replaced the hexagonal node system with a rectangular maze grid.
"""

import enum
import logging
import random

from .map_generator import MapGenerator

logger = logging.getLogger(__name__)

# --- Grid Constants ---
WIDTH = 20
HEIGHT = 10
# The player always starts here, regardless of where walls land.
START = (1, 1)
# floor(width * height / WALL_FRACTION_DIVISOR) wall samples are drawn.
WALL_FRACTION_DIVISOR = 3


class Cell(enum.Enum):
    """The occupant of a single grid position. A position holds exactly one kind."""
    EMPTY = 'empty'
    WALL = 'wall'
    PLAYER = 'player'
    EXIT = 'exit'


class Maze(object):
    """
    Represents the entire maze: the grid, the player and the exit.

    This is the central class that manages:
    1. Construction (random walls, then the player and exit stamped on top).
    2. Movement with bounds and wall collision checks.
    3. The win condition.

    Attributes:
        width (int): Grid width (fixed at 20).
        height (int): Grid height (fixed at 10).
        seed (int): The seed the walls were generated from.
        grid (list[list[Cell]]): Row-major 2D array, indexed as grid[y][x].
    """
    def __init__(self, seed=None, width=WIDTH, height=HEIGHT):
        """
        Initializes the Maze and generates a fresh wall layout.

        Args:
            seed (int, optional): Seed for the wall RNG to create deterministic mazes.
                                  If None, a new seed is drawn from the system RNG.
            width (int): Number of columns.
            height (int): Number of rows.

        Raises:
            ValueError: If the grid is too small to hold distinct start and exit cells.
        """
        if width < 3 or height < 3 or (width, height) == (3, 3):
            raise ValueError(f'maze is too small for distinct start and exit cells: {width}x{height}')
        if seed is None:
            seed = random.SystemRandom().getrandbits(63)
        self.width = width
        self.height = height
        self.seed = seed
        self.grid = [[Cell.EMPTY] * width for _ in range(height)]
        self._walls = frozenset()
        self._player = START
        self._exit = (width - 2, height - 2)

        self.create_cells(seed)

    def create_cells(self, seed):
        """
        Populates the grid.

        Walls are placed first; the player and the exit are then stamped over
        whatever landed on their positions, so both are always walkable.

        Args:
            seed (int): Seed for the wall RNG.
        """
        generator = MapGenerator(self)
        placed = generator.generate(seed)

        x, y = self._player
        self.grid[y][x] = Cell.PLAYER
        x, y = self._exit
        self.grid[y][x] = Cell.EXIT

        self._walls = frozenset(placed - {self._player, self._exit})
        logger.info("Maze created (seed=%d, %d walls).", seed, len(self._walls))

    @property
    def player(self):
        """The player's current (x, y) position."""
        return self._player

    @property
    def exit(self):
        """The fixed (x, y) position of the exit."""
        return self._exit

    @property
    def walls(self):
        """The positions holding a wall. Fixed once the maze is built."""
        return self._walls

    def in_bounds(self, x, y):
        """Checks if (x, y) is within grid boundaries."""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x, y):
        """Returns the Cell at (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f'({x}, {y}) is outside the {self.width}x{self.height} grid')
        return self.grid[y][x]

    def move(self, dx: int, dy: int) -> bool:
        """
        Attempts to move the player by the given delta.

        Rules:
        - The target must be inside the grid.
        - The target must not be a wall.
        - The exit is not an obstacle; moving onto it is the winning move.

        Args:
            dx (int): Horizontal delta (negative is left).
            dy (int): Vertical delta (negative is up).

        Returns:
            bool: True if the move was accepted, False if it was rejected.
                  A rejected move leaves the grid and position untouched.
        """
        x, y = self._player
        new_x, new_y = x + dx, y + dy

        if not self.in_bounds(new_x, new_y) or self.grid[new_y][new_x] is Cell.WALL:
            logger.debug("Move (%d, %d) from (%d, %d) rejected.", dx, dy, x, y)
            return False

        # Stepping off the exit puts the exit marker back.
        self.grid[y][x] = Cell.EXIT if (x, y) == self._exit else Cell.EMPTY
        self.grid[new_y][new_x] = Cell.PLAYER
        self._player = (new_x, new_y)
        logger.debug("Player moved to (%d, %d).", new_x, new_y)
        return True

    def check_exit(self) -> bool:
        """Returns True if the player is standing on the exit."""
        return self._player == self._exit
