"""
This module contains the core game engine for the maze game.

It defines the GameEngine class, which acts as the central controller for the game.
It manages the main game loop, polls the keyboard, and coordinates game state
updates between the Maze (model) and MazeRenderer (view).

Architecture Role:
    - Controller: Mediates between the Model (Maze) and View (MazeRenderer).
    - Game Loop: Manages the frame-by-frame execution and input handling.

Modification History:
    - 2026-10-17: Switched from blocking mouse input to a timed keyboard poll.
"""

import curses
import enum
import logging
import time
from .models import Maze
from .rendering import MazeRenderer
from .utils import get_direction_for_key, is_quit_key

logger = logging.getLogger(__name__)

# How long getch() waits for a key before the next frame is drawn.
POLL_INTERVAL_MS = 100
# How long the win banner stays up before the game exits.
WIN_DWELL_SECONDS = 2
# Milliseconds curses waits after ESC to tell a lone Escape from an escape sequence.
ESCAPE_DELAY_MS = 25


class GameResult(enum.Enum):
    """How a game session ended."""
    WIN = 'win'
    QUIT = 'quit'


class GameEngine(object):
    """
    Manages the main game loop and state of the maze game.

    This class is responsible for:
    1. Initializing the terminal for the session.
    2. Running the main loop (render -> win check -> input -> update).
    3. Translating key presses into player moves.
    4. Detecting the end of the game (win or quit).
    """

    def __init__(self, screen, maze=None, renderer=None):
        """
        Initializes the game engine with the given curses screen.

        Args:
            screen (curses.window): The main curses screen object.
            maze (Maze, optional): The maze to play. A fresh random maze if omitted.
            renderer (MazeRenderer, optional): The view. A default renderer if omitted.
        """
        self.screen = screen
        # Initialize the maze (Model)
        self.maze = maze if maze is not None else Maze()
        # Initialize the renderer (View)
        self.renderer = renderer if renderer is not None else MazeRenderer()
        # Configure curses settings
        self._setup_curses()

    def _setup_curses(self):
        """
        Configures the initial curses environment settings.

        Settings applied:
        - raw: Deliver every key immediately, without line buffering or signal keys.
        - noecho: Don't print key presses to screen.
        - curs_set(0): Hide the cursor.
        - set_escdelay: Report a lone Escape press promptly.
        - timeout: Make getch() give up after the poll interval.
        """
        curses.raw()
        curses.noecho()
        curses.curs_set(0)
        curses.set_escdelay(ESCAPE_DELAY_MS)
        self.screen.keypad(True)
        self.screen.timeout(POLL_INTERVAL_MS)
        self.screen.clear()
        self.renderer.init_colors()

    def handle_key(self, ch):
        """
        Applies a single key press to the game.

        Args:
            ch (int): The key code from getch(), or -1 if the poll timed out.

        Returns:
            GameResult: QUIT if the key ends the game, otherwise None.
        """
        if is_quit_key(ch):
            return GameResult.QUIT

        direction = get_direction_for_key(ch)
        if direction is not None:
            # Rejected moves are not reported; the next frame shows the unchanged maze.
            self.maze.move(*direction)
        return None

    def run(self):
        """
        Starts and runs the main game loop.

        This is a blocking call that runs until the player wins or presses Escape.

        The loop structure is:
        1. Render the current state.
        2. Check for a win (player on the exit).
        3. Wait up to the poll interval for a key.
        4. Update game state based on input.

        Returns:
            GameResult: WIN or QUIT.
        """
        while True:
            # --- Render Phase ---
            self.renderer.render(self.maze, self.screen)

            # --- Win Check ---
            if self.maze.check_exit():
                logger.info("Player reached the exit at %s.", self.maze.exit)
                self.renderer.render_win(self.maze, self.screen)
                time.sleep(WIN_DWELL_SECONDS)
                return GameResult.WIN

            # --- Input Phase ---
            ch = self.screen.getch()

            # --- Input Handling ---
            if self.handle_key(ch) is GameResult.QUIT:
                logger.info("Player quit at %s.", self.maze.player)
                return GameResult.QUIT
