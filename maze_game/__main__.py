"""
This module serves as the main entry point for the maze game.

It handles the initialization of the curses environment and delegates the game loop
execution to the GameEngine. This separation of concerns ensures that the entry point
remains lightweight and focused on environment setup.

Architecture Role:
    - Entry Point: Bootstraps the application.
    - Environment Setup: Uses curses.wrapper to safely initialize/teardown the terminal.

Modification History:
    - 2026-10-17: Adapted for the maze game and added the console script hook.
    - 2026-10-17: Moved into the package so it runs as `python -m maze_game`.
"""

import curses
from maze_game.engine import GameEngine
from maze_game.logger import setup_logging
import logging

def main(screen):
    """
    The main function that initializes and runs the game.

    This function is called by curses.wrapper() and serves as the bridge between
    the curses environment and the game engine.

    Args:
        screen (curses.window): The main curses screen object provided by curses.wrapper.
                                This object represents the terminal window.

    Returns:
        GameResult: How the session ended (win or quit).

    Raises:
        Exception: Propagates any unhandled exceptions from the game engine, ensuring
                   curses is torn down correctly before crashing.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting maze game...")

    # Initialize the GameEngine with the prepared curses screen
    try:
        engine = GameEngine(screen)
        logger.info("Playing maze with seed %d.", engine.maze.seed)

        # Start the main game loop
        result = engine.run()
        logger.info("Game over: %s.", result.value)
        return result
    except Exception:
        logger.exception("An unhandled exception occurred during game execution:")
        raise
    finally:
        logger.info("Game shutting down.")

def run():
    """Console script entry point."""
    setup_logging()
    # curses.wrapper restores the terminal (raw mode off, echo on) on every
    # exit path, including when main() raises.
    curses.wrapper(main)

if __name__ == '__main__':
    run()
