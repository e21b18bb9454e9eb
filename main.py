"""
Runs the maze game from a source checkout: `python main.py`.

The curses session and game startup live in maze_game/__main__.py, which is
also what the installed `maze-game` command and `python -m maze_game` run.
"""

from maze_game.__main__ import run

if __name__ == '__main__':
    run()
