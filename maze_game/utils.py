"""
This module provides utility functions for the maze game.

It contains helper logic for translating raw key codes (as returned by
curses getch) into game actions.

Architecture Role:
    - Utilities: Shared helper functions that don't fit neatly into Model or View classes.

Modification History:
    - 2026-10-17: Replaced mouse-to-node translation with keyboard bindings.
"""

# getch() returns -1 when the poll interval passes without a key.
NO_KEY = -1
ESCAPE_KEY = 27

# Unit deltas (dx, dy) for each movement key. Negative dy is up.
KEY_DIRECTIONS = {
    ord('w'): (0, -1),
    ord('s'): (0, 1),
    ord('a'): (-1, 0),
    ord('d'): (1, 0),
}


def get_direction_for_key(ch: int):
    """
    Converts a key code to a movement delta.

    Args:
        ch (int): The key code returned by getch().

    Returns:
        tuple[int, int]: The (dx, dy) delta, or None if the key is not a movement key.
    """
    return KEY_DIRECTIONS.get(ch)


def is_quit_key(ch: int) -> bool:
    """Returns True if the key code is Escape."""
    return ch == ESCAPE_KEY
