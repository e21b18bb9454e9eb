"""
This module handles the rendering of the maze on the terminal using the curses library.

It defines the MazeRenderer class, which is responsible for drawing the grid inside a
bordered, titled frame and for showing the win banner. It translates the abstract game
state (Maze) into characters and colors on the terminal screen.

Architecture Role:
    - View: Displays the game state to the user.
    - UI Rendering: Manages layout, colors, and the box drawing around the grid.

Modification History:
    - 2026-10-17: Replaced the hexagonal system map with a bordered maze table.
"""

import curses
from .models import Cell

TITLE = 'Maze Game'
WIN_MESSAGE = 'You Win!'
# Spaces between two neighbouring glyphs in a row.
COLUMN_SPACING = 1

CELL_GLYPHS = {
    Cell.WALL: '#',
    Cell.PLAYER: 'P',
    Cell.EXIT: 'E',
    Cell.EMPTY: ' ',
}

# Color pair numbers per cell kind. Pair 0 is the terminal default.
CELL_COLOR_PAIRS = {
    Cell.WALL: 1,
    Cell.PLAYER: 2,
    Cell.EXIT: 3,
    Cell.EMPTY: 0,
}
WIN_COLOR_PAIR = 2


def clip_addstr(screen, y, x, text, attr=0):
    """
    Writes text at (y, x), dropping whatever falls outside the screen.

    curses rejects an addstr that ends in the bottom-right cell, because the
    cursor cannot advance past it. That last character is written with insstr,
    which leaves the cursor where it is.

    Args:
        screen (curses.window): The window to draw on.
        y (int): Row of the first character.
        x (int): Column of the first character.
        text (str): Single-width characters to write.
        attr (int): curses attributes for the text.
    """
    max_y, max_x = screen.getmaxyx()
    if y < 0 or x < 0 or y >= max_y or x >= max_x:
        return
    text = text[:max_x - x]
    if y == max_y - 1 and x + len(text) == max_x:
        screen.insstr(y, max_x - 1, text[-1], attr)
        text = text[:-1]
    if text:
        screen.addstr(y, x, text, attr)


def draw_box(title, body, inner_width):
    """
    Wraps body lines in a box with the title embedded in the top edge.

    Args:
        title (str): Text placed at the start of the top edge.
        body (list[str]): Lines to enclose. Each is padded to inner_width.
        inner_width (int): Number of columns between the two side borders.

    Returns:
        list[str]: The boxed lines, top edge first.
    """
    inner_width = max(inner_width, len(title))
    lines = ['┌' + title + '─' * (inner_width - len(title)) + '┐']
    for line in body:
        lines.append('│' + line.ljust(inner_width) + '│')
    lines.append('└' + '─' * inner_width + '┘')
    return lines


class MazeRenderer(object):
    """
    The MazeRenderer class is responsible for rendering the maze in the terminal.

    Each frame is a full redraw: the whole grid is rebuilt from the Maze and
    written to the screen. Rendering only reads the maze.
    """

    def __init__(self, use_colors=False):
        """
        Initializes the MazeRenderer.

        Args:
            use_colors (bool): Draw glyphs with color pairs. Requires init_colors()
                               to have been called inside a curses session.
        """
        self.use_colors = use_colors

    def init_colors(self):
        """
        Registers the color pairs used for the glyphs.

        Must be called after curses has been initialized. Leaves colors off on
        terminals that do not support them.
        """
        if not curses.has_colors():
            self.use_colors = False
            return
        curses.start_color()
        curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLACK)
        curses.init_pair(2, curses.COLOR_GREEN, curses.COLOR_BLACK)
        curses.init_pair(3, curses.COLOR_YELLOW, curses.COLOR_BLACK)
        self.use_colors = True

    def get_cell_string(self, cell: Cell) -> str:
        """Returns the one-character glyph for a cell."""
        return CELL_GLYPHS[cell]

    def inner_width(self, maze):
        """Width of a grid row once the column spacing is added."""
        return maze.width + (maze.width - 1) * COLUMN_SPACING

    def build_frame(self, maze):
        """
        Builds the text of a full frame: the grid inside a titled box.

        Args:
            maze (Maze): The maze to draw.

        Returns:
            list[str]: One string per terminal line.
        """
        separator = ' ' * COLUMN_SPACING
        rows = [separator.join(self.get_cell_string(cell) for cell in row) for row in maze.grid]
        return draw_box(TITLE, rows, self.inner_width(maze))

    def build_banner(self, message, inner_width=0):
        """Builds a box titled with the message, at least inner_width columns wide."""
        return draw_box(message, [''], inner_width)

    def render(self, maze, screen):
        """
        Renders the maze on the provided curses screen.

        Args:
            maze (Maze): The maze representing the current game state.
            screen (curses.window): The curses screen object to draw on.
                                    Parts of the frame that do not fit are left out.
        """
        screen.erase()
        for y, line in enumerate(self.build_frame(maze)):
            clip_addstr(screen, y, 0, line)

        if self.use_colors:
            # Repaint the non-empty glyphs in their colors, inside the border.
            step = 1 + COLUMN_SPACING
            for y, row in enumerate(maze.grid):
                for x, cell in enumerate(row):
                    pair = CELL_COLOR_PAIRS[cell]
                    if pair:
                        clip_addstr(screen, y + 1, 1 + x * step, self.get_cell_string(cell),
                                    curses.color_pair(pair) | curses.A_BOLD)

        screen.refresh()

    def render_win(self, maze, screen):
        """Replaces the maze with the win banner, sized to the maze frame and clipped to the screen."""
        screen.erase()
        attr = curses.color_pair(WIN_COLOR_PAIR) | curses.A_BOLD if self.use_colors else 0
        for y, line in enumerate(self.build_banner(WIN_MESSAGE, self.inner_width(maze))):
            clip_addstr(screen, y, 0, line, attr)
        screen.refresh()
