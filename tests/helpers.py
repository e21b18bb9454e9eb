"""Shared fixtures for the maze game tests."""

from maze_game.models import Maze, Cell


def open_maze(seed=0):
    """Returns a maze with every wall knocked down, so any path is walkable."""
    maze = Maze(seed=seed)
    for y in range(maze.height):
        for x in range(maze.width):
            if maze.grid[y][x] is Cell.WALL:
                maze.grid[y][x] = Cell.EMPTY
    return maze
