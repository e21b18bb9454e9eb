import random


class MapGenerator:
    """
    Encapsulates the procedural wall placement for a maze.

    This class is responsible for scattering walls over an empty grid. It does
    not place the player or the exit, and it makes no attempt to keep the maze
    solvable: the exit may be walled off.
    """
    def __init__(self, maze):
        """
        Initializes the MapGenerator.

        Args:
            maze (Maze): The maze instance whose grid will receive the walls.
        """
        self.maze = maze

    def wall_sample_count(self):
        """Number of random wall draws: one third of the cells, rounded down."""
        from maze_game.models import WALL_FRACTION_DIVISOR
        return (self.maze.width * self.maze.height) // WALL_FRACTION_DIVISOR

    def generate(self, seed):
        """
        Places random walls on the maze grid.

        The generation process:
        1. Draw floor(W*H/3) random (x, y) positions.
        2. Collect them in a set, so repeated draws collapse into one wall.
        3. Mark every collected position as a wall.

        Args:
            seed (int): Random seed for generation to ensure reproducibility.
                        If None, a fresh unseeded generator is used.

        Returns:
            set[tuple[int, int]]: The positions that were marked as walls.
        """
        # Import here to avoid circular dependency with maze_game.models which imports MapGenerator
        from maze_game.models import Cell

        # A private RNG keeps map generation from disturbing the global random state
        rng = random.Random(seed)

        walls = set()
        for _ in range(self.wall_sample_count()):
            walls.add((rng.randrange(self.maze.width), rng.randrange(self.maze.height)))

        for x, y in walls:
            self.maze.grid[y][x] = Cell.WALL

        return walls
