import unittest
from maze_game.models import Maze, Cell
from maze_game.map_generator import MapGenerator

class TestMapGenerator(unittest.TestCase):
    def test_wall_sample_count(self):
        """Test one third of the cells (rounded down) are drawn as wall candidates."""
        maze = Maze(seed=0)
        self.assertEqual(MapGenerator(maze).wall_sample_count(), 66)
        self.assertEqual(MapGenerator(Maze(seed=0, width=5, height=4)).wall_sample_count(), 6)

    def test_map_generation(self):
        """Test the generator marks exactly the positions it returns as walls."""
        maze = Maze(seed=12345)
        for y in range(maze.height):
            for x in range(maze.width):
                maze.grid[y][x] = Cell.EMPTY

        walls = MapGenerator(maze).generate(12345)

        self.assertTrue(len(walls) > 0, "Map generator should place walls")
        self.assertLessEqual(len(walls), 66)
        for y in range(maze.height):
            for x in range(maze.width):
                expected = Cell.WALL if (x, y) in walls else Cell.EMPTY
                self.assertIs(maze.grid[y][x], expected)

    def test_density(self):
        """Test the wall density stays at or just under one third."""
        for seed in range(50):
            maze = Maze(seed=seed)
            self.assertLessEqual(len(maze.walls), 66)
            # Collisions thin the walls out, but never by more than half here.
            self.assertGreater(len(maze.walls), 33)

    def test_consistent_seed(self):
        """Test that the same seed produces the same maze."""
        seed = 67890
        maze1 = Maze(seed=seed)
        maze2 = Maze(seed=seed)

        self.assertEqual(maze1.walls, maze2.walls)
        self.assertEqual(maze1.grid, maze2.grid)

    def test_different_seeds(self):
        """Test that different seeds produce different wall layouts."""
        layouts = {Maze(seed=seed).walls for seed in range(10)}
        self.assertGreater(len(layouts), 1)

if __name__ == '__main__':
    unittest.main()
