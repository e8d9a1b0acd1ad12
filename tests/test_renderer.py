import io
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from prim_maze.core.grid import Grid, Direction
from prim_maze.algo.prim import PrimsAlgorithm
from prim_maze.viz.ascii_renderer import AsciiRenderer

class TestAsciiRenderer(unittest.TestCase):
    def test_single_cell(self):
        grid = Grid(1, 1)
        PrimsAlgorithm(grid, seed=0).run_all()
        lines = AsciiRenderer(grid).render_lines()
        self.assertEqual(lines, [
            "X   X",
            "X   X",
            "X   X",
        ])

    def test_two_cells(self):
        grid = Grid(2, 1)
        PrimsAlgorithm(grid, seed=3).run_all()
        lines = AsciiRenderer(grid).render_lines()
        self.assertEqual(lines, [
            "X   X X X",
            "X       X",
            "X X X   X",
        ])

    def test_added_markers(self):
        grid = Grid(2, 1)
        grid.mark_added(0, 1)
        self.assertEqual(AsciiRenderer(grid, show_added=True).render_lines()[1], "X   X V X")
        self.assertEqual(AsciiRenderer(grid).render_lines()[1], "X   X   X")

        grid.remove_wall(0, 1, Direction.WEST)
        self.assertEqual(AsciiRenderer(grid, show_added=True).render_lines()[1], "X     V X")

    def test_reflects_wall_state(self):
        grid = Grid(2, 2)
        grid.remove_wall(0, 0, Direction.SOUTH)
        lines = AsciiRenderer(grid).render_lines()
        self.assertEqual(lines[2], "X   X X X")
        grid.remove_wall(1, 1, Direction.WEST)
        lines = AsciiRenderer(grid).render_lines()
        self.assertEqual(lines[3], "X       X")

    def test_dimensions(self):
        w, d = 13, 7
        grid = Grid(w, d)
        PrimsAlgorithm(grid, seed=11).run_all()
        lines = AsciiRenderer(grid).render_lines()
        self.assertEqual(len(lines), 2 * d + 1)
        for line in lines:
            self.assertEqual(len(line), 4 * w + 1)
            self.assertTrue(line.endswith("X"))
        # Corners are always drawn
        for row in range(0, len(lines), 2):
            self.assertTrue(all(lines[row][i] == "X" for i in range(0, 4 * w + 1, 4)))

    def test_render_newline(self):
        grid = Grid(3, 2)
        text = AsciiRenderer(grid).render(newline="\n")
        self.assertTrue(text.endswith("\n"))
        self.assertEqual(text.split("\n")[:-1], AsciiRenderer(grid).render_lines())
        self.assertEqual(AsciiRenderer(grid).render().count(os.linesep), 5)

    def test_display(self):
        grid = Grid(2, 2)
        out = io.StringIO()
        AsciiRenderer(grid).display(out)
        lines = out.getvalue().split("\n")
        # Frame, blank separator line, then the final empty split
        self.assertEqual(lines[:5], AsciiRenderer(grid).render_lines())
        self.assertEqual(lines[5:], ["", ""])

if __name__ == '__main__':
    unittest.main()
