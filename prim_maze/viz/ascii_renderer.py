import os
import sys
from typing import List, TextIO
from prim_maze.core.grid import Grid

class AsciiRenderer:
    CORNER = "X"
    WALL = "X"
    ADDED = "V"

    def __init__(self, grid: Grid, show_added: bool = False):
        self.grid = grid
        # Marks admitted cells, used for intermediate frames
        self.show_added = show_added

    def _horizontal_line(self, row: int) -> str:
        parts = []
        for col in range(self.grid.width):
            if self.grid.horizontal[row, col]:
                parts.append(self.CORNER + "   ")
            else:
                parts.append(self.CORNER + " " + self.WALL + " ")
        # Last corner on the far right
        parts.append(self.CORNER)
        return "".join(parts)

    def _cell_line(self, row: int) -> str:
        parts = []
        for col in range(self.grid.width):
            side = " " if self.grid.vertical[row, col] else self.WALL
            mark = " "
            if self.show_added and self.grid.is_added(row, col):
                mark = self.ADDED
            parts.append(side + " " + mark + " ")
        parts.append(self.CORNER)
        return "".join(parts)

    def render_lines(self) -> List[str]:
        lines = []
        for row in range(self.grid.depth):
            lines.append(self._horizontal_line(row))
            lines.append(self._cell_line(row))
        # Bottom edge
        lines.append(self._horizontal_line(self.grid.depth))
        return lines

    def render(self, newline: str = os.linesep) -> str:
        return "".join(line + newline for line in self.render_lines())

    def display(self, stream: TextIO = None):
        """Prints one frame followed by a blank line."""
        if stream is None:
            stream = sys.stdout
        # Text streams translate '\n' to the platform separator themselves
        print(self.render(newline="\n"), file=stream)
