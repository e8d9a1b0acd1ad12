from collections import deque
from prim_maze.core.grid import Grid, Direction

class MazeStats:
    @staticmethod
    def count_walls(grid: Grid, row: int, col: int) -> int:
        """Number of sides of (row, col) still walled, boundary included."""
        c = 0
        for direction in Direction:
            if grid.has_wall(row, col, direction):
                c += 1
        return c

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls

        for row in range(grid.depth):
            for col in range(grid.width):
                walls = MazeStats.count_walls(grid, row, col)
                if walls == 3: dead_ends += 1
                elif walls == 2: corridors += 1
                elif walls <= 1: intersections += 1

        total = grid.width * grid.depth
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "interior_walls_removed": grid.interior_walls_removed(),
            "added_cells": grid.added_count(),
        }

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        True when the passages form a spanning tree: every cell added,
        all cells reachable from (0, 0) and exactly cells - 1 passages.
        """
        total = grid.width * grid.depth
        if grid.added_count() != total:
            return False
        if grid.interior_walls_removed() != total - 1:
            return False

        seen = {(0, 0)}
        queue = deque([(0, 0)])
        while queue:
            row, col = queue.popleft()
            for nxt in grid.get_open_neighbors(row, col):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        # Connected with cells - 1 edges means no cycles
        return len(seen) == total
