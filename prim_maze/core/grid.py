from array import array
from enum import IntEnum
from typing import Iterator, Optional, Tuple

import numpy as np


class Direction(IntEnum):
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000


class Grid:
    # Cell flags
    ADDED = 0b00000001

    # Direction Helpers (row, col deltas)
    DR = {Direction.NORTH: -1, Direction.SOUTH: 1, Direction.EAST: 0, Direction.WEST: 0}
    DC = {Direction.NORTH: 0, Direction.SOUTH: 0, Direction.EAST: 1, Direction.WEST: -1}

    __slots__ = ('width', 'depth', 'cells', 'horizontal', 'vertical', 'event_writer')

    def __init__(self, width: int, depth: int, event_writer=None):
        if width < 1:
            raise ValueError(f"Maze width must be at least 1, got {width}")
        if depth < 1:
            raise ValueError(f"Maze depth must be at least 1, got {depth}")

        self.width = width
        self.depth = depth
        self.event_writer = event_writer
        # One flag byte per cell, nothing added yet
        self.cells = array('B', [0] * (width * depth))

        # horizontal[r][c]: wall above cell (r, c); one extra row for the bottom edge
        self.horizontal = np.zeros((depth + 1, width), dtype=bool)
        # vertical[r][c]: wall left of cell (r, c); one extra column for the right edge
        self.vertical = np.zeros((depth, width + 1), dtype=bool)

        # Entrance and exit
        self.horizontal[0, 0] = True
        self.horizontal[depth, width - 1] = True

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.depth and 0 <= col < self.width:
            return row * self.width + col
        raise IndexError(f"Cell ({row}, {col}) out of bounds")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.depth and 0 <= col < self.width

    def is_added(self, row: int, col: int) -> bool:
        return (self.cells[self.get_index(row, col)] & self.ADDED) != 0

    def mark_added(self, row: int, col: int) -> bool:
        """
        Flags cell (row, col) as part of the maze.
        Returns False (and changes nothing) if it was already added.
        """
        idx = self.get_index(row, col)
        if self.cells[idx] & self.ADDED:
            return False
        self.cells[idx] |= self.ADDED
        if self.event_writer is not None:
            self.event_writer.log_admit(row, col)
        return True

    def _wall_slot(self, row: int, col: int, direction: Direction) -> Tuple[np.ndarray, int, int]:
        """Maps a cell side to (matrix, i, j) in the wall-removal matrices."""
        self.get_index(row, col)
        if direction == Direction.NORTH:
            return self.horizontal, row, col
        elif direction == Direction.SOUTH:
            return self.horizontal, row + 1, col
        elif direction == Direction.WEST:
            return self.vertical, row, col
        else:  # EAST
            return self.vertical, row, col + 1

    def remove_wall(self, row: int, col: int, direction: Direction) -> bool:
        """
        Turns the wall on the 'direction' side of cell (row, col) into a passage.
        Walls are shared, so this also opens the neighbor's opposite side.
        Returns False if the wall was already removed.
        """
        matrix, i, j = self._wall_slot(row, col, direction)
        if matrix[i, j]:
            return False
        matrix[i, j] = True
        if self.event_writer is not None:
            self.event_writer.log_carve(row, col, direction)
        return True

    def is_wall_removed(self, row: int, col: int, direction: Direction) -> bool:
        matrix, i, j = self._wall_slot(row, col, direction)
        return bool(matrix[i, j])

    def has_wall(self, row: int, col: int, direction: Direction) -> bool:
        return not self.is_wall_removed(row, col, direction)

    def neighbor(self, row: int, col: int, direction: Direction) -> Optional[Tuple[int, int]]:
        nr = row + self.DR[direction]
        nc = col + self.DC[direction]
        if self.in_bounds(nr, nc):
            return nr, nc
        return None

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, Direction]]:
        """
        Yields (nr, nc, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        # West
        if col > 0:
            yield (row, col - 1, Direction.WEST)
        # East
        if col < self.width - 1:
            yield (row, col + 1, Direction.EAST)
        # North
        if row > 0:
            yield (row - 1, col, Direction.NORTH)
        # South
        if row < self.depth - 1:
            yield (row + 1, col, Direction.SOUTH)

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nr, nc) for neighbors reachable through a removed interior wall.
        """
        for nr, nc, direction in self.get_neighbors(row, col):
            if self.is_wall_removed(row, col, direction):
                yield (nr, nc)

    def added_count(self) -> int:
        return sum(1 for val in self.cells if val & self.ADDED)

    def walls_removed(self) -> int:
        return int(self.horizontal.sum() + self.vertical.sum())

    def interior_walls_removed(self) -> int:
        # Skip the outer boundary rows/columns (entrance and exit live there)
        inner_h = self.horizontal[1:self.depth, :]
        inner_v = self.vertical[:, 1:self.width]
        return int(inner_h.sum() + inner_v.sum())

    def wall_snapshot(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.horizontal.copy(), self.vertical.copy()
