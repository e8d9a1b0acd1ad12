import logging
from typing import Iterator, List, NamedTuple
from prim_maze.core.grid import Direction, Grid
from prim_maze.algo.base import Generator

logger = logging.getLogger(__name__)


class WallPiece(NamedTuple):
    """A wall of an already added cell, proposed for removal."""
    row: int
    col: int
    direction: Direction


class PrimsAlgorithm(Generator):
    """
    Randomized Prim's over a frontier of walls.

    Stale frontier entries (whose target got added in the meantime) are
    dropped when drawn instead of being pruned eagerly.
    """
    def __init__(self, grid: Grid, seed: int = None, rng=None, event_writer=None):
        super().__init__(grid, seed=seed, rng=rng)
        self.event_writer = event_writer
        self.admitted_count = 0
        self.stale_count = 0

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        start_row = rng.randrange(grid.depth)
        start_col = rng.randrange(grid.width)
        grid.mark_added(start_row, start_col)
        self.admitted_count = 1
        logger.debug(f"Prim's on {grid.width}x{grid.depth}, starting at ({start_row}, {start_col})")

        # Every in-grid side of the start cell is a candidate
        frontier: List[WallPiece] = [
            WallPiece(start_row, start_col, direction)
            for _, _, direction in grid.get_neighbors(start_row, start_col)
        ]

        while frontier:
            # Pick random wall, swap remove for O(1)
            idx = rng.randrange(len(frontier))
            wall = frontier[idx]
            frontier[idx] = frontier[-1]
            frontier.pop()
            self.step_count += 1

            nr, nc = grid.neighbor(wall.row, wall.col, wall.direction)

            if grid.is_added(nr, nc):
                self.stale_count += 1
                if self.event_writer is not None:
                    self.event_writer.log_draw(wall.row, wall.col, wall.direction, stale=True)
            else:
                if self.event_writer is not None:
                    self.event_writer.log_draw(wall.row, wall.col, wall.direction)
                grid.mark_added(nr, nc)
                grid.remove_wall(wall.row, wall.col, wall.direction)
                self.admitted_count += 1

                # Walls of the new cell that lead somewhere unvisited
                for nr2, nc2, direction in grid.get_neighbors(nr, nc):
                    if not grid.is_added(nr2, nc2):
                        frontier.append(WallPiece(nr, nc, direction))

            yield f"Frontier: {len(frontier)}"

        logger.debug(
            f"Prim's done: {self.admitted_count} cells admitted, "
            f"{self.step_count} draws, {self.stale_count} stale"
        )
        yield self.DONE
