import logging
import os
import random
from typing import Optional, TextIO

from prim_maze.core.grid import Grid
from prim_maze.algo.prim import PrimsAlgorithm
from prim_maze.viz.ascii_renderer import AsciiRenderer

logger = logging.getLogger(__name__)


class Maze:
    """
    A perfect maze built with randomized Prim's as soon as it is constructed.

    With debug=True every frontier draw is followed by a frame on 'stream'
    showing the admitted cells. Rendering never touches the random source,
    so a debug run and a quiet run with the same seed carve the same maze.
    """
    def __init__(self, width: int, depth: int, debug: bool = False, seed: int = None,
                 rng: Optional[random.Random] = None, stream: TextIO = None, event_writer=None):
        self.debug = debug
        self.stream = stream
        self.grid = Grid(width, depth, event_writer=event_writer)
        self.generator = PrimsAlgorithm(self.grid, seed=seed, rng=rng, event_writer=event_writer)
        self._build()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def depth(self) -> int:
        return self.grid.depth

    def _build(self):
        frame = AsciiRenderer(self.grid, show_added=True) if self.debug else None
        for status in self.generator.run():
            if frame is not None and status != PrimsAlgorithm.DONE:
                frame.display(self.stream)
        logger.debug(f"Built {self.width}x{self.depth} maze in {self.generator.step_count} draws")

    def render(self, newline: str = os.linesep) -> str:
        return AsciiRenderer(self.grid, show_added=self.debug).render(newline=newline)

    def display(self, stream: TextIO = None):
        AsciiRenderer(self.grid, show_added=self.debug).display(stream or self.stream)

    def __str__(self):
        return self.render(newline="\n")


def create_maze(width: int, depth: int, debug: bool = False, seed: int = None,
                rng: Optional[random.Random] = None, stream: TextIO = None) -> Maze:
    return Maze(width, depth, debug=debug, seed=seed, rng=rng, stream=stream)
