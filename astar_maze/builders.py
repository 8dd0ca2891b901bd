import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np

from . import config
from .cell import Cell
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

Grid = List[List[Cell]]

DIRECTIONS = [('N', -1, 0), ('E', 0, 1), ('S', 1, 0), ('W', 0, -1)]


class GridBuilder(ABC):
    guarantees_path = False

    @abstractmethod
    def build(self, rows: int, cols: int) -> Grid:
        pass


class RandomWallsBuilder(GridBuilder):
    def __init__(self, wall_probability: float = config.WALL_PROBABILITY, seed: Optional[int] = None):
        if not 0.0 <= wall_probability <= 1.0:
            raise ConfigurationError(
                f"wall_probability must be between 0 and 1, got {wall_probability}")
        self.wall_probability = wall_probability
        self.seed = seed

    def build(self, rows: int, cols: int) -> Grid:
        rng = np.random.default_rng(self.seed)
        walls = rng.random((rows, cols)) < self.wall_probability
        logger.debug("random walls: %d of %d cells blocked", int(walls.sum()), rows * cols)
        return [[Cell(i, j, bool(walls[i, j])) for j in range(cols)] for i in range(rows)]


class SpanningTreeBuilder(GridBuilder):
    """Randomized Prim's algorithm on an odd lattice.

    Rooms sit at odd (row, col) positions and every other cell starts as a
    wall. Each accepted frontier edge opens the wall between a carved room
    and a room two cells away, so the rooms end up joined by a spanning tree
    (a perfect maze). The start and end cells the maze opens on the border
    are each next to a room, hence always connected.
    """

    guarantees_path = True

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed

    def build(self, rows: int, cols: int) -> Grid:
        rng = random.Random(self.seed)
        grid = [[Cell(i, j, True) for j in range(cols)] for i in range(rows)]
        frontier = []

        def add_frontier_edges(i, j):
            for _, di, dj in DIRECTIONS:
                ni, nj = i + 2 * di, j + 2 * dj
                if 0 < ni < rows - 1 and 0 < nj < cols - 1 and grid[ni][nj].wall:
                    frontier.append((i + di, j + dj, ni, nj))

        start_i = rng.randrange(1, rows - 1, 2)
        start_j = rng.randrange(1, cols - 1, 2)
        grid[start_i][start_j].wall = False
        add_frontier_edges(start_i, start_j)

        carved = 1
        while frontier:
            wi, wj, ni, nj = frontier.pop(rng.randrange(len(frontier)))
            if not grid[ni][nj].wall:
                continue
            grid[wi][wj].wall = False
            grid[ni][nj].wall = False
            carved += 1
            add_frontier_edges(ni, nj)

        logger.debug("prim: carved %d rooms from (%d, %d)", carved, start_i, start_j)
        return grid


class TemplateBuilder(GridBuilder):
    def __init__(self, lines: Sequence[str], wall_char: str = '#'):
        if not lines or not lines[0]:
            raise ConfigurationError("template must have at least one non-empty row")
        width = len(lines[0])
        for row, line in enumerate(lines):
            if len(line) != width:
                raise ConfigurationError(
                    f"template row {row} has {len(line)} columns, expected {width}")
        self.lines = list(lines)
        self.wall_char = wall_char

    def build(self, rows: int, cols: int) -> Grid:
        return [[Cell(i, j, char == self.wall_char) for j, char in enumerate(line)]
                for i, line in enumerate(self.lines)]


BUILDERS = {
    'prim': SpanningTreeBuilder,
    'random': RandomWallsBuilder,
}


def make_builder(name: str, **options) -> GridBuilder:
    try:
        builder_cls = BUILDERS[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown builder {name!r}, choose one of: {', '.join(sorted(BUILDERS))}") from None
    return builder_cls(**options)
