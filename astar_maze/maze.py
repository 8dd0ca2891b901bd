import logging
import math
import numbers
from collections import deque

from .builders import SpanningTreeBuilder
from .errors import BuilderContractError, ConfigurationError
from .search import AStarSearch

logger = logging.getLogger(__name__)


def _force_odd(value):
    return value - 1 if value % 2 == 0 else value


def _check_positive(name, value):
    if (isinstance(value, bool) or not isinstance(value, numbers.Real)
            or not value > 0 or not math.isfinite(value)):
        raise ConfigurationError(f"{name} must be a positive number, got {value!r}")


class Maze:
    """Grid maze with the state of a stepwise A* search from start to end.

    The grid comes from ``builder`` (a randomized Prim spanning tree by
    default) and is laid out as ``rows`` x ``cols`` cells, both forced odd.
    Cells are stored twice: row by row in ``grid`` and flat in ``cells``,
    where each cell's ``index`` is its slot. Neighbors and predecessors are
    kept as those indices.

    ``start`` is the cell at (1, 0) and ``end`` the cell at
    (rows - 2, cols - 1); both are opened whatever the builder produced.
    """

    def __init__(self, canvas_width, canvas_height, cell_width, cell_height=None, builder=None):
        if cell_height is None:
            cell_height = cell_width
        _check_positive('canvas_width', canvas_width)
        _check_positive('canvas_height', canvas_height)
        _check_positive('cell_width', cell_width)
        _check_positive('cell_height', cell_height)

        self.size = {
            'width': canvas_width,
            'height': canvas_height,
            'w': cell_width,
            'h': cell_height,
        }
        self.rows = _force_odd(math.floor(canvas_width / cell_width))
        self.cols = _force_odd(math.floor(canvas_height / cell_height))
        if self.rows < 3 or self.cols < 3:
            raise ConfigurationError(
                f"a {canvas_width}x{canvas_height} canvas with {cell_width}x{cell_height} cells "
                f"gives a {self.rows}x{self.cols} grid, at least 3x3 is needed")

        self.builder = builder if builder is not None else SpanningTreeBuilder()
        self.grid = self.builder.build(self.rows, self.cols)
        self._check_grid()

        self.cells = [cell for row in self.grid for cell in row]
        for index, cell in enumerate(self.cells):
            cell.index = index
            cell.add_neighbors(self.rows, self.cols)

        self.start = self.grid[1][0]
        self.end = self.grid[self.rows - 2][self.cols - 1]
        self.start.wall = False
        self.end.wall = False

        if self.builder.guarantees_path and not self.is_reachable():
            raise BuilderContractError(
                f"{type(self.builder).__name__} left {self.start.position} and "
                f"{self.end.position} disconnected")

        logger.debug("built %dx%d maze with %s", self.rows, self.cols, type(self.builder).__name__)
        self.reset_search()

    def _check_grid(self):
        name = type(self.builder).__name__
        if len(self.grid) != self.rows:
            raise BuilderContractError(
                f"{name} returned {len(self.grid)} rows, expected {self.rows}")
        for i, row in enumerate(self.grid):
            if len(row) != self.cols:
                raise BuilderContractError(
                    f"{name} returned {len(row)} columns in row {i}, expected {self.cols}")
            for j, cell in enumerate(row):
                if (cell.i, cell.j) != (i, j):
                    raise BuilderContractError(
                        f"{name} put cell {(cell.i, cell.j)} at position {(i, j)}")

    def reset_search(self):
        for cell in self.cells:
            cell.reset()
        self.current = None
        self.open_set = [self.start]
        self.closed_set = []
        self.path = []
        self.start.g = 0.0
        self.start.h = self.heuristics(self.start, self.end)
        self.start.f = self.start.g + self.start.h

    def a_star(self, on_complete=None):
        return AStarSearch(self, on_complete=on_complete)

    def cell(self, index):
        return self.cells[index]

    def previous_of(self, cell):
        if cell.previous is None:
            return None
        return self.cells[cell.previous]

    def heuristics(self, a, b):
        """Euclidean distance between two cells, used as move cost and goal estimate."""
        return math.hypot(a.i - b.i, a.j - b.j)

    def update_path(self):
        """Rebuild ``path`` by walking predecessors back from ``current``.

        The result runs from ``current`` to the root of its trace (``start``
        once the search has left it).
        """
        self.path = []
        temp = self.current
        while temp is not None:
            self.path.append(temp)
            temp = self.previous_of(temp)

    def path_lines(self):
        return [f"{step}º ({cell.i}, {cell.j})"
                for step, cell in enumerate(reversed(self.path), start=1)]

    def print_path(self):
        for line in self.path_lines():
            print(line)

    def is_reachable(self, source=None, target=None):
        source = self.start if source is None else source
        target = self.end if target is None else target
        if source.wall or target.wall:
            return False
        queue = deque([source.index])
        visited = {source.index}
        while queue:
            index = queue.popleft()
            if index == target.index:
                return True
            for neighbor in self.cells[index].neighbors:
                if neighbor not in visited and not self.cells[neighbor].wall:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return False
