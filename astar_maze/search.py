import logging
from enum import Enum

logger = logging.getLogger(__name__)


class StepResult(Enum):
    CONTINUE = 'continue'
    FOUND = 'found'
    EXHAUSTED = 'exhausted'

    @property
    def terminal(self):
        return self is not StepResult.CONTINUE


class AStarSearch:
    """A* over a maze, advanced one frontier expansion per ``step()`` call.

    The frontier, closed set, current cell and path live on the maze so a
    renderer can read them between steps; this object only tracks membership
    and where the run stands. Once a step returns FOUND or EXHAUSTED the path
    is finalised, ``on_complete`` is called with that result, and every later
    ``step()`` returns the same result without doing any work.
    """

    def __init__(self, maze, on_complete=None):
        self.maze = maze
        self.on_complete = on_complete
        self.status = StepResult.CONTINUE
        self.steps = 0
        self.expansions = 0
        self._sync()

    def _sync(self):
        # reset_search() swaps in new containers; membership follows them
        self._frontier = self.maze.open_set
        self._open = {cell.index for cell in self.maze.open_set}
        self._closed = {cell.index for cell in self.maze.closed_set}

    @property
    def finished(self):
        return self.status.terminal

    def __iter__(self):
        while not self.finished:
            yield self.step()

    def run(self, max_steps=None):
        taken = 0
        while not self.finished and (max_steps is None or taken < max_steps):
            self.step()
            taken += 1
        return self.status

    def step(self):
        if self.finished:
            return self.status
        if self.maze.open_set is not self._frontier:
            self._sync()
        self.steps += 1
        maze = self.maze
        open_set = maze.open_set

        if not open_set:
            return self._finish(StepResult.EXHAUSTED)

        best = 0
        for index in range(len(open_set)):
            if open_set[index].f < open_set[best].f:
                best = index
        current = maze.current = open_set[best]

        if current is maze.end:
            return self._finish(StepResult.FOUND)

        open_set.pop(best)
        self._open.discard(current.index)
        maze.closed_set.append(current)
        self._closed.add(current.index)
        self.expansions += 1

        for index in current.neighbors:
            neighbor = maze.cell(index)
            if index in self._closed or neighbor.wall:
                continue
            temp_g = current.g + maze.heuristics(neighbor, current)

            if index in self._open:
                if temp_g >= neighbor.g:
                    continue
            else:
                open_set.append(neighbor)
                self._open.add(index)

            neighbor.g = temp_g
            neighbor.h = maze.heuristics(neighbor, maze.end)
            neighbor.f = neighbor.g + neighbor.h
            neighbor.previous = current.index

        maze.update_path()
        return self.status

    def _finish(self, result):
        self.status = result
        self.maze.update_path()
        if result is StepResult.FOUND:
            logger.info("path found after %d expansions, %d cells long",
                        self.expansions, len(self.maze.path))
        else:
            logger.info("no path to the end after %d expansions", self.expansions)
        if self.on_complete is not None:
            self.on_complete(result)
        return result
