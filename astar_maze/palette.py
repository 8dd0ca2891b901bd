from enum import IntEnum

import numpy as np


class CellState(IntEnum):
    DEFAULT = 0
    WALL = 1
    FRONTIER = 2
    VISITED = 3
    PATH = 4
    START = 5
    END = 6


COLORS = {
    'white': (240, 240, 240),
    'black': (0, 0, 0),
    'blue': (0, 255, 255),
    'yellow': (255, 255, 0),
    'green_and_yellow': (200, 255, 0),
    'grey': (161, 161, 161),
    'red': (255, 0, 0),
}

STATE_COLORS = {
    CellState.DEFAULT: 'white',
    CellState.WALL: 'black',
    CellState.FRONTIER: 'green_and_yellow',
    CellState.VISITED: 'grey',
    CellState.PATH: 'blue',
    CellState.START: 'yellow',
    CellState.END: 'red',
}

RGB_TABLE = np.array([COLORS[STATE_COLORS[state]] for state in CellState], dtype=float) / 255


def snapshot(maze):
    """Classify every cell of the maze into a ``rows x cols`` array of CellState values.

    Later assignments win, so the order below is the display priority:
    start and end over the path, the path over the frontier, the frontier
    over visited cells, and those over walls.
    """
    states = np.full(maze.rows * maze.cols, CellState.DEFAULT, dtype=np.int8)
    states[[cell.index for cell in maze.cells if cell.wall]] = CellState.WALL
    states[[cell.index for cell in maze.closed_set]] = CellState.VISITED
    states[[cell.index for cell in maze.open_set]] = CellState.FRONTIER
    states[[cell.index for cell in maze.path]] = CellState.PATH
    states[maze.start.index] = CellState.START
    states[maze.end.index] = CellState.END
    return states.reshape(maze.rows, maze.cols)


def to_rgb(states):
    return RGB_TABLE[np.asarray(states)]
