import math


class Cell:
    def __init__(self, i, j, wall=False):
        self.i = i
        self.j = j
        self.wall = wall
        self.index = None
        self.neighbors = []
        self.g = math.inf
        self.h = 0.0
        self.f = math.inf
        self.previous = None

    @property
    def position(self):
        return (self.i, self.j)

    def reset(self):
        self.g = math.inf
        self.h = 0.0
        self.f = math.inf
        self.previous = None

    def add_neighbors(self, rows, cols):
        """Store the arena indices of the orthogonal cells inside a rows x cols grid.

        Only valid once every cell of the grid exists, since the indices are
        resolved against the full grid.
        """
        i, j = self.i, self.j
        self.neighbors = []
        if i < rows - 1:
            self.neighbors.append((i + 1) * cols + j)
        if i > 0:
            self.neighbors.append((i - 1) * cols + j)
        if j < cols - 1:
            self.neighbors.append(i * cols + j + 1)
        if j > 0:
            self.neighbors.append(i * cols + j - 1)

    def __repr__(self):
        kind = 'wall' if self.wall else 'open'
        return f"Cell({self.i}, {self.j}, {kind})"
