import pytest

from astar_maze import Maze, RandomWallsBuilder, TemplateBuilder


@pytest.fixture
def template_maze():
    def make(lines):
        return Maze(len(lines), len(lines[0]), 1, builder=TemplateBuilder(lines))
    return make


@pytest.fixture
def open_maze():
    def make(width, height):
        return Maze(width, height, 1, builder=RandomWallsBuilder(wall_probability=0.0))
    return make
