import pytest

from astar_maze import (ConfigurationError, Maze, RandomWallsBuilder, SpanningTreeBuilder,
                        TemplateBuilder, make_builder)


def _walls(grid):
    return [[cell.wall for cell in row] for row in grid]


def test_random_walls_shape_and_positions():
    grid = RandomWallsBuilder(0.5, seed=1).build(5, 7)
    assert len(grid) == 5
    assert all(len(row) == 7 for row in grid)
    assert all(cell.position == (i, j) for i, row in enumerate(grid) for j, cell in enumerate(row))


def test_random_walls_extremes():
    assert not any(any(row) for row in _walls(RandomWallsBuilder(0.0).build(5, 5)))
    assert all(all(row) for row in _walls(RandomWallsBuilder(1.0).build(5, 5)))


def test_random_walls_are_reproducible_with_a_seed():
    first = _walls(RandomWallsBuilder(0.4, seed=11).build(9, 9))
    second = _walls(RandomWallsBuilder(0.4, seed=11).build(9, 9))
    assert first == second


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_random_walls_reject_bad_probability(probability):
    with pytest.raises(ConfigurationError):
        RandomWallsBuilder(probability)


def test_spanning_tree_is_a_perfect_maze():
    maze = Maze(21, 15, 1, builder=SpanningTreeBuilder(seed=5))
    rooms = ((maze.rows - 1) // 2) * ((maze.cols - 1) // 2)

    for i in range(1, maze.rows, 2):
        for j in range(1, maze.cols, 2):
            assert not maze.grid[i][j].wall
    for i in range(0, maze.rows, 2):
        for j in range(0, maze.cols, 2):
            assert maze.grid[i][j].wall

    open_cells = sum(1 for cell in maze.cells if not cell.wall)
    # rooms joined by rooms - 1 passages, plus the opened start and end
    assert open_cells == 2 * rooms - 1 + 2


def test_spanning_tree_is_reproducible_with_a_seed():
    first = _walls(SpanningTreeBuilder(seed=3).build(11, 11))
    second = _walls(SpanningTreeBuilder(seed=3).build(11, 11))
    assert first == second


def test_spanning_tree_border_stays_closed():
    grid = SpanningTreeBuilder(seed=0).build(9, 13)
    assert all(cell.wall for cell in grid[0])
    assert all(cell.wall for cell in grid[-1])
    assert all(row[0].wall and row[-1].wall for row in grid)


def test_template_builder_reads_walls():
    grid = TemplateBuilder(["#.#", "...", "..#"]).build(3, 3)
    assert _walls(grid) == [[True, False, True], [False, False, False], [False, False, True]]


def test_template_builder_custom_wall_char():
    grid = TemplateBuilder(["x..", "...", "..x"], wall_char='x').build(3, 3)
    assert grid[0][0].wall and grid[2][2].wall
    assert not grid[1][1].wall


@pytest.mark.parametrize("lines", [[], [""], ["...", ".."]])
def test_template_builder_rejects_bad_layouts(lines):
    with pytest.raises(ConfigurationError):
        TemplateBuilder(lines)


def test_make_builder():
    assert isinstance(make_builder('prim', seed=1), SpanningTreeBuilder)
    builder = make_builder('random', wall_probability=0.2)
    assert isinstance(builder, RandomWallsBuilder)
    assert builder.wall_probability == 0.2
    with pytest.raises(ConfigurationError, match="unknown builder"):
        make_builder('kruskal')


def test_maze_defaults_to_spanning_tree():
    maze = Maze(11, 11, 1)
    assert isinstance(maze.builder, SpanningTreeBuilder)
    assert maze.is_reachable()
