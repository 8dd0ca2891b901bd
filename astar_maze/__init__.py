from .builders import GridBuilder, RandomWallsBuilder, SpanningTreeBuilder, TemplateBuilder, make_builder
from .cell import Cell
from .errors import BuilderContractError, ConfigurationError
from .maze import Maze
from .palette import COLORS, CellState, snapshot
from .search import AStarSearch, StepResult

__version__ = '0.1.0'
