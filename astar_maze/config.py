CANVAS_WIDTH = 420
CANVAS_HEIGHT = 420
CELL_SIZE = 20

WALL_PROBABILITY = 0.3
DEFAULT_BUILDER = 'prim'

FIG_WIDTH = 9
FIG_HEIGHT = 9
DPI = 100
TARGET_FPS = 30
HOLD_FRAMES = 30

BG_COLOR = '#0A0A15'
OUTPUT_FILE = 'astar_maze.mp4'
