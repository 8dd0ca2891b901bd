import argparse
import logging
import sys

from tqdm import tqdm

from . import config
from .builders import BUILDERS, make_builder
from .errors import ConfigurationError
from .maze import Maze
from .search import StepResult

BANNER = "≈" * 64


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='astar-maze',
        description="Generate a maze and solve it with a stepwise A* search.")
    parser.add_argument("--width", type=float, default=config.CANVAS_WIDTH, help="Canvas width")
    parser.add_argument("--height", type=float, default=config.CANVAS_HEIGHT, help="Canvas height")
    parser.add_argument("--cell", type=float, default=config.CELL_SIZE, help="Cell size")
    parser.add_argument("--builder", choices=sorted(BUILDERS), default=config.DEFAULT_BUILDER)
    parser.add_argument("--wall-probability", type=float, default=config.WALL_PROBABILITY,
                        help="Chance that a cell is a wall (random builder only)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-steps", type=int, default=None,
                        help="Stop stepping after this many steps")
    parser.add_argument("--print-path", action="store_true", help="Print the path found")
    parser.add_argument("--output", default=None,
                        help="Write an animation of the search (.mp4 or .gif)")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def build_maze(args):
    options = {'seed': args.seed}
    if args.builder == 'random':
        options['wall_probability'] = args.wall_probability
    return Maze(args.width, args.height, args.cell, builder=make_builder(args.builder, **options))


def run_search(maze, max_steps=None):
    search = maze.a_star()
    total = max_steps if max_steps is not None else maze.rows * maze.cols
    with tqdm(total=total, desc="Searching", unit="step", ncols=100) as pbar:
        while not search.finished and (max_steps is None or search.steps < max_steps):
            search.step()
            pbar.update(1)
    return search


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        maze = build_maze(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(BANNER)
    print(f"🧩 A* MAZE SEARCH - {maze.rows}x{maze.cols} GRID ({args.builder} builder)")
    print(BANNER)

    if args.output:
        from .render import capture_frames, create_animation, save_animation

        print("🔍 Solving maze and capturing frames...")
        search = maze.a_star()
        frames = capture_frames(maze, search, max_steps=args.max_steps)
        print(f"🎨 Building animation from {len(frames)} frames...")
        ani, fig = create_animation(frames)
        print(f"💾 Saving animation to {args.output}...")
        save_animation(ani, fig, args.output, len(frames) + config.HOLD_FRAMES)
    else:
        print("🔍 Solving maze...")
        search = run_search(maze, max_steps=args.max_steps)

    if search.status is StepResult.FOUND:
        print(f"✅ Done, there is a way! {len(maze.path)} cells, {search.expansions} expansions")
        if args.print_path:
            maze.print_path()
        return 0
    if search.status is StepResult.EXHAUSTED:
        print(f"✗ There is no way to the end ({search.expansions} expansions)")
        return 1
    print(f"⏸ Stopped after {search.steps} steps without reaching the end")
    return 1
