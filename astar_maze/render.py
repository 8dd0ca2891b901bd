import shutil

import matplotlib.animation as animation
import matplotlib.patches as patches
import matplotlib.pyplot as plt
from tqdm import tqdm

from . import config
from .palette import CellState, snapshot, to_rgb
from .search import StepResult


def capture_state(maze, search):
    return {
        'states': snapshot(maze),
        'current': maze.current.position if maze.current is not None else None,
        'path': [cell.position for cell in reversed(maze.path)],
        'step': search.steps,
        'status': search.status,
    }


def capture_frames(maze, search, max_steps=None):
    frames = [capture_state(maze, search)]
    while not search.finished and (max_steps is None or search.steps < max_steps):
        search.step()
        frames.append(capture_state(maze, search))
    return frames


def draw_state(axes, states):
    rows, cols = states.shape
    colors = to_rgb(states)
    axes.set_xlim(0, cols)
    axes.set_ylim(0, rows)
    axes.set_aspect('equal')
    axes.axis('off')
    for i in range(rows):
        for j in range(cols):
            # row 0 is drawn at the top
            axes.add_patch(patches.Rectangle(
                (j, rows - 1 - i), 1, 1,
                fill=True, facecolor=colors[i, j], edgecolor='none',
                zorder=2 if states[i, j] != CellState.DEFAULT else 1,
            ))


def title_for(frame):
    status = frame['status']
    if status is StepResult.FOUND:
        return f"Path found: {len(frame['path'])} cells"
    if status is StepResult.EXHAUSTED:
        return "No way to the end"
    return f"Exploring maze: step {frame['step']}"


def create_animation(frames):
    fig, axes = plt.subplots(figsize=(config.FIG_WIDTH, config.FIG_HEIGHT), dpi=config.DPI)
    fig.patch.set_facecolor(config.BG_COLOR)
    padded = frames + [frames[-1]] * config.HOLD_FRAMES

    def update(i):
        frame = padded[i]
        axes.clear()
        draw_state(axes, frame['states'])
        axes.set_title(title_for(frame), color='white', fontsize=16, weight='bold')

    ani = animation.FuncAnimation(
        fig,
        update,
        frames=len(padded),
        blit=False,
        interval=1000 / config.TARGET_FPS,
        repeat=False
    )
    return ani, fig


class TqdmProgressCallback:
    def __init__(self, total):
        self.pbar = tqdm(total=total, desc="Saving Video", unit="frame", ncols=100)

    def __call__(self, current_frame, total_frames):
        self.pbar.update(1)

    def close(self):
        self.pbar.close()


def save_animation(ani, fig, output_file, total_frames):
    if output_file.endswith('.gif'):
        writer = animation.PillowWriter(fps=config.TARGET_FPS)
    else:
        ffmpeg_path = shutil.which('ffmpeg')
        if ffmpeg_path:
            plt.rcParams['animation.ffmpeg_path'] = ffmpeg_path
        writer = animation.FFMpegWriter(
            fps=config.TARGET_FPS,
            metadata=dict(artist='A* Maze Search'),
            bitrate=3000
        )

    progress_bar = TqdmProgressCallback(total_frames)
    try:
        ani.save(output_file, writer=writer, progress_callback=progress_bar)
    finally:
        progress_bar.close()
        plt.close(fig)
