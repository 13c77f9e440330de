import logging
from dataclasses import dataclass

import matplotlib.pyplot as plt
import matplotlib.animation as animation

from hull_scan.orientation import orientation
from hull_scan.scan_trace import graham_scan_trace

logger = logging.getLogger(__name__)


@dataclass
class AnimationConfig:
    interval: int = 700  # milliseconds between frames
    figsize: tuple = (8, 8)
    blit: bool = True
    repeat: bool = False


def _xs(points):
    return [float(p[0]) for p in points]


def _ys(points):
    return [float(p[1]) for p in points]


class ScanPlot:
    """Artists for one Graham scan animation, drawn on `ax`."""

    def __init__(self, ax, all_points, closed=False):
        self.ax = ax
        self.all_points = list(all_points)
        self.closed = closed

        # Scatter plot for all points (static once drawn)
        self.scatter_all_points = ax.scatter([], [], c='blue', s=50, label="All Points")
        # Line plot for the stack as it stands
        self.hull_line_plot, = ax.plot([], [], 'r-', lw=2, label="Hull Chain")
        # Line from the top of the stack to the point being considered
        self.probe_line_plot, = ax.plot([], [], 'g--', lw=1.5, label="Top-to-Current")
        self.current_marker, = ax.plot([], [], 'o', ms=12, mec='orange', mfc='None', mew=2,
                                       label="Current Point")
        self.popped_marker, = ax.plot([], [], 'x', ms=10, color='gray', mew=2, label="Popped Point")
        self.status_text = ax.text(0.02, 0.98, "", transform=ax.transAxes, ha="left", va="top",
                                   fontsize=9, bbox=dict(boxstyle="round,pad=0.3", fc="wheat", alpha=0.7))

    @property
    def artists(self):
        return (self.scatter_all_points, self.hull_line_plot, self.probe_line_plot,
                self.current_marker, self.popped_marker, self.status_text)

    def init(self):
        if self.all_points:
            xs, ys = _xs(self.all_points), _ys(self.all_points)
            self.ax.set_xlim(min(xs) - 1, max(xs) + 1)
            self.ax.set_ylim(min(ys) - 1, max(ys) + 1)
            self.scatter_all_points.set_offsets(list(zip(xs, ys)))
        self.ax.set_aspect('equal', adjustable='box')
        self.ax.legend(fontsize='small', loc='lower right')
        self.ax.set_title(f"{'Closed' if self.closed else 'Open'} Graham Scan Visualization")

        self.hull_line_plot.set_data([], [])
        self.probe_line_plot.set_data([], [])
        self.current_marker.set_data([], [])
        self.popped_marker.set_data([], [])
        self.status_text.set_text("Initializing...")
        return self.artists

    def update(self, frame):
        hull_pts = frame['hull_points']
        current = frame['current_point']
        popped = frame['popped_point']
        final_hull_path = frame['final_hull_path']

        if final_hull_path is not None:
            self.hull_line_plot.set_data(_xs(final_hull_path), _ys(final_hull_path))
            self.hull_line_plot.set_color('purple')
            self.hull_line_plot.set_linewidth(3)
        else:
            self.hull_line_plot.set_data(_xs(hull_pts), _ys(hull_pts))
            self.hull_line_plot.set_color('red')
            self.hull_line_plot.set_linewidth(2)

        if current is not None:
            self.current_marker.set_data([float(current[0])], [float(current[1])])
        else:
            self.current_marker.set_data([], [])

        if current is not None and hull_pts:
            top = hull_pts[-1]
            self.probe_line_plot.set_data(_xs([top, current]), _ys([top, current]))
        else:
            self.probe_line_plot.set_data([], [])

        if popped is not None:
            self.popped_marker.set_data([float(popped[0])], [float(popped[1])])
        else:
            self.popped_marker.set_data([], [])

        self.status_text.set_text(frame['status'])
        return self.artists


def animate_scan(points, closed=False, predicate=orientation, config=None):
    """
    Builds the animation of a Graham scan over `points`.
    Returns (fig, anim); keep a reference to `anim` until the figure is closed.
    """
    config = config or AnimationConfig()
    points = list(points)
    trace_steps = list(graham_scan_trace(points, predicate, closed=closed))
    logger.debug("animating %d frames", len(trace_steps))

    fig, ax = plt.subplots(figsize=config.figsize)
    scan_plot = ScanPlot(ax, points, closed=closed)
    anim = animation.FuncAnimation(fig,
                                   scan_plot.update,
                                   frames=trace_steps,
                                   init_func=scan_plot.init,
                                   blit=config.blit,
                                   interval=config.interval,
                                   repeat=config.repeat)
    fig.tight_layout()
    return fig, anim
