"""Replay draw commands onto a matplotlib axes."""

from typing import Iterable, List

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Ellipse, Polygon

from ..core.render import Clear, DrawCommand, FilledEllipse, FilledPolygon, Polyline


class MatplotlibCanvas:
    """Immediate-mode drawing on an axes laid out in screen coordinates.

    The axes spans the whole figure, x grows right and y grows down, so data
    coordinates equal canvas pixels.
    """

    def __init__(self, ax: plt.Axes, width: float, height: float) -> None:
        self.ax = ax
        self.width = width
        self.height = height
        self.artists: List = []
        ax.set_position([0.0, 0.0, 1.0, 1.0])
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_aspect("equal", adjustable="box")
        ax.set_axis_off()
        ax.set_autoscale_on(False)

    def clear(self, color) -> None:
        for artist in self.artists:
            artist.remove()
        self.artists = []
        self.ax.figure.set_facecolor(color)
        self.ax.set_facecolor(color)

    def draw_polyline(self, color, width: float, points) -> None:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        line = Line2D(xs, ys, color=color, linewidth=width, zorder=2)
        self.ax.add_line(line)
        self.artists.append(line)

    def draw_filled_polygon(self, color, points) -> None:
        patch = Polygon(points, closed=True, facecolor=color, edgecolor="none", zorder=1)
        self.ax.add_patch(patch)
        self.artists.append(patch)

    def draw_filled_ellipse(self, color, box) -> None:
        x, y, w, h = box
        patch = Ellipse((x + w / 2.0, y + h / 2.0), w, h, facecolor=color, edgecolor="none", zorder=3)
        self.ax.add_patch(patch)
        self.artists.append(patch)

    def draw_commands(self, commands: Iterable[DrawCommand]) -> None:
        for cmd in commands:
            if isinstance(cmd, Clear):
                self.clear(cmd.color)
            elif isinstance(cmd, Polyline):
                self.draw_polyline(cmd.color, cmd.width, cmd.points)
            elif isinstance(cmd, FilledPolygon):
                self.draw_filled_polygon(cmd.color, cmd.points)
            elif isinstance(cmd, FilledEllipse):
                self.draw_filled_ellipse(cmd.color, cmd.box)
            else:
                raise TypeError(f"Unknown draw command: {cmd!r}")
