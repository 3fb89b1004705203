"""Turn a diagram, the display mode and the sites into draw commands."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

import numpy as np
import structlog

from .voronoi_diagram import Diagram, DiagramAdapter

logger = structlog.get_logger()

Color = Tuple[float, float, float, float]
Points = Tuple[Tuple[float, float], ...]

BACKGROUND_COLOR: Color = (1.0, 1.0, 1.0, 1.0)
OUTLINE_COLOR: Color = (0.0, 0.0, 1.0, 1.0)
OUTLINE_WIDTH = 2.0
MARKER_COLOR: Color = (0.0, 0.0, 0.0, 1.0)
MARKER_RADIUS = 4.0


class DisplayMode(Enum):
    OUTLINE = "outline"
    FILLED = "filled"

    def toggled(self) -> "DisplayMode":
        return DisplayMode.FILLED if self is DisplayMode.OUTLINE else DisplayMode.OUTLINE


@dataclass(frozen=True)
class Clear:
    color: Color


@dataclass(frozen=True)
class Polyline:
    color: Color
    width: float
    points: Points


@dataclass(frozen=True)
class FilledPolygon:
    color: Color
    points: Points


@dataclass(frozen=True)
class FilledEllipse:
    """Ellipse inscribed in the box (x, y, width, height)."""
    color: Color
    box: Tuple[float, float, float, float]


DrawCommand = Union[Clear, Polyline, FilledPolygon, FilledEllipse]


def fallback_color(index: int) -> Color:
    """Deterministic opaque color for a cell whose site has no color."""
    rng = np.random.default_rng(index)
    r, g, b = (float(c) for c in rng.random(3))
    return (r, g, b, 1.0)


def _as_color(values) -> Color:
    r, g, b, a = (float(c) for c in values)
    return (r, g, b, a)


def _as_points(coords: np.ndarray) -> Points:
    return tuple((float(x), float(y)) for x, y in coords)


def circle_box(x: float, y: float, radius: float) -> Tuple[float, float, float, float]:
    return (x - radius, y - radius, 2.0 * radius, 2.0 * radius)


def render_frame(diagram: Diagram, sites, colors, mode: DisplayMode) -> List[DrawCommand]:
    """
    Draw commands for one frame, in paint order.

    Outline polylines deliberately leave out the closing edge from the last
    vertex back to the first.

    Args:
        diagram: Cells to draw
        sites: (N, 2) site coordinates, drawn as markers on top
        colors: (M, 4) RGBA colors indexed by site index; may be shorter
            than the number of cells
        mode: Outline-only or filled

    Returns:
        List of draw commands
    """
    colors = np.asarray(colors, dtype=float).reshape(-1, 4)
    commands: List[DrawCommand] = [Clear(BACKGROUND_COLOR)]

    for site_index, coords in diagram.polygons():
        if len(coords) < 3:
            continue
        points = _as_points(coords)
        if mode is DisplayMode.OUTLINE:
            commands.append(Polyline(OUTLINE_COLOR, OUTLINE_WIDTH, points))
            continue
        if site_index < len(colors):
            color = _as_color(colors[site_index])
        else:
            logger.debug("No color for cell, using fallback",
                         site_index=site_index, colors=len(colors))
            color = fallback_color(site_index)
        commands.append(FilledPolygon(color, points))

    for x, y in np.asarray(sites, dtype=float).reshape(-1, 2):
        commands.append(FilledEllipse(MARKER_COLOR, circle_box(float(x), float(y), MARKER_RADIUS)))

    return commands


def frame_for(store, mode: DisplayMode, adapter: DiagramAdapter) -> List[DrawCommand]:
    """Rebuild the diagram from a snapshot of ``store`` and render it."""
    sites, colors = store.snapshot()
    diagram = adapter.build(sites)
    return render_frame(diagram, sites, colors, mode)
