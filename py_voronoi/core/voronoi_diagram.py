"""Voronoi diagram construction for the interactive canvas.

Wraps ``scipy.spatial.Voronoi`` and normalises its output into a vertex pool
plus one cell per site, each cell tagged with the index of the site that
seeded it.
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np
import structlog
from scipy.spatial import QhullError, Voronoi

from .errors import DegenerateGeometryError

logger = structlog.get_logger()


@dataclass(frozen=True)
class Cell:
    """One site's region: vertex ids into ``Diagram.vertices``, counter-clockwise."""
    site_index: int
    vertices: Tuple[int, ...]


@dataclass(frozen=True)
class Diagram:
    """Derived geometry for one frame. Never mutated after construction."""
    vertices: np.ndarray = field(default_factory=lambda: np.zeros((0, 2), dtype=float))
    cells: List[Cell] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def polygons(self) -> List[Tuple[int, np.ndarray]]:
        """Resolve every cell to ``(site_index, (K, 2) coordinates)``."""
        return [
            (cell.site_index, self.vertices[list(cell.vertices)])
            for cell in self.cells
        ]


def get_sentinel_points(center: Tuple[float, float], half_size: float) -> np.ndarray:
    """
    Ring of far-away points around the canvas.

    Appended to the real sites so that every real site sits strictly inside
    the convex hull of the input, which makes its Voronoi region finite. The
    regions end up clipped roughly to a square of ``half_size`` around
    ``center``.

    Args:
        center: Canvas center
        half_size: Half the side of the bounding square

    Returns:
        Array of 8 [x, y] coordinates (corners and edge midpoints)
    """
    cx, cy = center
    points = []
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            points.append([cx + dx * half_size, cy + dy * half_size])
    return np.array(points, dtype=float)


def order_region(vertex_ids: Sequence[int], vertices: np.ndarray) -> Tuple[int, ...]:
    """Sort a convex region's vertex ids counter-clockwise around its mean."""
    ids = np.asarray(vertex_ids, dtype=int)
    coords = vertices[ids]
    center = coords.mean(axis=0)
    angles = np.arctan2(coords[:, 1] - center[1], coords[:, 0] - center[0])
    return tuple(int(v) for v in ids[np.argsort(angles, kind="stable")])


def compute_voronoi(points: np.ndarray,
                    bounding_scale: float,
                    center: Tuple[float, float] = (0.0, 0.0)) -> Tuple[np.ndarray, List[List[int]]]:
    """
    Run Qhull on ``points`` inside a bounding square.

    Args:
        points: Non-empty (N, 2) array of sites
        bounding_scale: Must exceed the diagonal of the canvas
        center: Center of the bounding square

    Returns:
        Tuple of (vertex pool, per-site vertex id lists). A site whose region
        is missing or unbounded gets an empty list.

    Raises:
        DegenerateGeometryError: if Qhull cannot build the diagram
    """
    points = np.asarray(points, dtype=float)
    if points.shape[0] == 0:
        raise ValueError("compute_voronoi requires at least one point")

    # Keep every site well inside the sentinel ring, even ones loaded from
    # outside the canvas.
    reach = float(np.max(np.abs(points - np.asarray(center, dtype=float))))
    half_size = 2.0 * max(bounding_scale, reach)
    all_points = np.vstack([points, get_sentinel_points(center, half_size)])

    try:
        vor = Voronoi(all_points)
    except QhullError as e:
        raise DegenerateGeometryError(str(e)) from e

    regions = []
    for i in range(points.shape[0]):
        region_idx = vor.point_region[i]
        region = vor.regions[region_idx] if region_idx >= 0 else []
        if not region or -1 in region:
            regions.append([])
        else:
            regions.append(list(region))
    return vor.vertices, regions


class DiagramAdapter:
    """Builds a ``Diagram`` from the current sites for a canvas of fixed size."""

    def __init__(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)

    @property
    def bounding_scale(self) -> float:
        """Scale handed to Qhull: the canvas diagonal bound sqrt(2) * max side."""
        return math.sqrt(2.0) * max(self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.width / 2.0, self.height / 2.0)

    def build(self, sites) -> Diagram:
        sites = np.asarray(sites, dtype=float).reshape(-1, 2)
        if sites.shape[0] == 0:
            return Diagram()

        try:
            vertices, regions = compute_voronoi(sites, self.bounding_scale, self.center)
        except DegenerateGeometryError as e:
            logger.warning("Voronoi diagram could not be built", sites=len(sites), error=str(e))
            return Diagram()

        cells = []
        for site_index, region in enumerate(regions):
            if len(region) < 3:
                logger.debug("Site has no drawable cell", site_index=site_index)
                continue
            cells.append(Cell(site_index, order_region(region, vertices)))

        if len(cells) != len(sites):
            logger.debug("Cell count differs from site count",
                         cells=len(cells), sites=len(sites))
        return Diagram(vertices=np.asarray(vertices, dtype=float), cells=cells)
