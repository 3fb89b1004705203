"""Canonical set of Voronoi sites and their display colors."""

from typing import Optional, Sequence, Tuple

import numpy as np
import structlog

logger = structlog.get_logger()

# Sites closer than this in both axes are treated as the same site.
DEDUP_EPSILON = 0.001


def random_color(rng: np.random.Generator) -> np.ndarray:
    """Opaque RGBA color with random RGB channels."""
    return np.append(rng.random(3), 1.0)


def random_colors(rng: np.random.Generator, n: int) -> np.ndarray:
    """Array of n opaque random RGBA colors, shape (n, 4)."""
    colors = np.ones((n, 4), dtype=float)
    colors[:, :3] = rng.random((n, 3))
    return colors


class PointStore:
    """Ordered sites paired 1:1 with RGBA colors.

    Sites are rows of an (N, 2) array, colors rows of an (N, 4) array.
    Every public operation leaves ``len(sites) == len(colors)``.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sites: np.ndarray = np.zeros((0, 2), dtype=float)
        self.colors: np.ndarray = np.zeros((0, 4), dtype=float)

    def __len__(self) -> int:
        return self.sites.shape[0]

    # ---- queries ---- #
    def has_site_near(self, x: float, y: float) -> bool:
        """True if an existing site lies inside the epsilon box around (x, y)."""
        if len(self) == 0:
            return False
        dx = np.abs(self.sites[:, 0] - x)
        dy = np.abs(self.sites[:, 1] - y)
        return bool(np.any((dx < DEDUP_EPSILON) & (dy < DEDUP_EPSILON)))

    def snapshot(self) -> Tuple[np.ndarray, np.ndarray]:
        """Copies of the current sites and colors."""
        return self.sites.copy(), self.colors.copy()

    # ---- mutations ---- #
    def insert(self, p: Sequence[float]) -> bool:
        x, y = float(p[0]), float(p[1])
        if self.has_site_near(x, y):
            logger.debug("Site already present, not added", x=x, y=y)
            return False
        self.sites = np.vstack([self.sites, [x, y]])
        self.colors = np.vstack([self.colors, random_color(self.rng)])
        return True

    def clear(self) -> None:
        self.sites = np.zeros((0, 2), dtype=float)
        self.colors = np.zeros((0, 4), dtype=float)

    def fill_random(self, n: int, bounds: Tuple[float, float]) -> None:
        """Replace all sites with n uniform random sites in [0,w) x [0,h)."""
        if n < 0:
            raise ValueError(f"Random site count must be non-negative, got {n}")
        width, height = bounds
        sites = self.rng.random((n, 2)) * np.array([width, height], dtype=float)
        self.sites = sites
        self.colors = random_colors(self.rng, n)
        logger.info("Placed random sites", count=n, width=width, height=height)

    def recolor(self) -> None:
        self.colors = random_colors(self.rng, len(self))

    def replace(self, sites) -> None:
        """Replace contents with ``sites`` and give each a fresh color."""
        arr = np.asarray(sites, dtype=float)
        if arr.size == 0:
            arr = np.zeros((0, 2), dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Sites must have shape (N, 2), got {arr.shape}")
        self.sites = arr.copy()
        self.recolor()
