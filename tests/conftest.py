"""Shared fixtures; matplotlib runs headless."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from py_voronoi.core.point_store import PointStore


@pytest.fixture
def store():
    """Point store with a seeded generator."""
    return PointStore(rng=np.random.default_rng(1234))


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
