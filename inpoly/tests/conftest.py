"""Shared polygon fixtures for the inpoly tests."""
import numpy as np
import pytest

from inpoly.core.mesh import BoundaryMesh


def star_polygon(n=40, seed=0, r_min=0.4, r_max=1.0):
    """Star-shaped simple polygon around the origin with random radii."""
    rng = np.random.default_rng(seed)
    angles = np.sort(rng.uniform(0.0, 2.0 * np.pi, n))
    radii = rng.uniform(r_min, r_max, n)
    return np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])


@pytest.fixture
def unit_square():
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


@pytest.fixture
def square_edges():
    return np.array([[0, 1], [1, 2], [2, 3], [3, 0]])


@pytest.fixture
def square_with_hole():
    outer = [[0.0, 0.0], [4.0, 0.0], [4.0, 4.0], [0.0, 4.0]]
    hole = [[1.0, 1.0], [1.0, 3.0], [3.0, 3.0], [3.0, 1.0]]
    return BoundaryMesh.from_loops([outer, hole])


@pytest.fixture
def star():
    return star_polygon()


@pytest.fixture
def random_points():
    rng = np.random.default_rng(42)
    return rng.uniform(-1.2, 1.2, size=(2000, 2))


@pytest.fixture
def make_star():
    return star_polygon
