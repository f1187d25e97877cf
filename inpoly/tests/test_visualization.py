"""Smoke tests for the plotting helper."""
import numpy as np

from inpoly import classify
from inpoly.core.mesh import BoundaryMesh
from inpoly.core.visualization import plot_classification


def test_plot_classification_writes_png(tmp_path, unit_square):
    mesh = BoundaryMesh.from_loops([unit_square, unit_square + 2.0], loop_areas=[1, 2])
    pts = np.random.default_rng(0).uniform(-0.5, 3.5, size=(200, 2))
    res = classify(pts, mesh, atol=0.02)
    out = plot_classification(pts, mesh, res, outname=tmp_path / "area2.png", area=2)
    assert (tmp_path / "area2.png").exists()
    assert out.endswith("area2.png")


def test_plot_without_points(tmp_path, unit_square):
    mesh = BoundaryMesh(unit_square)
    res = classify(np.zeros((0, 2)), mesh)
    plot_classification(np.zeros((0, 2)), mesh, res, outname=tmp_path / "empty.png")
    assert (tmp_path / "empty.png").exists()
