"""
inpoly Example: Multi-area classification

This example classifies a cloud of points against a boundary made of
three areas:
1. An outer square with a square hole (area 1)
2. The hole itself (area 2)
3. A triangle sharing one edge with the square (area 3)

The status of every point is printed per area and a plot is saved for each.
"""

import numpy as np

from inpoly import BoundaryMesh, classify
from inpoly.core.logging_utils import configure_logging
from inpoly.core.visualization import plot_classification


def build_mesh():
    vertices = np.array([
        [0.0, 0.0], [4.0, 0.0], [4.0, 4.0], [0.0, 4.0],   # outer square
        [1.0, 1.0], [3.0, 1.0], [3.0, 3.0], [1.0, 3.0],   # hole
        [6.0, 2.0],                                       # triangle tip
    ])
    edges = np.array([
        [0, 1], [1, 2], [2, 3], [3, 0],
        [4, 5], [5, 6], [6, 7], [7, 4],
        [1, 8], [8, 2],
    ])
    area_of = {
        0: [1], 1: [1, 3], 2: [1], 3: [1],
        4: [1, 2], 5: [1, 2], 6: [1, 2], 7: [1, 2],
        8: [3], 9: [3],
    }
    return BoundaryMesh.from_area_map(vertices, edges, area_of)


def main():
    configure_logging('INFO')
    mesh = build_mesh()
    print(mesh)
    rng = np.random.default_rng(3)
    points = rng.uniform([-0.5, -0.5], [6.5, 4.5], size=(4000, 2))
    result = classify(points, mesh, atol=0.02)
    for area, (n_in, n_on, n_out) in enumerate(result.counts(), start=1):
        print(f"area {area}: inside={n_in} on={n_on} outside={n_out}")
        plot_classification(points, mesh, result, outname=f"multi_area_{area}.png", area=area)


if __name__ == "__main__":
    main()
