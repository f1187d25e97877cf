"""Brute-force reference classifier.

O(M * N) even-odd test plus exact point-to-segment distances, vectorized
over the points. Used to cross-check the sweep in tests and benchmarks.
"""
from __future__ import annotations

import numpy as np

from .mesh import BoundaryMesh


def point_segment_distance(points, a, b):
    """Euclidean distance from each of ``points`` (M, 2) to segment a-b."""
    p = np.asarray(points, dtype=np.float64)
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    d = b - a
    dd = float(d @ d)
    if dd == 0.0:
        return np.hypot(p[:, 0] - a[0], p[:, 1] - a[1])
    t = np.clip(((p - a) @ d) / dd, 0.0, 1.0)
    proj = a + t[:, None] * d
    return np.hypot(p[:, 0] - proj[:, 0], p[:, 1] - proj[:, 1])


def crossing_parity(points, segments):
    """Even-odd parity of a +x ray from each point against (N, 2, 2) segments.

    Uses the half-open rule ``min(y) <= py < max(y)`` so a ray through a
    shared vertex is counted exactly once.
    """
    p = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    parity = np.zeros(p.shape[0], dtype=bool)
    for (x0, y0), (x1, y1) in np.asarray(segments, dtype=np.float64):
        if y0 > y1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        if y0 == y1:
            continue
        span = (p[:, 1] >= y0) & (p[:, 1] < y1)
        xint = x0 + (p[:, 1] - y0) * (x1 - x0) / (y1 - y0)
        parity ^= span & (p[:, 0] < xint)
    return parity


def reference_status(points, mesh: BoundaryMesh, tol: float) -> np.ndarray:
    """Status array (M, 2, A) computed without the sweep."""
    p = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    stat = mesh.new_status(p.shape[0])
    segments = mesh.segments()
    for a in range(mesh.n_areas):
        idx = mesh.area_edges(a + 1)
        if idx.size == 0:
            continue
        stat[:, 0, a] = crossing_parity(p, segments[idx])
        on = np.zeros(p.shape[0], dtype=bool)
        for s in segments[idx]:
            on |= point_segment_distance(p, s[0], s[1]) <= tol
        stat[:, 1, a] = on
    return stat


__all__ = ['point_segment_distance', 'crossing_parity', 'reference_status']
