"""Sweep-based crossing-number evaluator.

Points are sorted once along the primary axis. Each edge then binary-searches
the first point inside its tolerance-expanded primary range and scans forward
until the range is left, so the work per edge is bounded by the number of
points that can actually cross or touch it. Expected effort is
O((N + M) log M) for M points and N edges.

Coordinates inside the kernel are named after the default orientation:
``y`` is the primary (sorted) axis and ``x`` the secondary one. A ray from
each point towards +x is counted against every edge (even-odd rule).

Status cells are shared between edges, so parallelising over edges would
race on them. Safe splits are per area (disjoint status planes) or per
point range with every worker replaying all edges.
"""
from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numba import njit

from .constants import FLIP_PARITY, SET_BOUNDARY
from .geometry import AxisChoice
from .logging_utils import get_logger
from .mesh import BoundaryMesh, apply_status
from .points import PointCloud

logger = get_logger('inpoly.sweep')


@njit(cache=True)
def _lower_bound(coords, ivec, axis, value):
    """First position in ``ivec`` whose point has coords[:, axis] >= value."""
    lo = 0
    hi = ivec.shape[0]
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if coords[ivec[mid], axis] < value:
            lo = mid + 1
        else:
            hi = mid
    return lo


@njit(cache=True)
def _near_segment(xpos, ypos, xone, yone, xtwo, ytwo, xdel, ydel, veps):
    """True unless the point projects beyond an endpoint and lies outside its cap."""
    if xdel == 0.0 and ydel == 0.0:
        return math.hypot(xpos - xone, ypos - yone) <= veps
    before_one = xdel * (xpos - xone) < ydel * (yone - ypos) and math.hypot(xpos - xone, ypos - yone) > veps
    after_two = xdel * (xpos - xtwo) > ydel * (ytwo - ypos) and math.hypot(xpos - xtwo, ypos - ytwo) > veps
    return not (before_one or after_two)


@njit(cache=True)
def sweep_edges(coords, ivec, vertices, edges, area_table, ix, iy, veps, stat):
    """Accumulate crossing parity and boundary flags for every edge into ``stat``.

    coords     : (M, 2) query points
    ivec       : (M,) permutation sorting coords[:, iy] non-decreasingly
    vertices   : (V, 2) boundary vertices
    edges      : (N, 2) vertex index pairs
    area_table : (N, K) 0-based area ids, -1 padding
    ix, iy     : secondary / primary axis
    veps       : boundary tolerance
    stat       : (M, 2, A) bool, mutated in place
    """
    nvrt = ivec.shape[0]
    nedg = edges.shape[0]
    for epos in range(nedg):
        inod = edges[epos, 0]
        jnod = edges[epos, 1]
        if vertices[inod, iy] > vertices[jnod, iy]:
            inod, jnod = jnod, inod

        xone = vertices[inod, ix]
        yone = vertices[inod, iy]
        xtwo = vertices[jnod, ix]
        ytwo = vertices[jnod, iy]

        xmin = min(xone, xtwo) - veps
        xmax = max(xone, xtwo) + veps
        ymin = yone - veps
        ymax = ytwo + veps

        ydel = ytwo - yone
        xdel = xtwo - xone
        feps = veps * math.hypot(xdel, ydel)

        for jpos in range(_lower_bound(coords, ivec, iy, ymin), nvrt):
            jvrt = ivec[jpos]
            ypos = coords[jvrt, iy]
            if ypos > ymax:
                break
            xpos = coords[jvrt, ix]
            # half-open in y so a ray through a shared vertex counts once
            counts = yone <= ypos and ypos < ytwo

            if xpos < xmin:
                # left of the expanded box: the ray crosses iff the y-range matches
                if counts:
                    apply_status(stat, area_table, jvrt, epos, FLIP_PARITY)
            elif xpos <= xmax:
                mul1 = ydel * (xpos - xone)
                mul2 = xdel * (ypos - yone)
                if abs(mul2 - mul1) <= feps:
                    if _near_segment(xpos, ypos, xone, yone, xtwo, ytwo, xdel, ydel, veps):
                        apply_status(stat, area_table, jvrt, epos, SET_BOUNDARY)
                if mul1 < mul2 and counts:
                    apply_status(stat, area_table, jvrt, epos, FLIP_PARITY)
    return stat


def sweep_classify(points: PointCloud, mesh: BoundaryMesh, tol: float, axis: AxisChoice,
                   stat: Optional[np.ndarray] = None, use_jit: bool = True) -> np.ndarray:
    """Run the sweep over all edges of ``mesh`` and return the status array.

    ``stat`` defaults to a fresh zero array (len(points), 2, mesh.n_areas).
    With ``use_jit=False`` the uncompiled kernel is run (slow; for debugging).
    """
    if stat is None:
        stat = mesh.new_status(len(points))
    elif stat.shape != (len(points), 2, mesh.n_areas) or stat.dtype != np.bool_:
        raise ValueError(f"status array must be bool {(len(points), 2, mesh.n_areas)}, got {stat.dtype} {stat.shape}")
    if len(points) == 0 or len(mesh) == 0:
        return stat

    ivec = points.sort_permutation(axis.primary)
    kernel = sweep_edges if use_jit else sweep_edges.py_func
    logger.debug("sweep: %d points, %d edges, %d area(s), primary axis %d, tol=%.3e, jit=%s",
                 len(points), len(mesh), mesh.n_areas, axis.primary, tol, use_jit)
    kernel(points.coords, ivec, mesh.vertices, mesh.edges, mesh.area_table,
           axis.secondary, axis.primary, float(tol), stat)
    return stat


__all__ = ['sweep_edges', 'sweep_classify']
