"""Public classification entry point."""
from __future__ import annotations

from typing import Optional

import numpy as np

from .config import ClassifyConfig
from .encoding import Classification
from .geometry import bounding_box, check_tolerances, resolve_tolerance, select_axis
from .logging_utils import get_logger
from .mesh import BoundaryMesh
from .points import PointCloud
from .sweep import sweep_classify

logger = get_logger('inpoly.classify')

_UNSET = object()


def _build_mesh(vertices, edges, areas, area_count) -> BoundaryMesh:
    if isinstance(vertices, BoundaryMesh):
        if edges is not None or areas is not None:
            raise ValueError("edges/areas cannot be given together with a BoundaryMesh")
        return vertices
    if areas is None or isinstance(areas, np.ndarray):
        return BoundaryMesh(vertices, edges, areas=areas, area_count=area_count)
    # per-edge id collections, mapping or callable
    return BoundaryMesh.from_area_map(vertices, edges, areas, area_count=area_count)


def classify(points, vertices, edges=None, areas=None, *, atol=_UNSET, rtol=_UNSET,
             area_count: Optional[int] = None, config: Optional[ClassifyConfig] = None) -> Classification:
    """Classify points as inside, outside or on the boundary of a polygon.

    Parameters
    ----------
    points : (M, 2) array-like or PointCloud
        Query points.
    vertices : (V, 2) array-like or BoundaryMesh
        Boundary vertices, or a ready mesh (then ``edges``/``areas`` must be None).
    edges : (N, 2) or (N, 2+K) int array-like, optional
        Vertex index pairs (0-based). Defaults to the closed loop over ``vertices``.
        The polygon must be closed; it may consist of several cycles.
    areas : optional
        Area assignment: an (N, K) table of 1-based ids (0 = none), a per-edge
        sequence of id sets, a mapping ``edge -> ids`` or a callable.
    atol, rtol : float, optional
        Boundary tolerance ``max(atol, rtol * span)`` with ``span`` the mean
        extent of the points. Defaults come from ``config`` (atol 0, rtol
        ``RTOL_DEFAULT``).
    area_count : int, optional
        Number of areas if not the largest id in ``areas``.
    config : ClassifyConfig, optional

    Returns
    -------
    Classification
        Status per point and area; see ``Classification.inside``,
        ``.on_boundary`` and ``.encode``.

    Raises
    ------
    DegenerateToleranceError, InvalidIndexError, InvalidAreaError
        On invalid input, before any work is done.
    """
    cfg = config or ClassifyConfig()
    atol = cfg.atol if atol is _UNSET else atol
    rtol = cfg.rtol if rtol is _UNSET else rtol
    atol, rtol = check_tolerances(atol, rtol)

    mesh = _build_mesh(vertices, edges, areas, area_count)
    cloud = points if isinstance(points, PointCloud) else PointCloud(points)

    lower, upper = bounding_box(cloud.coords)
    tol = resolve_tolerance(lower, upper, atol, rtol)
    axis = select_axis(cloud.extent())
    logger.debug("classify: tol=%.3e (atol=%.3e, rtol=%.3e), flip=%s", tol, atol, rtol, axis.flip)

    stat = sweep_classify(cloud, mesh, tol, axis, use_jit=cfg.use_jit)
    return Classification(stat=stat, tol=tol, axis=axis)


__all__ = ['classify']
