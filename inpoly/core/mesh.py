"""Boundary mesh (vertices, edges, area assignment) and the area propagator.

Canonical data format:
    vertices: (V, 2) float64 array
    edges:    (N, 2) int64 array of 0-based vertex indices
    areas:    (N, K) int64 array of 1-based area ids, 0 = empty slot

An *area* is an independent group of edges classified in the same sweep.
Without an area table every edge belongs to one implicit area, so the status
array always has ``max(area_count, 1)`` area planes.
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np
from numba import njit

from .constants import FLIP_PARITY, NO_AREA, SET_BOUNDARY, STATUS_SLOTS
from .errors import InvalidAreaError, InvalidIndexError


@njit(cache=True)
def apply_status(stat, area_table, point, edge, kind):
    """Apply a status mutation to ``point`` for every area of ``edge``.

    ``area_table`` holds 0-based area ids with -1 padding. ``kind`` is
    FLIP_PARITY (toggle the parity slot) or SET_BOUNDARY (set the boundary slot).
    """
    for k in range(area_table.shape[1]):
        area = area_table[edge, k]
        if area == NO_AREA:
            continue
        if kind == FLIP_PARITY:
            stat[point, FLIP_PARITY, area] = not stat[point, FLIP_PARITY, area]
        else:
            stat[point, SET_BOUNDARY, area] = True


def _as_index_array(values, what: str) -> np.ndarray:
    arr = np.asarray(values)
    if arr.size == 0:
        return np.zeros((0, 2) if what == 'edges' else (0, 1), dtype=np.int64)
    if not np.issubdtype(arr.dtype, np.integer):
        if not np.issubdtype(arr.dtype, np.number) or not np.all(arr == np.round(arr)):
            raise ValueError(f"{what} must contain integer indices")
    return arr.astype(np.int64)


def _unique_area_rows(area_arr: np.ndarray) -> np.ndarray:
    """Blank repeated ids within a row; an edge belongs to each area once."""
    if area_arr.shape[1] < 2:
        return area_arr
    srt = np.sort(area_arr, axis=1)
    dup = np.zeros(srt.shape, dtype=bool)
    dup[:, 1:] = (srt[:, 1:] == srt[:, :-1]) & (srt[:, 1:] > 0)
    if not dup.any():
        return area_arr
    return np.where(dup, 0, srt)


def _closed_loop(n: int, offset: int = 0) -> np.ndarray:
    idx = np.arange(n, dtype=np.int64)
    return np.column_stack([idx, np.roll(idx, -1)]) + offset


class BoundaryMesh:
    """Vertex table, edge table and area assignment of a polygonal boundary.

    Parameters
    ----------
    vertices : (V, 2) array-like
        Boundary vertex coordinates.
    edges : (N, 2) or (N, 2+K) array-like, optional
        0-based vertex index pairs. Extra columns, if present and ``areas`` is
        not given, are read as 1-based area ids. Defaults to the closed loop
        ``0 -> 1 -> ... -> V-1 -> 0``.
    areas : (N,) or (N, K) array-like, optional
        1-based area ids per edge, 0 for an unused slot.
    area_count : int, optional
        Number of areas. Defaults to the largest id in ``areas``.

    Raises
    ------
    InvalidIndexError
        If an edge references a vertex outside ``[0, V)``.
    InvalidAreaError
        If an area id is outside ``[1, area_count]``.
    ValueError
        If the arrays have the wrong shape.
    """

    __slots__ = ('vertices', 'edges', 'areas', 'area_count', 'area_table')

    def __init__(self, vertices, edges=None, areas=None, area_count: Optional[int] = None):
        verts = np.array(vertices, dtype=np.float64)
        if verts.size == 0:
            verts = verts.reshape(0, 2)
        if verts.ndim != 2 or verts.shape[1] != 2:
            raise ValueError(f"vertices must be (V, 2), got shape {verts.shape}")
        if not np.all(np.isfinite(verts)):
            raise ValueError("vertices contain NaN or infinite coordinates")
        nvert = verts.shape[0]

        if edges is None:
            edge_arr = _closed_loop(nvert) if nvert else np.zeros((0, 2), dtype=np.int64)
        else:
            edge_arr = _as_index_array(edges, 'edges')
            if edge_arr.ndim != 2 or edge_arr.shape[1] < 2:
                raise ValueError(f"edges must be (N, 2) or (N, 2+K), got shape {edge_arr.shape}")
            if edge_arr.shape[1] > 2:
                if areas is None:
                    areas = edge_arr[:, 2:]
                edge_arr = edge_arr[:, :2]
        nedge = edge_arr.shape[0]

        bad = np.flatnonzero(np.any((edge_arr < 0) | (edge_arr >= nvert), axis=1))
        if bad.size:
            e = int(bad[0])
            raise InvalidIndexError(
                f"edge {e} = {tuple(int(v) for v in edge_arr[e])} references a vertex "
                f"outside [0, {nvert}) ({bad.size} invalid edge(s))"
            )

        if areas is None:
            area_arr = np.zeros((nedge, 1), dtype=np.int64)
        else:
            area_arr = _as_index_array(areas, 'areas')
            if area_arr.ndim == 1:
                area_arr = area_arr.reshape(-1, 1)
            if area_arr.ndim != 2 or area_arr.shape[0] != nedge:
                raise ValueError(f"areas must have one row per edge ({nedge}), got shape {area_arr.shape}")
            if area_arr.shape[1] == 0:
                area_arr = np.zeros((nedge, 1), dtype=np.int64)

        if area_count is None:
            area_count = int(area_arr.max()) if area_arr.size else 0
        elif area_count < 0:
            raise ValueError(f"area_count must be >= 0, got {area_count}")
        area_count = int(area_count)

        bad = np.flatnonzero(np.any((area_arr < 0) | (area_arr > area_count), axis=1))
        if bad.size:
            e = int(bad[0])
            raise InvalidAreaError(
                f"edge {e} has area ids {area_arr[e].tolist()} outside [1, {area_count}]"
            )
        area_arr = _unique_area_rows(area_arr)

        if area_count == 0:
            # single implicit area holding every edge
            table = np.zeros((nedge, 1), dtype=np.int64)
        else:
            table = np.where(area_arr > 0, area_arr - 1, NO_AREA)

        for arr in (verts, edge_arr, area_arr, table):
            arr.setflags(write=False)
        self.vertices = verts
        self.edges = edge_arr
        self.areas = area_arr
        self.area_count = area_count
        self.area_table = table

    # ------------------------------------------------------------------ constructors
    @classmethod
    def from_area_map(cls, vertices, edges, area_of, area_count: Optional[int] = None) -> 'BoundaryMesh':
        """Build a mesh from a per-edge collection of area ids.

        ``area_of`` may be a sequence indexed by edge, a mapping keyed by edge
        index (missing edges belong to no area) or a callable ``edge -> ids``.
        Each entry is an int or an iterable of 1-based ids. ``edges=None``
        selects the closed loop over ``vertices``.
        """
        if edges is None:
            edge_arr = _closed_loop(np.asarray(vertices).reshape(-1, 2).shape[0])
        else:
            edge_arr = _as_index_array(edges, 'edges')
        if edge_arr.ndim != 2 or edge_arr.shape[1] < 2:
            raise ValueError(f"edges must be (N, 2), got shape {edge_arr.shape}")
        if edge_arr.shape[1] > 2:
            raise ValueError("edges carry area columns; pass either (N, 2+K) edges or area_of, not both")
        nedge = edge_arr.shape[0]
        rows = []
        for e in range(nedge):
            if callable(area_of):
                ids = area_of(e)
            elif hasattr(area_of, 'get'):
                ids = area_of.get(e, ())
            else:
                ids = area_of[e]
            if ids is None:
                ids = ()
            elif np.isscalar(ids):
                ids = (ids,)
            rows.append(sorted({int(a) for a in ids}))
        width = max([len(r) for r in rows] + [1])
        table = np.zeros((nedge, width), dtype=np.int64)
        for e, row in enumerate(rows):
            table[e, :len(row)] = row
        return cls(vertices, edge_arr, areas=table, area_count=area_count)

    @classmethod
    def from_loops(cls, loops: Sequence, loop_areas: Optional[Sequence] = None) -> 'BoundaryMesh':
        """Build a mesh from closed coordinate loops.

        Each loop is an (n_i, 2) array closed implicitly (last vertex joins the
        first). ``loop_areas[i]`` gives the area id(s) of loop ``i``; by
        default every loop belongs to area 1, which describes one
        multiply-connected region (outer ring plus holes).
        """
        verts, edges, areas = [], [], []
        offset = 0
        for i, loop in enumerate(loops):
            pts = np.asarray(loop, dtype=np.float64).reshape(-1, 2)
            n = pts.shape[0]
            if n == 0:
                continue
            verts.append(pts)
            edges.append(_closed_loop(n, offset))
            ids = 1 if loop_areas is None else loop_areas[i]
            ids = (ids,) if np.isscalar(ids) else tuple(ids)
            areas.extend([ids] * n)
            offset += n
        if not verts:
            return cls(np.zeros((0, 2)), np.zeros((0, 2), dtype=np.int64))
        return cls.from_area_map(np.vstack(verts), np.vstack(edges), areas)

    # ------------------------------------------------------------------ queries
    def __len__(self) -> int:
        return self.edges.shape[0]

    def __repr__(self) -> str:
        return f"BoundaryMesh(vertices={self.vertices.shape[0]}, edges={len(self)}, areas={self.area_count})"

    @property
    def n_areas(self) -> int:
        """Number of status planes (at least one)."""
        return max(self.area_count, 1)

    def segments(self) -> np.ndarray:
        """Edge endpoint coordinates, shape (N, 2, 2)."""
        return self.vertices[self.edges]

    def area_edges(self, area: int) -> np.ndarray:
        """Indices of the edges belonging to the 1-based ``area``."""
        if not 1 <= area <= self.n_areas:
            raise InvalidAreaError(f"area {area} outside [1, {self.n_areas}]")
        return np.flatnonzero(np.any(self.area_table == area - 1, axis=1))

    def new_status(self, n_points: int) -> np.ndarray:
        """Zero-initialised status array (n_points, 2, n_areas)."""
        return np.zeros((n_points, STATUS_SLOTS, self.n_areas), dtype=np.bool_)

    def propagate(self, stat: np.ndarray, point: int, edge: int, kind: int) -> None:
        """Apply ``kind`` (FLIP_PARITY / SET_BOUNDARY) for ``point`` to every area of ``edge``."""
        if kind not in (FLIP_PARITY, SET_BOUNDARY):
            raise ValueError(f"unknown status mutation {kind!r}")
        apply_status(stat, self.area_table, int(point), int(edge), int(kind))


__all__ = ['BoundaryMesh', 'apply_status']
