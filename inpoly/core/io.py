"""Lightweight file I/O for boundaries, query points and results.

Provides readers/writers for common formats without heavy dependencies:
- read_boundary_msh: import polygon edges (line elements) from Gmsh .msh (ASCII 2.2 and 4.1)
- load_points / load_boundary: numpy .npy/.npz and plain-text coordinate files
- save_classification: CSV / NPZ / VTK export of a classification result
- write_vtk: legacy VTK point cloud with per-point fields for ParaView/VisIt

All functions use the package's canonical data format:
    points / vertices: (N, 2) float64 array
    edges: (E, 2) int64 array (0-indexed)
    areas: (E, 1) int64 array of 1-based area ids, or None
"""
from __future__ import annotations

import warnings
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np

from .encoding import Classification, InOnOut
from .logging_utils import get_logger
from .mesh import BoundaryMesh

logger = get_logger('inpoly.io')


def _section(lines, name: str) -> Tuple[int, int]:
    start = end = None
    for i, line in enumerate(lines):
        if line == f'${name}':
            start = i
        elif line == f'$End{name}':
            end = i
            break
    if start is None or end is None:
        raise ValueError(f"Missing ${name} section in .msh file")
    return start, end


def _renumber_areas(tags) -> Optional[np.ndarray]:
    """Map raw Gmsh tags to 1-based area ids in order of first appearance (0 stays 0)."""
    mapping: Dict[int, int] = {}
    out = np.zeros((len(tags), 1), dtype=np.int64)
    for k, tag in enumerate(tags):
        if tag == 0:
            continue
        out[k, 0] = mapping.setdefault(tag, len(mapping) + 1)
    return out if mapping else None


def read_boundary_msh(filepath) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray]]:
    """Read a polygonal boundary from the line elements of a Gmsh .msh file.

    Supports Gmsh format versions 2.2 and 4.1 (ASCII mode only). Only 2-node
    line elements (type 1) are used; every other element type is skipped.

    Parameters
    ----------
    filepath : str or Path
        Path to the .msh file.

    Returns
    -------
    vertices : (V, 2) ndarray of float64
        Node coordinates (x, y); z is ignored.
    edges : (E, 2) ndarray of int64
        Line connectivity (0-indexed).
    areas : (E, 1) ndarray of int64 or None
        1-based area id per edge, from the physical tag (v2) or the curve
        entity tag (v4), renumbered in order of first appearance. None when
        no line carries a tag.

    Raises
    ------
    ValueError
        If the version is unsupported, a section is missing, or the file
        contains no line elements.
    FileNotFoundError
        If the file doesn't exist.
    """
    with open(filepath, 'r') as f:
        lines = [line.strip() for line in f]
    if not lines:
        raise ValueError(f"Empty file: {filepath}")

    version = None
    for i, line in enumerate(lines):
        if line.startswith('$MeshFormat'):
            version = float(lines[i + 1].split()[0])
            break
    if version is None:
        raise ValueError("Could not detect Gmsh format version (no $MeshFormat section)")

    if 2.0 <= version < 3.0:
        nodes, lines_list, tags = _read_msh_v2(lines)
    elif 4.0 <= version < 5.0:
        nodes, lines_list, tags = _read_msh_v4(lines)
    else:
        raise ValueError(f"Unsupported Gmsh format version: {version}")

    if not lines_list:
        raise ValueError("No line elements found in .msh file")

    node_ids = sorted(nodes.keys())
    id_to_idx = {nid: idx for idx, nid in enumerate(node_ids)}
    try:
        edges = np.array([[id_to_idx[a], id_to_idx[b]] for a, b in lines_list], dtype=np.int64)
    except KeyError as exc:
        raise ValueError(f"Line element references unknown node {exc.args[0]}") from None
    vertices = np.array([nodes[nid] for nid in node_ids], dtype=np.float64)
    logger.debug("read %s: %d nodes, %d line elements (Gmsh %s)", filepath, len(vertices), len(edges), version)
    return vertices, edges, _renumber_areas(tags)


def _read_msh_v2(lines):
    """Parse Gmsh format 2.2 (legacy ASCII format)."""
    node_start, node_end = _section(lines, 'Nodes')
    nodes = {}
    for i in range(node_start + 2, node_end):
        parts = lines[i].split()
        nodes[int(parts[0])] = (float(parts[1]), float(parts[2]))

    elem_start, elem_end = _section(lines, 'Elements')
    edges, tags = [], []
    for i in range(elem_start + 2, elem_end):
        parts = lines[i].split()
        # elm-number elm-type number-of-tags <tags> node-list; type 1 = 2-node line
        if int(parts[1]) != 1:
            continue
        num_tags = int(parts[2])
        start = 3 + num_tags
        edges.append((int(parts[start]), int(parts[start + 1])))
        tags.append(int(parts[3]) if num_tags else 0)
    return nodes, edges, tags


def _read_msh_v4(lines):
    """Parse Gmsh format 4.1 (modern ASCII format)."""
    node_start, node_end = _section(lines, 'Nodes')
    nodes = {}
    i = node_start + 2
    while i < node_end:
        # entityDim entityTag parametric numNodesInBlock
        num_in_block = int(lines[i].split()[3])
        i += 1
        node_tags = [int(lines[i + j]) for j in range(num_in_block)]
        i += num_in_block
        for j in range(num_in_block):
            coords = lines[i + j].split()
            nodes[node_tags[j]] = (float(coords[0]), float(coords[1]))
        i += num_in_block

    elem_start, elem_end = _section(lines, 'Elements')
    edges, tags = [], []
    i = elem_start + 2
    while i < elem_end:
        # entityDim entityTag elementType numElementsInBlock
        block = lines[i].split()
        entity_tag, elem_type, num_in_block = int(block[1]), int(block[2]), int(block[3])
        i += 1
        if elem_type == 1:
            for j in range(num_in_block):
                parts = lines[i + j].split()
                edges.append((int(parts[1]), int(parts[2])))
                tags.append(entity_tag)
        i += num_in_block
    return nodes, edges, tags


def _load_text(path: Path) -> np.ndarray:
    delimiter = ',' if path.suffix.lower() == '.csv' else None
    with open(path, 'r') as f:
        first = f.readline()
    skiprows = 0
    try:
        [float(tok) for tok in first.replace(',', ' ').split()]
    except ValueError:
        skiprows = 1  # header line
    return np.loadtxt(path, delimiter=delimiter, skiprows=skiprows, comments='#', ndmin=2)


def load_points(filepath) -> np.ndarray:
    """Load (M, 2) query points from .npy, .npz (key 'points' or first array) or text."""
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix == '.npy':
        arr = np.load(path)
    elif suffix == '.npz':
        with np.load(path) as data:
            key = 'points' if 'points' in data.files else data.files[0]
            arr = data[key]
    else:
        arr = _load_text(path)
    arr = np.asarray(arr, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] < 2:
        raise ValueError(f"{path}: expected at least 2 coordinate columns, got shape {arr.shape}")
    if arr.shape[1] > 2:
        warnings.warn(f"{path}: using the first 2 of {arr.shape[1]} columns")
    return arr[:, :2]


def load_boundary(filepath) -> BoundaryMesh:
    """Load a boundary mesh from .msh, .npz (vertices/edges/areas) or a text vertex loop."""
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix == '.msh':
        vertices, edges, areas = read_boundary_msh(path)
        return BoundaryMesh(vertices, edges, areas=areas)
    if suffix == '.npz':
        with np.load(path) as data:
            if 'vertices' not in data.files:
                raise ValueError(f"{path}: missing 'vertices' array")
            vertices = data['vertices']
            edges = data['edges'] if 'edges' in data.files else None
            areas = data['areas'] if 'areas' in data.files else None
        return BoundaryMesh(vertices, edges, areas=areas)
    return BoundaryMesh(load_points(path))


def write_vtk(filepath,
              points: np.ndarray,
              point_data: Optional[Dict[str, np.ndarray]] = None,
              title: str = "inpoly points") -> None:
    """Write a 2D point cloud to legacy VTK format (ASCII) with vertex cells.

    Parameters
    ----------
    filepath : str or Path
        Output .vtk file path
    points : (N, 2) or (N, 3) ndarray
        Point coordinates. If 2D, z=0 is added.
    point_data : dict, optional
        Scalar (N,) arrays keyed by field name.
    title : str
        Dataset title/description
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] not in (2, 3):
        raise ValueError(f"points must be (N, 2) or (N, 3), got shape {points.shape}")
    if points.shape[1] == 2:
        points = np.column_stack([points, np.zeros(len(points))])
    n = len(points)

    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET UNSTRUCTURED_GRID\n")
        f.write(f"POINTS {n} double\n")
        for pt in points:
            f.write(f"{pt[0]:.16e} {pt[1]:.16e} {pt[2]:.16e}\n")
        # one VTK_VERTEX cell (type 1) per point
        f.write(f"\nCELLS {n} {n * 2}\n")
        for i in range(n):
            f.write(f"1 {i}\n")
        f.write(f"\nCELL_TYPES {n}\n")
        for _ in range(n):
            f.write("1\n")
        if point_data:
            f.write(f"\nPOINT_DATA {n}\n")
            for name, data in point_data.items():
                data = np.asarray(data)
                if data.ndim != 1 or data.shape[0] != n:
                    warnings.warn(f"Skipping point_data['{name}'] with unsupported shape {data.shape}")
                    continue
                f.write(f"SCALARS {name} int 1\n")
                f.write("LOOKUP_TABLE default\n")
                for val in data:
                    f.write(f"{int(val)}\n")


def save_classification(filepath, points, result: Classification, values: InOnOut = InOnOut()) -> None:
    """Save a classification as .csv (x, y, status per area), .npz or .vtk."""
    path = Path(filepath)
    suffix = path.suffix.lower()
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    codes = result.to_in_on_out(values)
    names = [f"status_a{a + 1}" for a in range(result.n_areas)]
    if suffix == '.csv':
        table = np.column_stack([pts, codes])
        fmt = ['%.17g', '%.17g'] + ['%d'] * result.n_areas
        np.savetxt(path, table, delimiter=',', fmt=fmt, header=','.join(['x', 'y'] + names), comments='')
    elif suffix == '.npz':
        np.savez(path, points=pts, stat=result.stat, codes=codes, tol=result.tol)
    elif suffix == '.vtk':
        write_vtk(path, pts, point_data={name: codes[:, a] for a, name in enumerate(names)})
    else:
        raise ValueError(f"Unsupported output format: {path.suffix!r} (expected .csv, .npz or .vtk)")
    logger.debug("wrote %d classified points to %s", len(pts), path)


__all__ = ['read_boundary_msh', 'load_points', 'load_boundary', 'write_vtk', 'save_classification']
