"""Tests for boundary/point readers and result writers."""
import numpy as np
import pytest

from inpoly import classify
from inpoly.core.io import (
    load_boundary, load_points, read_boundary_msh, save_classification, write_vtk,
)

MSH_V2 = """$MeshFormat
2.2 0 8
$EndMeshFormat
$Nodes
4
1 0 0 0
2 1 0 0
3 1 1 0
4 0 1 0
$EndNodes
$Elements
6
1 15 2 0 1 1
2 1 2 7 1 1 2
3 1 2 7 1 2 3
4 1 2 7 2 3 4
5 1 2 7 2 4 1
6 2 2 0 1 1 2 3
$EndElements
"""

MSH_V4 = """$MeshFormat
4.1 0 8
$EndMeshFormat
$Nodes
1 4 1 4
2 1 0 4
1
2
3
4
0 0 0
1 0 0
1 1 0
0 1 0
$EndNodes
$Elements
2 4 1 4
1 5 1 2
1 1 2
2 2 3
1 6 1 2
3 3 4
4 4 1
$EndElements
"""


def test_read_msh_v2(tmp_path):
    path = tmp_path / "square.msh"
    path.write_text(MSH_V2)
    vertices, edges, areas = read_boundary_msh(path)
    assert vertices.shape == (4, 2)
    assert edges.tolist() == [[0, 1], [1, 2], [2, 3], [3, 0]]
    assert areas[:, 0].tolist() == [1, 1, 1, 1]


def test_read_msh_v4_entity_areas(tmp_path):
    path = tmp_path / "square4.msh"
    path.write_text(MSH_V4)
    vertices, edges, areas = read_boundary_msh(path)
    assert vertices.tolist() == [[0, 0], [1, 0], [1, 1], [0, 1]]
    assert edges.tolist() == [[0, 1], [1, 2], [2, 3], [3, 0]]
    assert areas[:, 0].tolist() == [1, 1, 2, 2]


def test_read_msh_errors(tmp_path):
    path = tmp_path / "bad.msh"
    path.write_text("$MeshFormat\n9.0 0 8\n$EndMeshFormat\n")
    with pytest.raises(ValueError, match="Unsupported"):
        read_boundary_msh(path)
    path.write_text("")
    with pytest.raises(ValueError, match="Empty"):
        read_boundary_msh(path)
    no_lines = MSH_V2.replace("2 1 2 7 1 1 2\n3 1 2 7 1 2 3\n4 1 2 7 2 3 4\n5 1 2 7 2 4 1\n", "")
    path.write_text(no_lines)
    with pytest.raises(ValueError, match="No line elements"):
        read_boundary_msh(path)
    with pytest.raises(FileNotFoundError):
        read_boundary_msh(tmp_path / "missing.msh")


def test_load_boundary_from_msh_classifies(tmp_path):
    path = tmp_path / "square.msh"
    path.write_text(MSH_V2)
    mesh = load_boundary(path)
    res = classify([[0.5, 0.5], [1.5, 0.5]], mesh)
    assert res.inside[:, 0].tolist() == [True, False]


def test_load_boundary_npz_and_text(tmp_path, unit_square, square_edges):
    npz = tmp_path / "b.npz"
    np.savez(npz, vertices=unit_square, edges=square_edges, areas=np.array([1, 1, 2, 2]))
    mesh = load_boundary(npz)
    assert mesh.n_areas == 2
    txt = tmp_path / "b.txt"
    np.savetxt(txt, unit_square)
    mesh = load_boundary(txt)
    assert len(mesh) == 4
    bad = tmp_path / "bad.npz"
    np.savez(bad, edges=square_edges)
    with pytest.raises(ValueError):
        load_boundary(bad)


def test_load_points_formats(tmp_path):
    pts = np.array([[0.1, 0.2], [0.3, 0.4]])
    csv = tmp_path / "p.csv"
    csv.write_text("x,y\n0.1,0.2\n0.3,0.4\n")
    assert np.allclose(load_points(csv), pts)
    npy = tmp_path / "p.npy"
    np.save(npy, pts)
    assert np.allclose(load_points(npy), pts)
    npz = tmp_path / "p.npz"
    np.savez(npz, points=pts)
    assert np.allclose(load_points(npz), pts)
    one = tmp_path / "one.txt"
    one.write_text("0.5 0.5\n")
    assert load_points(one).shape == (1, 2)
    bad = tmp_path / "bad.txt"
    bad.write_text("1\n2\n")
    with pytest.raises(ValueError):
        load_points(bad)


def test_save_classification(tmp_path, unit_square):
    pts = np.array([[0.5, 0.5], [1.5, 0.5], [1.0, 0.5]])
    res = classify(pts, unit_square, atol=0.01)

    csv = tmp_path / "out.csv"
    save_classification(csv, pts, res)
    assert csv.read_text().splitlines()[0] == "x,y,status_a1"
    table = np.loadtxt(csv, delimiter=",", skiprows=1)
    assert table[:, 2].tolist() == [1, -1, 0]

    npz = tmp_path / "out.npz"
    save_classification(npz, pts, res)
    with np.load(npz) as data:
        assert data["stat"].shape == (3, 2, 1)
        assert float(data["tol"]) == pytest.approx(0.01)

    vtk = tmp_path / "out.vtk"
    save_classification(vtk, pts, res)
    content = vtk.read_text()
    assert "POINTS 3 double" in content
    assert "CELL_TYPES 3" in content
    assert "SCALARS status_a1 int 1" in content

    with pytest.raises(ValueError):
        save_classification(tmp_path / "out.json", pts, res)


def test_write_vtk_rejects_bad_shape(tmp_path):
    with pytest.raises(ValueError):
        write_vtk(tmp_path / "x.vtk", np.zeros((3, 4)))


def test_write_vtk_skips_mismatched_field(tmp_path):
    with pytest.warns(UserWarning):
        write_vtk(tmp_path / "x.vtk", np.zeros((3, 2)), point_data={"f": np.zeros(5)})
