#!/usr/bin/env python3
"""Benchmark the sweep classifier against the brute-force reference."""

import time
import numpy as np

from inpoly import classify
from inpoly.core.config import ClassifyConfig
from inpoly.core.mesh import BoundaryMesh
from inpoly.core.reference import reference_status


def make_polygon(n_edges=1000, seed=0):
    """Star-shaped polygon with ``n_edges`` vertices."""
    rng = np.random.default_rng(seed)
    theta = np.sort(rng.uniform(0.0, 2.0 * np.pi, n_edges))
    r = rng.uniform(0.5, 1.0, n_edges)
    return np.column_stack([r * np.cos(theta), r * np.sin(theta)])


def benchmark_function(func, *args, n_runs=5, **kwargs):
    """Median/mean wall time in ms over ``n_runs`` after one warmup call."""
    func(*args, **kwargs)
    times = []
    result = None
    for _ in range(n_runs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        times.append(time.perf_counter() - start)
    return np.median(times) * 1000, np.mean(times) * 1000, result


def main():
    print("=" * 72)
    print("SWEEP CLASSIFICATION BENCHMARK")
    print("=" * 72)
    rng = np.random.default_rng(1)
    print(f"{'points':>10} {'edges':>8} {'sweep ms':>10} {'python ms':>10} {'brute ms':>10} {'agree':>6}")
    for n_points, n_edges in [(1000, 100), (10000, 1000), (100000, 1000), (100000, 10000)]:
        mesh = BoundaryMesh(make_polygon(n_edges))
        pts = rng.uniform(-1.1, 1.1, size=(n_points, 2))
        t_jit, _, res = benchmark_function(classify, pts, mesh)
        if n_points * n_edges <= 10 ** 7:
            t_py, _, _ = benchmark_function(classify, pts, mesh, config=ClassifyConfig(use_jit=False), n_runs=1)
            t_ref, _, ref = benchmark_function(reference_status, pts, mesh, res.tol, n_runs=1)
            agree = bool(np.array_equal(res.parity & ~res.on_boundary, ref[:, 0, :] & ~ref[:, 1, :]))
            print(f"{n_points:>10} {n_edges:>8} {t_jit:>10.2f} {t_py:>10.1f} {t_ref:>10.1f} {str(agree):>6}")
        else:
            print(f"{n_points:>10} {n_edges:>8} {t_jit:>10.2f} {'-':>10} {'-':>10} {'-':>6}")


if __name__ == "__main__":
    main()
