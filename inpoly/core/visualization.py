"""Plotting helper for classification results."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .encoding import Classification
from .logging_utils import get_logger
from .mesh import BoundaryMesh

logger = get_logger('inpoly.viz')

_COLORS = {
    'inside': (0.15, 0.55, 0.25),
    'on': (0.85, 0.2, 0.2),
    'outside': (0.6, 0.6, 0.6),
}


def plot_classification(points, mesh: BoundaryMesh, result: Classification,
                        outname="classification.png", area: int = 1,
                        show_all_edges: bool = True) -> str:
    """Scatter the points coloured by status for one area over the boundary edges.

    Args:
        points: (M, 2) query points (same order as ``result``)
        mesh: boundary mesh the points were classified against
        result: Classification returned by ``classify``
        outname: output image path
        area: 1-based area whose status is shown
        show_all_edges: draw edges of the other areas in light grey
    Returns:
        the output path
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    segs = mesh.segments()
    own = mesh.area_edges(area)

    fig, ax = plt.subplots(figsize=(6, 6))
    if show_all_edges and segs.shape[0]:
        other = np.setdiff1d(np.arange(segs.shape[0]), own)
        for s in segs[other]:
            ax.plot(s[:, 0], s[:, 1], color=(0.8, 0.8, 0.8), linewidth=1.0)
    for s in segs[own]:
        ax.plot(s[:, 0], s[:, 1], color='black', linewidth=1.5)

    s = max(0.6, min(12.0, 200.0 / float(max(1, pts.shape[0]))))
    masks = {
        'inside': result.inside[:, area - 1],
        'on': result.on_boundary[:, area - 1],
        'outside': result.outside[:, area - 1],
    }
    for label, mask in masks.items():
        if np.any(mask):
            ax.scatter(pts[mask, 0], pts[mask, 1], s=s, color=_COLORS[label], label=f"{label} ({int(mask.sum())})")
    if pts.shape[0]:
        ax.legend(loc='upper right', fontsize='small')
    ax.set_title(f"area {area}: tol={result.tol:.2e}")
    ax.set_aspect('equal')
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.debug("saved plot %s", outname)
    return str(outname)


__all__ = ['plot_classification']
