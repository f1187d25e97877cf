"""Point container for the query points.

Canonical format follows the rest of the package:
    coords: (M, 2) float64 array, read-only once loaded
"""
from __future__ import annotations

import numpy as np


class PointCloud:
    """Immutable batch of 2D query points referenced by index."""

    __slots__ = ('coords',)

    def __init__(self, points):
        if isinstance(points, PointCloud):
            points = points.coords
        arr = np.array(points, dtype=np.float64)
        if arr.ndim == 1 and arr.size == 2:
            arr = arr.reshape(1, 2)
        elif arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"points must be (M, 2), got shape {arr.shape}")
        if not np.all(np.isfinite(arr)):
            raise ValueError("points contain NaN or infinite coordinates")
        arr.setflags(write=False)
        self.coords = arr

    def __len__(self) -> int:
        return self.coords.shape[0]

    def __repr__(self) -> str:
        return f"PointCloud(n={len(self)})"

    def min(self) -> np.ndarray:
        return self.coords.min(axis=0)

    def max(self) -> np.ndarray:
        return self.coords.max(axis=0)

    def extent(self) -> np.ndarray:
        """Per-axis span (x, y); zeros for an empty cloud."""
        if len(self) == 0:
            return np.zeros(2, dtype=np.float64)
        return self.max() - self.min()

    def sort_permutation(self, axis: int) -> np.ndarray:
        """Indices ordering the points by non-decreasing coordinate ``axis``."""
        return np.argsort(self.coords[:, axis], kind='stable').astype(np.int64)


__all__ = ['PointCloud']
