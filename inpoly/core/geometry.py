"""Tolerance resolution and sweep-axis selection.

Both run once per call, before the sweep, on the bounding box of the query
points.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .constants import RTOL_DEFAULT
from .errors import DegenerateToleranceError

__all__ = [
    'AxisChoice', 'bounding_box', 'check_tolerances', 'resolve_tolerance', 'select_axis',
]


@dataclass(frozen=True)
class AxisChoice:
    """Which coordinate is swept (sorted, binary-searched) and which is tested.

    ``flip`` is True when the x-extent exceeds the y-extent; the primary axis
    is then x instead of the default y.
    """
    flip: bool
    primary: int
    secondary: int


def bounding_box(coords) -> Tuple[np.ndarray, np.ndarray]:
    """Return (lower, upper) corners of an (M, 2) array; zeros when empty."""
    pts = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
    if pts.shape[0] == 0:
        return np.zeros(2), np.zeros(2)
    return pts.min(axis=0), pts.max(axis=0)


def check_tolerances(atol: float, rtol: Optional[float]) -> Tuple[float, float]:
    """Validate and normalise (atol, rtol); ``rtol=None`` selects RTOL_DEFAULT."""
    rtol = RTOL_DEFAULT if rtol is None else rtol
    for name, value in (('atol', atol), ('rtol', rtol)):
        try:
            v = float(value)
        except (TypeError, ValueError):
            raise DegenerateToleranceError(f"{name} must be a number, got {value!r}") from None
        if not math.isfinite(v) or v < 0.0:
            raise DegenerateToleranceError(f"{name} must be a non-negative finite number, got {value!r}")
    return float(atol), float(rtol)


def resolve_tolerance(lower, upper, atol: float = 0.0, rtol: Optional[float] = None) -> float:
    """Effective boundary distance ``max(|rtol * span|, |atol|)``.

    ``span`` is the mean of the x and y extents of the box ``lower``-``upper``,
    so a degenerate box (all points coincide) yields ``atol``.
    """
    atol, rtol = check_tolerances(atol, rtol)
    lower = np.asarray(lower, dtype=np.float64)
    upper = np.asarray(upper, dtype=np.float64)
    span = float(np.sum(upper - lower)) / 2.0
    return max(abs(rtol * span), abs(atol))


def select_axis(extent) -> AxisChoice:
    """Sweep along the axis of greater spread (ties keep y)."""
    ext = np.asarray(extent, dtype=np.float64)
    flip = bool(ext[0] > ext[1])
    if flip:
        return AxisChoice(flip=True, primary=0, secondary=1)
    return AxisChoice(flip=False, primary=1, secondary=0)
