"""Output encoding of the raw status array.

The sweep produces two bits per point and area (parity, on-boundary). This
module turns them into what callers want: the raw bits, a three-valued
in/on/out code, or a pair of boolean masks. Boundary always takes
precedence: a point on the boundary is neither inside nor outside.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Tuple, Union

import numpy as np

from .constants import STATUS_BOUNDARY, STATUS_INSIDE
from .geometry import AxisChoice

OUTFORMATS = ('bits', 'inonout', 'masks')


@dataclass(frozen=True)
class InOnOut:
    """Code values for the three-valued encoding (defaults 1 / 0 / -1)."""
    inside: int = 1
    on: int = 0
    outside: int = -1


class PointStatus(NamedTuple):
    inside: bool
    on_boundary: bool


def _check_stat(stat) -> np.ndarray:
    stat = np.asarray(stat)
    if stat.ndim == 2:
        stat = stat[:, :, None]
    if stat.ndim != 3 or stat.shape[1] != 2:
        raise ValueError(f"status array must be (M, 2, A), got shape {stat.shape}")
    return stat.astype(bool, copy=False)


def to_in_on_out(stat, values: InOnOut = InOnOut()) -> np.ndarray:
    """(M, A) integer codes; boundary wins over parity."""
    stat = _check_stat(stat)
    out = np.where(stat[:, STATUS_INSIDE, :], values.inside, values.outside)
    out[stat[:, STATUS_BOUNDARY, :]] = values.on
    return out


def to_masks(stat) -> Tuple[np.ndarray, np.ndarray]:
    """(inside, on_boundary) boolean masks of shape (M, A)."""
    stat = _check_stat(stat)
    on = stat[:, STATUS_BOUNDARY, :].copy()
    inside = stat[:, STATUS_INSIDE, :] & ~on
    return inside, on


def encode_status(stat, outformat: str = 'bits', values: InOnOut = InOnOut()
                  ) -> Union[np.ndarray, Tuple[np.ndarray, np.ndarray]]:
    """Encode a raw status array as ``'bits'``, ``'inonout'`` or ``'masks'``."""
    if outformat == 'bits':
        return _check_stat(stat)
    if outformat == 'inonout':
        return to_in_on_out(stat, values)
    if outformat == 'masks':
        return to_masks(stat)
    raise ValueError(f"unknown outformat {outformat!r}; expected one of {OUTFORMATS}")


@dataclass(frozen=True)
class Classification:
    """Result of one classification call.

    Attributes
    ----------
    stat : (M, 2, A) bool ndarray
        Raw status; slot 0 is the crossing parity, slot 1 the boundary flag.
    tol : float
        Effective boundary tolerance used by the sweep.
    axis : AxisChoice
        Sweep axis chosen for the point cloud.
    """
    stat: np.ndarray
    tol: float = 0.0
    axis: AxisChoice = field(default_factory=lambda: AxisChoice(False, 1, 0))

    @property
    def n_points(self) -> int:
        return self.stat.shape[0]

    @property
    def n_areas(self) -> int:
        return self.stat.shape[2]

    @property
    def parity(self) -> np.ndarray:
        return self.stat[:, STATUS_INSIDE, :]

    @property
    def on_boundary(self) -> np.ndarray:
        return self.stat[:, STATUS_BOUNDARY, :]

    @property
    def inside(self) -> np.ndarray:
        return self.parity & ~self.on_boundary

    @property
    def outside(self) -> np.ndarray:
        return ~self.parity & ~self.on_boundary

    def record(self, point: int, area: int = 1) -> PointStatus:
        """Status of one point for a 1-based area."""
        if not 1 <= area <= self.n_areas:
            raise IndexError(f"area {area} outside [1, {self.n_areas}]")
        on = bool(self.stat[point, STATUS_BOUNDARY, area - 1])
        inside = bool(self.stat[point, STATUS_INSIDE, area - 1]) and not on
        return PointStatus(inside, on)

    def to_in_on_out(self, values: InOnOut = InOnOut()) -> np.ndarray:
        return to_in_on_out(self.stat, values)

    def encode(self, outformat: str = 'bits', values: InOnOut = InOnOut()):
        return encode_status(self.stat, outformat, values)

    def counts(self):
        """Per-area (inside, on, outside) counts."""
        return [
            (int(self.inside[:, a].sum()), int(self.on_boundary[:, a].sum()), int(self.outside[:, a].sum()))
            for a in range(self.n_areas)
        ]


__all__ = ['InOnOut', 'PointStatus', 'Classification', 'encode_status', 'to_in_on_out', 'to_masks', 'OUTFORMATS']
