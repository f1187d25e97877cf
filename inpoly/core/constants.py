"""Central numerical tolerances and status-array layout constants.

This module centralizes the default tolerances and the small integer codes
used by the sweep kernel so they are referenced without scattering literals.
"""
from __future__ import annotations

import numpy as np

# Tolerances
EPS_FLOAT: float = float(np.finfo(np.float64).eps)
RTOL_DEFAULT: float = EPS_FLOAT ** 0.85   # relative boundary tolerance (times point-cloud span)
ATOL_DEFAULT: float = 0.0                 # absolute boundary tolerance

# Status array slots: stat[point, slot, area]
STATUS_INSIDE: int = 0      # crossing-number parity
STATUS_BOUNDARY: int = 1    # within tolerance of an edge
STATUS_SLOTS: int = 2

# Mutation kinds understood by the area propagator
FLIP_PARITY: int = STATUS_INSIDE
SET_BOUNDARY: int = STATUS_BOUNDARY

# Area table padding (0-based internal ids; the public tables are 1-based with 0 padding)
NO_AREA: int = -1

__all__ = [
    'EPS_FLOAT',
    'RTOL_DEFAULT',
    'ATOL_DEFAULT',
    'STATUS_INSIDE',
    'STATUS_BOUNDARY',
    'STATUS_SLOTS',
    'FLIP_PARITY',
    'SET_BOUNDARY',
    'NO_AREA',
]
