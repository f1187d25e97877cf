"""Configuration objects for point classification."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import ATOL_DEFAULT, RTOL_DEFAULT
from .encoding import InOnOut


@dataclass
class ClassifyConfig:
    """Options for :func:`inpoly.classify` and the command-line driver.

    Attributes
    ----------
    atol : float
        Absolute boundary tolerance.
    rtol : float or None
        Relative boundary tolerance, multiplied by the point-cloud span.
        None selects ``RTOL_DEFAULT``.
    use_jit : bool
        Run the numba-compiled sweep kernel (False runs the Python source).
    values : InOnOut
        Codes written by drivers (three-valued encoding).
    """
    atol: float = ATOL_DEFAULT
    rtol: Optional[float] = None
    use_jit: bool = True
    values: InOnOut = field(default_factory=InOnOut)

    def effective_rtol(self) -> float:
        return RTOL_DEFAULT if self.rtol is None else self.rtol

    def validate(self) -> List[str]:
        """Return a list of error messages (empty if valid)."""
        errors = []
        for name, value in (('atol', self.atol), ('rtol', self.effective_rtol())):
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
                errors.append(f"{name} must be a non-negative finite number, got {value!r}")
        return errors


__all__ = ['ClassifyConfig']
