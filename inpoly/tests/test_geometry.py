"""Tests for tolerance resolution and sweep-axis selection."""
import math

import numpy as np
import pytest

from inpoly.core.constants import RTOL_DEFAULT
from inpoly.core.errors import DegenerateToleranceError
from inpoly.core.geometry import bounding_box, check_tolerances, resolve_tolerance, select_axis


class TestResolveTolerance:

    def test_relative_dominates(self):
        # span = (4 + 2) / 2 = 3
        tol = resolve_tolerance([0.0, 0.0], [4.0, 2.0], atol=0.0, rtol=0.1)
        assert tol == pytest.approx(0.3)

    def test_absolute_dominates(self):
        tol = resolve_tolerance([0.0, 0.0], [4.0, 2.0], atol=1.0, rtol=0.1)
        assert tol == 1.0

    def test_zero_span_gives_atol(self):
        tol = resolve_tolerance([0.5, 0.5], [0.5, 0.5], atol=0.25, rtol=0.1)
        assert tol == 0.25

    def test_default_rtol(self):
        tol = resolve_tolerance([0.0, 0.0], [2.0, 2.0])
        assert tol == pytest.approx(2.0 * RTOL_DEFAULT)
        assert RTOL_DEFAULT == pytest.approx(np.finfo(float).eps ** 0.85)

    @pytest.mark.parametrize('atol,rtol', [(-1.0, 0.0), (0.0, -1e-3), (math.nan, 0.0),
                                           (0.0, math.inf), ('abc', 0.0)])
    def test_invalid_tolerances_rejected(self, atol, rtol):
        with pytest.raises(DegenerateToleranceError):
            resolve_tolerance([0.0, 0.0], [1.0, 1.0], atol=atol, rtol=rtol)

    def test_degenerate_tolerance_is_value_error(self):
        with pytest.raises(ValueError):
            check_tolerances(-1.0, None)

    def test_check_tolerances_normalises(self):
        assert check_tolerances(0, None) == (0.0, RTOL_DEFAULT)


class TestSelectAxis:

    def test_wide_cloud_sweeps_x(self):
        axis = select_axis([10.0, 1.0])
        assert axis.flip is True
        assert (axis.primary, axis.secondary) == (0, 1)

    def test_tall_cloud_sweeps_y(self):
        axis = select_axis([1.0, 10.0])
        assert axis.flip is False
        assert (axis.primary, axis.secondary) == (1, 0)

    def test_tie_keeps_y(self):
        assert select_axis([2.0, 2.0]).primary == 1


def test_bounding_box():
    lo, hi = bounding_box([[1.0, 5.0], [-2.0, 3.0], [0.0, 7.0]])
    assert lo.tolist() == [-2.0, 3.0]
    assert hi.tolist() == [1.0, 7.0]
    lo, hi = bounding_box(np.zeros((0, 2)))
    assert lo.tolist() == [0.0, 0.0] and hi.tolist() == [0.0, 0.0]
