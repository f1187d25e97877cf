"""Input-validation errors raised before the sweep starts.

All errors derive from ``ValueError`` so callers that already guard array
inputs with ``except ValueError`` keep working.
"""
from __future__ import annotations


class InpolyError(ValueError):
    """Base class for invalid classification inputs."""


class InvalidIndexError(InpolyError):
    """An edge references a vertex outside the vertex table."""


class InvalidAreaError(InpolyError):
    """An area id falls outside ``[1, area_count]``."""


class DegenerateToleranceError(InpolyError):
    """A tolerance is negative, NaN or infinite."""


__all__ = ['InpolyError', 'InvalidIndexError', 'InvalidAreaError', 'DegenerateToleranceError']
