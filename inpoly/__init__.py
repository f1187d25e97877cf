"""Public package API for inpoly, sweep-based point-in-polygon classification.

This facade provides a stable, flatter import surface on top of the
internal implementation package ``inpoly.core`` while deferring the
matplotlib-backed plotting module until first use to keep ``import inpoly``
fast.

Example
-------
    from inpoly import classify
    res = classify(points, vertices, atol=1e-3)
    res.inside, res.on_boundary

The deeper modules (``inpoly.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
try:
    __version__ = _pkg_version("inpoly-sweep")
except _NotFound:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('inpoly.core.constants')
_errors = _imp('inpoly.core.errors')
_geom = _imp('inpoly.core.geometry')
_points = _imp('inpoly.core.points')
_mesh = _imp('inpoly.core.mesh')
_sweep = _imp('inpoly.core.sweep')
_enc = _imp('inpoly.core.encoding')
_config = _imp('inpoly.core.config')
_classify = _imp('inpoly.core.classify')
_io = _imp('inpoly.core.io')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


visualization = _lazy_module('inpoly.core.visualization')

# Entry point and data model
classify = _classify.classify
PointCloud = _points.PointCloud
BoundaryMesh = _mesh.BoundaryMesh
ClassifyConfig = _config.ClassifyConfig

# Output encoding
Classification = _enc.Classification
InOnOut = _enc.InOnOut
encode_status = _enc.encode_status

# Errors
InpolyError = _errors.InpolyError
InvalidIndexError = _errors.InvalidIndexError
InvalidAreaError = _errors.InvalidAreaError
DegenerateToleranceError = _errors.DegenerateToleranceError

# Tolerances
RTOL_DEFAULT = _const.RTOL_DEFAULT

# I/O functions
read_boundary_msh = _io.read_boundary_msh
load_points = _io.load_points
load_boundary = _io.load_boundary
save_classification = _io.save_classification

# Namespace submodules
constants = _const
geometry = _geom
sweep = _sweep
encoding = _enc
io = _io

__all__ = [
    '__version__',
    # entry point / data model
    'classify', 'PointCloud', 'BoundaryMesh', 'ClassifyConfig',
    # encoding
    'Classification', 'InOnOut', 'encode_status',
    # errors
    'InpolyError', 'InvalidIndexError', 'InvalidAreaError', 'DegenerateToleranceError',
    # tolerances
    'RTOL_DEFAULT',
    # I/O
    'read_boundary_msh', 'load_points', 'load_boundary', 'save_classification',
    # submodules / namespaces
    'constants', 'geometry', 'sweep', 'encoding', 'io', 'visualization',
]
