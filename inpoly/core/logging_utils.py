"""Logging utilities for inpoly.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All inpoly code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT = 'inpoly'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_inpoly_root() -> logging.Logger:
    """Ensure the 'inpoly' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'inpoly' logger.
    """
    root = logging.getLogger(_ROOT)
    # Only NullHandlers (added by the package __init__) -> swap in a stdout handler
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    if not has_non_null:
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    lvl = getattr(logging, str(level).upper(), None)
    return lvl if isinstance(lvl, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'inpoly' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    root = _ensure_inpoly_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        # numba's compiler and matplotlib are very chatty at DEBUG
        for noisy in ('numba', 'matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'inpoly' namespace.

    Without an explicit level the logger is left at NOTSET so it inherits
    whatever configure_logging() set on the 'inpoly' parent. Handlers are
    only attached by configure_logging(); library use stays silent.
    """
    if name != _ROOT and not name.startswith(_ROOT + '.'):
        name = f'{_ROOT}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
