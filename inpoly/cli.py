#!/usr/bin/env python3
"""Classify a point file against a polygon boundary file.

Examples:
  inpoly --points pts.csv --boundary square.txt
  inpoly --points pts.npy --boundary domain.msh --atol 1e-3 --out status.csv
  inpoly --points pts.csv --boundary rings.npz --plot classification.png --log-level DEBUG
"""
from __future__ import annotations

import argparse
import time
from typing import List, Optional

from .core.classify import classify
from .core.config import ClassifyConfig
from .core.errors import InpolyError
from .core.io import load_boundary, load_points, save_classification
from .core.logging_utils import configure_logging, get_logger

log = get_logger('inpoly.cli')


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='inpoly', description='Sweep-based point-in-polygon classification')
    p.add_argument('--points', required=True, help='Query points (.npy, .npz, .csv, .txt)')
    p.add_argument('--boundary', required=True, help='Boundary (.msh, .npz with vertices/edges/areas, or a text vertex loop)')
    p.add_argument('--atol', type=float, default=0.0, help='Absolute boundary tolerance (default: 0)')
    p.add_argument('--rtol', type=float, default=None, help='Relative boundary tolerance (default: RTOL_DEFAULT)')
    p.add_argument('--out', default=None, help='Write the result (.csv, .npz or .vtk)')
    p.add_argument('--plot', default=None, help='Save a PNG of the classification for area 1')
    p.add_argument('--no-jit', action='store_true', help='Run the uncompiled sweep kernel')
    p.add_argument('--log-level', default='INFO', help='Logging level (default: INFO)')
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    cfg = ClassifyConfig(atol=args.atol, rtol=args.rtol, use_jit=not args.no_jit)
    errors = cfg.validate()
    if errors:
        for e in errors:
            log.error(e)
        return 2

    try:
        points = load_points(args.points)
        mesh = load_boundary(args.boundary)
        t0 = time.perf_counter()
        result = classify(points, mesh, config=cfg)
        elapsed = time.perf_counter() - t0
    except (InpolyError, ValueError, OSError) as exc:
        log.error("%s", exc)
        return 2

    log.info("classified %d points against %d edges in %.3fs (tol=%.3e)",
             len(points), len(mesh), elapsed, result.tol)
    for a, (n_in, n_on, n_out) in enumerate(result.counts(), start=1):
        log.info("area %d: inside=%d on=%d outside=%d", a, n_in, n_on, n_out)

    if args.out:
        try:
            save_classification(args.out, points, result, cfg.values)
        except (ValueError, OSError) as exc:
            log.error("could not write %s: %s", args.out, exc)
            return 2
        log.info("wrote %s", args.out)
    if args.plot:
        from .core.visualization import plot_classification
        plot_classification(points, mesh, result, outname=args.plot)
        log.info("wrote %s", args.plot)
    return 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
