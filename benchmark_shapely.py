#!/usr/bin/env python3
"""
Envelope benchmark: flatland vs Shapely.
Computes the envelope of a large ring and filters its points by a window.

This is a straightforward comparison against typical
"reach for Shapely" code. Not heavily optimized.

Usage:
    python benchmark_shapely.py [num_points]
    python benchmark_shapely.py 200000
"""

import time
import math
import sys

try:
    from shapely.geometry import LinearRing, MultiPoint, box
    import numpy as np
except ImportError as e:
    print(f"Missing dependency: {e}")
    print("Install with: pip install shapely numpy")
    sys.exit(1)

from flatland.geometry import Envelope, Point, envelope_of, filter_by_envelope


def make_ring(num_points: int, seed: int = 42) -> list[Point]:
    """Build a closed, noisy circle of num_points points."""
    rng = np.random.default_rng(seed)
    angles = np.linspace(0.0, 2 * math.pi, num_points - 1, endpoint=False)
    radii = 100.0 + rng.normal(0.0, 5.0, size=angles.shape)
    pts = [Point(float(r * math.cos(a)), float(r * math.sin(a)))
           for a, r in zip(angles, radii)]
    pts.append(pts[0].clone())
    return pts


def benchmark(num_points: int = 100_000):
    """Run the full benchmark."""
    print(f"Building ring of {num_points} points")
    pts = make_ring(num_points)
    window = Envelope(-50.0, 120.0, -10.0, 10.0)

    start = time.perf_counter()
    env = envelope_of(pts)
    kept = filter_by_envelope(pts, window)
    flatland_time = time.perf_counter() - start

    coords = [(p.x, p.y) for p in pts]
    start = time.perf_counter()
    ring = LinearRing(coords)
    bounds = ring.bounds
    window_box = box(*window.bounds)
    shapely_kept = [c for c in MultiPoint(coords).geoms if window_box.covers(c)]
    shapely_time = time.perf_counter() - start

    print()
    print("=" * 50)
    print("RESULTS")
    print("=" * 50)
    print(f"Envelope:          {env}")
    print(f"Shapely bounds:    {bounds}")
    print(f"Points kept:       {len(kept)} (shapely: {len(shapely_kept)})")
    print(f"flatland time:     {flatland_time*1000:.1f}ms")
    print(f"Shapely time:      {shapely_time*1000:.1f}ms")
    print("=" * 50)

    return flatland_time, shapely_time


if __name__ == "__main__":
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 100_000
    benchmark(n)
