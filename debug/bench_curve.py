#!/usr/bin/env python3
"""Quick curve/permutation benchmark - direct timing only"""
import sys
import time
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import numpy as np

import curvecloak


SIZES = [(640, 480), (1920, 1080), (1001, 999)]


def bench_size(width: int, height: int, workers: int | None):
    rng = np.random.default_rng(0)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)

    curvecloak.clear_curve_cache()
    start = time.perf_counter()
    curvecloak.curve_indices(width, height)
    curve_time = time.perf_counter() - start

    start = time.perf_counter()
    scrambled = curvecloak.engine.permute(pixels, width, height, "encrypt", workers=workers)
    restored = curvecloak.engine.permute(scrambled, width, height, "decrypt", workers=workers)
    permute_time = time.perf_counter() - start
    return curve_time, permute_time, np.array_equal(restored, pixels)


def main():
    workers = int(sys.argv[1]) if len(sys.argv) > 1 else None
    print(f"Benchmarking gilbert curve + permutation (workers={workers or 'auto'})...\n")
    for width, height in SIZES:
        curve_time, permute_time, ok = bench_size(width, height, workers)
        print(f"{width}x{height}")
        print(f"  Curve:       {curve_time:.3f}s")
        print(f"  Round trip:  {permute_time:.3f}s  {'exact' if ok else 'MISMATCH'}")

    print("\n✅ Python benchmark complete")


if __name__ == '__main__':
    main()
