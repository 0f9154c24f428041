"""Generalized Hilbert ("gilbert") traversal of arbitrary W x H grids.

The curve visits every cell of the rectangle exactly once and, apart from the
parity-forced case described below, only ever steps to a 4-neighbour. It is
built by recursively splitting the rectangle, described by an origin and two
axis vectors ``a`` (major) and ``b`` (minor), until a sub-rectangle is a single
row or column.

A unit-step path from one corner to the adjacent corner cannot exist when the
longer side is odd and the shorter side even; there the curve contains exactly
one diagonal step.
"""

import threading
from collections import OrderedDict

import numpy as np

from . import config


Cell = tuple[int, int]

_curve_cache: "OrderedDict[tuple[int, int], np.ndarray]" = OrderedDict()
_curve_lock = threading.Lock()


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _walk(width: int, height: int, xs: list, ys: list) -> None:
    # Work items are (x, y, ax, ay, bx, by); children are pushed in reverse so
    # they pop in traversal order.
    if width >= height:
        stack = [(0, 0, width, 0, 0, height)]
    else:
        stack = [(0, 0, 0, height, width, 0)]

    while stack:
        x, y, ax, ay, bx, by = stack.pop()
        w = abs(ax + ay)
        h = abs(bx + by)
        dax, day = _sign(ax), _sign(ay)
        dbx, dby = _sign(bx), _sign(by)

        if h == 1:
            # row fill
            _emit(x, y, dax, day, w, xs, ys)
            continue
        if w == 1:
            # column fill
            _emit(x, y, dbx, dby, h, xs, ys)
            continue

        ax2, ay2 = ax // 2, ay // 2
        bx2, by2 = bx // 2, by // 2
        w2 = abs(ax2 + ay2)
        h2 = abs(bx2 + by2)

        if 2 * w > 3 * h:
            if w2 % 2 and w > 2:
                # prefer even steps
                ax2 += dax
                ay2 += day
            # long case: two halves along a
            stack.append((x + ax2, y + ay2, ax - ax2, ay - ay2, bx, by))
            stack.append((x, y, ax2, ay2, bx, by))
        else:
            if h2 % 2 and h > 2:
                bx2 += dbx
                by2 += dby
            # standard case: up, across, down
            stack.append((
                x + (ax - dax) + (bx2 - dbx),
                y + (ay - day) + (by2 - dby),
                -bx2, -by2,
                -(ax - ax2), -(ay - ay2),
            ))
            stack.append((x + bx2, y + by2, ax, ay, bx - bx2, by - by2))
            stack.append((x, y, bx2, by2, ax2, ay2))


def _emit(x: int, y: int, dx: int, dy: int, count: int, xs: list, ys: list) -> None:
    if dx:
        xs.extend(range(x, x + dx * count, dx))
    else:
        xs.extend([x] * count)
    if dy:
        ys.extend(range(y, y + dy * count, dy))
    else:
        ys.extend([y] * count)


def gilbert2d(width: int, height: int) -> list[Cell]:
    """Return the traversal order of a ``width`` x ``height`` grid as (x, y) cells.

    A non-positive side yields an empty curve rather than an error, since a
    zero-area image is a valid degenerate input.
    """
    if width <= 0 or height <= 0:
        return []
    xs: list[int] = []
    ys: list[int] = []
    _walk(width, height, xs, ys)
    return list(zip(xs, ys))


def _build_indices(width: int, height: int) -> np.ndarray:
    xs: list[int] = []
    ys: list[int] = []
    _walk(width, height, xs, ys)
    flat = np.asarray(xs, dtype=np.int64) + np.asarray(ys, dtype=np.int64) * width
    flat.setflags(write=False)
    return flat


def curve_indices(width: int, height: int) -> np.ndarray:
    """Row-major pixel indices (``x + y * width``) in curve order.

    Results are cached per size and returned read-only, so one array can be
    shared between worker threads.
    """
    if width <= 0 or height <= 0:
        empty = np.empty(0, dtype=np.int64)
        empty.setflags(write=False)
        return empty
    key = (width, height)
    with _curve_lock:
        cached = _curve_cache.get(key)
        if cached is not None:
            _curve_cache.move_to_end(key)
            return cached
    # built outside the lock; a racing builder produces an identical array
    built = _build_indices(width, height)
    with _curve_lock:
        cached = _curve_cache.get(key)
        if cached is not None:
            _curve_cache.move_to_end(key)
            return cached
        _curve_cache[key] = built
        limit = config.curve_cache_size()
        while len(_curve_cache) > limit:
            _curve_cache.popitem(last=False)
    return built


def clear_curve_cache() -> None:
    with _curve_lock:
        _curve_cache.clear()


__all__ = ["Cell", "clear_curve_cache", "curve_indices", "gilbert2d"]
