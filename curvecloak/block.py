"""Tile-based radial smoothing.

Each ``block_size`` x ``block_size`` tile (clipped at the image edge) is pulled
towards its own reference sample, the pixel at ``(tw // 2, th // 2)``, with a
weight that grows with the distance from the tile centre. The blend is lossy:
unlike the curve permutation it has no inverse.
"""

import math

import numpy as np

from ._parallel import resolve_workers, run_sliced
from ._validate import check_block_size, check_dimensions, check_strength
from .errors import BufferSizeMismatch


def tile_weights(tile_width: int, tile_height: int, strength: float) -> np.ndarray:
    """Per-pixel ``smoothFactor`` for one tile, shaped ``(th, tw, 1)``."""
    cx = tile_width / 2.0
    cy = tile_height / 2.0
    max_distance = math.hypot(cx, cy)
    dy, dx = np.mgrid[0:tile_height, 0:tile_width]
    distance = np.hypot(dx - cx, dy - cy)
    factor = 1.0 - (distance / max_distance) * strength
    return np.clip(factor, 0.0, 1.0)[..., None]


def _smooth_tile(tile: np.ndarray, weights: np.ndarray) -> None:
    th, tw = tile.shape[:2]
    # astype copies, so the reference survives the write below
    reference = tile[th // 2, tw // 2, :3].astype(np.float64)
    rgb = tile[..., :3].astype(np.float64)
    blended = rgb * weights + reference * (1.0 - weights)
    tile[..., :3] = np.clip(np.rint(blended), 0, 255).astype(np.uint8)


def block_smooth(
    pixels: np.ndarray,
    width: int,
    height: int,
    block_size: int,
    strength: float,
    *,
    workers: int | None = None
) -> np.ndarray:
    """Smooth ``pixels`` (an ``(height, width, 4)`` uint8 array) in place and return it.

    Alpha is left untouched. Tiles never overlap, so rows of tiles are handed
    to separate workers when the image is large enough.
    """
    width, height = check_dimensions(width, height)
    block_size = check_block_size(block_size)
    strength = check_strength(strength)
    if pixels.shape != (height, width, 4):
        raise BufferSizeMismatch(pixels.size, width * height * 4)
    if strength == 0:
        return pixels

    edge_w = width % block_size or block_size
    edge_h = height % block_size or block_size
    weights = {
        (tw, th): tile_weights(tw, th, strength)
        for tw in {block_size, edge_w}
        for th in {block_size, edge_h}
    }
    tile_rows = -(-height // block_size)

    def _smooth_rows(start: int, end: int) -> None:
        for row in range(start, end):
            y0 = row * block_size
            y1 = min(y0 + block_size, height)
            for x0 in range(0, width, block_size):
                x1 = min(x0 + block_size, width)
                _smooth_tile(pixels[y0:y1, x0:x1], weights[(x1 - x0, y1 - y0)])

    run_sliced(tile_rows, resolve_workers(width * height, workers), _smooth_rows)
    return pixels


__all__ = ["block_smooth", "tile_weights"]
