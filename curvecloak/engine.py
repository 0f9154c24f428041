"""Curve-based pixel permutation and the mode-routing entry point."""

import enum
import math

import numpy as np

from . import config
from ._parallel import resolve_workers, run_sliced
from ._validate import check_block_size, check_dimensions, check_strength
from .block import block_smooth
from .console import log_plan
from .curve import curve_indices
from .errors import BufferSizeMismatch, InvalidDimensions, ParameterOutOfRange

PHI = (math.sqrt(5) - 1) / 2
CHANNELS = 4


class Mode(enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    BLOCK_SMOOTH = "smooth"


def golden_offset(width: int, height: int, strength: float = 1.0) -> int:
    """Cyclic shift along the curve: ``round(PHI * N * strength) mod N``.

    Rounds half up so the value matches a browser's ``Math.round``.
    """
    total = width * height
    if total <= 0:
        raise InvalidDimensions(width, height)
    return int(math.floor(PHI * total * strength + 0.5)) % total


def _check_mode(mode) -> Mode:
    if isinstance(mode, Mode):
        return mode
    try:
        return Mode(str(mode).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        raise ParameterOutOfRange("mode", mode, f"expected one of {choices}") from None


def _pixel_rows(pixels, width: int, height: int) -> np.ndarray:
    """View ``pixels`` as ``(N, 4)`` uint8 rows without copying where possible."""
    if isinstance(pixels, np.ndarray):
        if pixels.dtype != np.uint8:
            raise ParameterOutOfRange("pixels", str(pixels.dtype), "expected uint8 samples")
        flat = pixels
    else:
        try:
            flat = np.frombuffer(pixels, dtype=np.uint8)
        except TypeError:
            raise ParameterOutOfRange(
                "pixels", type(pixels).__name__, "expected a bytes-like object or uint8 array"
            ) from None
    expected = width * height * CHANNELS
    if flat.size != expected:
        raise BufferSizeMismatch(flat.size, expected)
    return flat.reshape(width * height, CHANNELS)


def _like_input(rows: np.ndarray, pixels):
    if isinstance(pixels, np.ndarray):
        return rows.reshape(pixels.shape)
    return rows.tobytes()


def _permute_rows(
    src: np.ndarray,
    width: int,
    height: int,
    mode: Mode,
    strength: float,
    workers: int
) -> np.ndarray:
    total = width * height
    curve = curve_indices(width, height)
    offset = golden_offset(width, height, strength)
    out = np.empty_like(src)
    if offset == 0:
        out[...] = src
        return out
    # shifted[i] == curve[(i + offset) % total]
    shifted = np.roll(curve, -offset)
    if mode is Mode.ENCRYPT:
        dst_idx, src_idx = shifted, curve
    else:
        dst_idx, src_idx = curve, shifted

    def _scatter(start: int, end: int) -> None:
        out[dst_idx[start:end]] = src[src_idx[start:end]]

    run_sliced(total, workers, _scatter)
    return out


def permute(pixels, width: int, height: int, mode, strength: float = 1.0, *, workers: int | None = None):
    """Encrypt or decrypt ``pixels`` by shifting them along the gilbert curve.

    Decrypting needs the same ``strength`` that was used to encrypt; the two
    directions are exact inverses for every size and strength.
    """
    width, height = check_dimensions(width, height)
    mode = _check_mode(mode)
    if mode is Mode.BLOCK_SMOOTH:
        raise ParameterOutOfRange("mode", mode.value, "permutation supports encrypt and decrypt only")
    strength = check_strength(strength)
    rows = _pixel_rows(pixels, width, height)
    total = width * height
    n_workers = resolve_workers(total, workers)
    log_plan(mode.value, {
        "size": f"{width}x{height}",
        "offset": golden_offset(width, height, strength),
        "workers": n_workers,
    })
    out = _permute_rows(rows, width, height, mode, strength, n_workers)
    return _like_input(out, pixels)


def smooth(pixels, width: int, height: int, block_size: int = 16, strength: float = 0.5, *, workers: int | None = None):
    """Return a block-smoothed copy of ``pixels``; the input is left untouched."""
    width, height = check_dimensions(width, height)
    block_size = check_block_size(block_size)
    strength = check_strength(strength)
    rows = _pixel_rows(pixels, width, height)
    n_workers = resolve_workers(width * height, workers)
    log_plan(Mode.BLOCK_SMOOTH.value, {
        "size": f"{width}x{height}",
        "block": block_size,
        "workers": n_workers,
    })
    grid = rows.reshape(height, width, CHANNELS).copy()
    block_smooth(grid, width, height, block_size, strength, workers=n_workers)
    return _like_input(grid.reshape(-1, CHANNELS), pixels)


def transform(
    pixels,
    width: int,
    height: int,
    mode,
    strength: float = 1.0,
    block_size: int = 1,
    *,
    threshold: int | None = None,
    workers: int | None = None
):
    """Route a request to the curve permutation or the block transform.

    Block sizes below ``threshold`` (``CURVECLOAK_BLOCK_THRESHOLD``, default 8)
    use the permutation; larger ones use block smoothing, which cannot be
    decrypted. All inputs are checked before any output is produced.
    """
    width, height = check_dimensions(width, height)
    mode = _check_mode(mode)
    strength = check_strength(strength)
    block_size = check_block_size(block_size)
    if threshold is None:
        threshold = config.block_threshold()
    threshold = check_block_size(threshold, "threshold")
    _pixel_rows(pixels, width, height)

    if mode is Mode.BLOCK_SMOOTH or block_size >= threshold:
        if mode is Mode.DECRYPT:
            raise ParameterOutOfRange(
                "block_size",
                block_size,
                f"block smoothing (block size >= {threshold}) has no inverse",
            )
        return smooth(pixels, width, height, block_size, strength, workers=workers)
    return permute(pixels, width, height, mode, strength, workers=workers)


def encrypt(pixels, width: int, height: int, strength: float = 1.0, block_size: int = 1, **kwargs):
    return transform(pixels, width, height, Mode.ENCRYPT, strength, block_size, **kwargs)


def decrypt(pixels, width: int, height: int, strength: float = 1.0, block_size: int = 1, **kwargs):
    return transform(pixels, width, height, Mode.DECRYPT, strength, block_size, **kwargs)


__all__ = [
    "CHANNELS",
    "Mode",
    "PHI",
    "decrypt",
    "encrypt",
    "golden_offset",
    "permute",
    "smooth",
    "transform",
]
