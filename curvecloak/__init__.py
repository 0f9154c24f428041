"""
CURVECLOAK - reversible pixel scrambling along a gilbert space-filling curve

Pixels are shifted along a generalized Hilbert curve by a golden-ratio offset,
so an image can be scrambled and restored exactly with the same strength.
This is visual obfuscation, not encryption in the cryptographic sense.
"""

from .block import block_smooth
from .curve import clear_curve_cache, curve_indices, gilbert2d
from .engine import Mode, golden_offset, permute, transform
from .errors import BufferSizeMismatch, CurveCloakError, InvalidDimensions, ParameterOutOfRange
from .version import __version__
from . import api_media, engine

# ============================================================================
# PIXEL BUFFER FUNCTIONS (RGBA bytes or uint8 array -> same kind)
# ============================================================================

def encrypt(pixels, width: int, height: int, strength: float = 1.0, block_size: int = 1):
    """
    Scramble an RGBA pixel buffer along the gilbert curve.

    Args:
        pixels: 4 * width * height samples (bytes-like or uint8 array)
        width: Image width in pixels
        height: Image height in pixels
        strength: Offset strength in [0, 1]
        block_size: Values at or above CURVECLOAK_BLOCK_THRESHOLD (8)
            switch to lossy block smoothing

    Returns:
        New buffer of the same kind and length; the input is not modified

    Note:
        - Reversible with decrypt() using the same strength
    """
    return engine.encrypt(pixels, width, height, strength, block_size)


def decrypt(pixels, width: int, height: int, strength: float = 1.0):
    """
    Restore a buffer produced by encrypt().

    Raises:
        ParameterOutOfRange: If strength is outside [0, 1]
        BufferSizeMismatch: If the buffer is not 4 * width * height long
    """
    return engine.decrypt(pixels, width, height, strength)


def smooth(pixels, width: int, height: int, block_size: int = 16, strength: float = 0.5):
    """One-way block smoothing; there is no matching decrypt."""
    return engine.smooth(pixels, width, height, block_size, strength)


# ============================================================================
# IMAGE FILE FUNCTIONS
# ============================================================================

def encrypt_image(path: str, output: str | None = None, *, strength: float = 1.0, block_size: int = 1):
    return api_media.encrypt_image(path, output, strength=strength, block_size=block_size)


def decrypt_image(path: str, output: str | None = None, *, strength: float = 1.0):
    return api_media.decrypt_image(path, output, strength=strength)


def smooth_image(path: str, output: str | None = None, *, block_size: int = 16, strength: float = 0.5):
    return api_media.smooth_image(path, output, block_size=block_size, strength=strength)


__all__ = [
    "BufferSizeMismatch",
    "CurveCloakError",
    "InvalidDimensions",
    "Mode",
    "ParameterOutOfRange",
    "__version__",
    "block_smooth",
    "clear_curve_cache",
    "curve_indices",
    "decrypt",
    "decrypt_image",
    "encrypt",
    "encrypt_image",
    "gilbert2d",
    "golden_offset",
    "permute",
    "smooth",
    "smooth_image",
    "transform",
]
