"""Environment-driven settings.

Every value is read at call time so tests and callers can flip a variable
without re-importing the package.
"""

import os

BLOCK_THRESHOLD_ENV = "CURVECLOAK_BLOCK_THRESHOLD"
WORKERS_ENV = "CURVECLOAK_WORKERS"
PARALLEL_MIN_PIXELS_ENV = "CURVECLOAK_PARALLEL_MIN_PIXELS"
CURVE_CACHE_ENV = "CURVECLOAK_CURVE_CACHE"
VERBOSE_ENV = "CURVECLOAK_VERBOSE"

DEFAULT_BLOCK_THRESHOLD = 8
DEFAULT_PARALLEL_MIN_PIXELS = 512 * 512
DEFAULT_CURVE_CACHE = 8

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_int(name: str) -> int | None:
    value = os.getenv(name)
    if not value:
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    if parsed <= 0:
        return None
    return parsed


def env_flag(name: str) -> bool:
    raw = os.getenv(name)
    if not raw:
        return False
    return raw.strip().lower() in _TRUE_VALUES


def block_threshold() -> int:
    return _env_int(BLOCK_THRESHOLD_ENV) or DEFAULT_BLOCK_THRESHOLD


def worker_count() -> int:
    configured = _env_int(WORKERS_ENV)
    if configured:
        return configured
    return max(1, os.cpu_count() or 1)


def parallel_min_pixels() -> int:
    return _env_int(PARALLEL_MIN_PIXELS_ENV) or DEFAULT_PARALLEL_MIN_PIXELS


def curve_cache_size() -> int:
    return _env_int(CURVE_CACHE_ENV) or DEFAULT_CURVE_CACHE


def verbose_enabled() -> bool:
    return env_flag(VERBOSE_ENV)
