"""Argument checks shared by the permutation and block transforms."""

import math
import numbers
import operator

from .errors import InvalidDimensions, ParameterOutOfRange


def check_dimensions(width, height) -> "tuple[int, int]":
    if isinstance(width, bool) or isinstance(height, bool):
        raise InvalidDimensions(width, height)
    try:
        w = operator.index(width)
        h = operator.index(height)
    except TypeError:
        raise InvalidDimensions(width, height) from None
    if w <= 0 or h <= 0:
        raise InvalidDimensions(width, height)
    return w, h


def check_strength(strength) -> float:
    if isinstance(strength, bool) or not isinstance(strength, numbers.Real):
        raise ParameterOutOfRange("strength", strength, "expected a number in [0, 1]")
    value = float(strength)
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise ParameterOutOfRange("strength", strength, "expected a number in [0, 1]")
    return value


def check_block_size(block_size, name: str = "block_size") -> int:
    if isinstance(block_size, bool):
        raise ParameterOutOfRange(name, block_size, "expected a positive integer")
    try:
        value = operator.index(block_size)
    except TypeError:
        raise ParameterOutOfRange(name, block_size, "expected a positive integer") from None
    if value <= 0:
        raise ParameterOutOfRange(name, block_size, "expected a positive integer")
    return value
