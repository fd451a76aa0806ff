"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties going towards +infinity.

    Python's ``round`` uses banker's rounding (``round(127.5) == 128`` but
    ``round(126.5) == 126``); color channels always round ties upwards.

    Example:
        >>> round_half_up(126.5)
        127
        >>> round_half_up(-0.5)
        0
    """
    return int(math.floor(x + 0.5))


def format_number(value: float | int) -> str:
    """Render a number without a trailing ``.0`` when it is integral.

    Example:
        >>> format_number(2.0)
        '2'
        >>> format_number(2.5)
        '2.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
