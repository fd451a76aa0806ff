"""Interpolation laws used to bleed one color channel into another.

Every law shares the signature ``(step, steps, val1, val2) -> float``.
"""

from __future__ import annotations

from enum import Enum
import math

import numpy as np

from kiianigen.core.curves.protocols import InterpolationLaw
from kiianigen.core.utils.math import lerp

_default_rng = np.random.default_rng()


class InterpolationKind(str, Enum):
    """Named interpolation laws, usable from configuration files."""

    LINEAR = "linear"
    SINE = "sine"
    RANDOM = "random"


def linear_interpolate(step: float, steps: float, val1: float, val2: float) -> float:
    """Travel from val1 to val2 in equal increments.

    Example:
        >>> linear_interpolate(1, 4, 0, 100)
        25.0
    """
    return lerp(val1, val2, step / steps)


def sine_interpolate(step: float, steps: float, val1: float, val2: float) -> float:
    """Travel from val1 to val2 along the sine curve between -pi/2 and pi/2.

    Slow at both ends and fast in the middle, which reads as a breath.

    Example:
        >>> sine_interpolate(2, 4, 0, 100)
        50.0
    """
    angle = (step / steps) * math.pi - (math.pi / 2)
    progress = (math.sin(angle) + 1) / 2
    return lerp(val1, val2, progress)


def seeded_random_interpolate(rng: np.random.Generator) -> InterpolationLaw:
    """Build a random law that draws from the given generator.

    Args:
        rng: numpy random generator (seed it for reproducible output).

    Returns:
        Interpolation law ignoring step/steps and returning a uniform draw
        between val1 and val2.
    """

    def random_interpolate(step: float, steps: float, val1: float, val2: float) -> float:
        return lerp(val1, val2, float(rng.random()))

    return random_interpolate


random_interpolate = seeded_random_interpolate(_default_rng)
random_interpolate.__doc__ = """Uniform draw between val1 and val2; step and steps are ignored."""


def get_interpolator(
    kind: InterpolationKind | str,
    rng: np.random.Generator | None = None,
) -> InterpolationLaw:
    """Resolve a named interpolation law.

    Args:
        kind: Law name or InterpolationKind.
        rng: Generator for the random law. Uses a process-wide unseeded
             generator when None.

    Returns:
        The interpolation function.

    Raises:
        ValueError: If the name is not a known law.
    """
    kind = InterpolationKind(kind)
    if kind is InterpolationKind.LINEAR:
        return linear_interpolate
    if kind is InterpolationKind.SINE:
        return sine_interpolate
    return seeded_random_interpolate(rng) if rng is not None else random_interpolate


__all__ = [
    "InterpolationKind",
    "get_interpolator",
    "linear_interpolate",
    "random_interpolate",
    "seeded_random_interpolate",
    "sine_interpolate",
]
