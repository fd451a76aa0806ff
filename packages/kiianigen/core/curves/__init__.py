"""Interpolation laws."""

from kiianigen.core.curves.interpolation import (
    InterpolationKind,
    get_interpolator,
    linear_interpolate,
    random_interpolate,
    seeded_random_interpolate,
    sine_interpolate,
)
from kiianigen.core.curves.protocols import InterpolationLaw

__all__ = [
    "InterpolationKind",
    "InterpolationLaw",
    "get_interpolator",
    "linear_interpolate",
    "random_interpolate",
    "seeded_random_interpolate",
    "sine_interpolate",
]
