"""Colors and color bleed engines."""

from kiianigen.core.colors.bleed import (
    color_bleed,
    iter_gradient,
    multi_color_bleed,
    norm_color,
    scale_color,
)
from kiianigen.core.colors.models import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    WHITE,
    YELLOW,
    Color,
    RGBColor,
)

__all__ = [
    "BLACK",
    "BLUE",
    "Color",
    "GREEN",
    "RED",
    "RGBColor",
    "WHITE",
    "YELLOW",
    "color_bleed",
    "iter_gradient",
    "multi_color_bleed",
    "norm_color",
    "scale_color",
]
