"""Pixel targets and the pixel command formatter."""

from kiianigen.core.pixels.formatter import (
    format_pixel,
    join_frame,
    pixel_id,
    sort_pixel_frame,
)
from kiianigen.core.pixels.targets import (
    IdTarget,
    PercentTarget,
    PixelTarget,
    RowColTarget,
    col_percent,
    row_percent,
)

__all__ = [
    "IdTarget",
    "PercentTarget",
    "PixelTarget",
    "RowColTarget",
    "col_percent",
    "format_pixel",
    "join_frame",
    "pixel_id",
    "row_percent",
    "sort_pixel_frame",
]
