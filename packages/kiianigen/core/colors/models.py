"""Color types shared by the bleed engines and generators."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

Color = tuple[int, int, int]
"""An (r, g, b) triple with every channel in [0, 255]."""

Channel = Annotated[int, Field(ge=0, le=255)]

RGBColor = Annotated[
    tuple[Channel, Channel, Channel],
    Field(description="RGB color as [r, g, b], each 0-255"),
]
"""Validated color for generator parameter models."""

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
YELLOW: Color = (255, 255, 0)

__all__ = [
    "BLACK",
    "BLUE",
    "Channel",
    "Color",
    "GREEN",
    "RED",
    "RGBColor",
    "WHITE",
    "YELLOW",
]
