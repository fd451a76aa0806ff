"""Scanner generators.

A scanner walks a lit head across percentage positions, forward then
back (ping-pong), with columns just off the board (-2%, 102%) held at the
background color.
"""

from __future__ import annotations

from pydantic import Field

from kiianigen.core.animation.models import Animation
from kiianigen.core.animation.settings_builder import looping_settings
from kiianigen.core.colors.bleed import color_bleed
from kiianigen.core.colors.models import BLACK, RED, Color, RGBColor
from kiianigen.core.generators.protocol import GeneratorContext, GeneratorParams
from kiianigen.core.pixels.formatter import format_pixel
from kiianigen.core.pixels.targets import col_percent, row_percent

# Head positions in percent: 0, 2, ..., 102
SCAN_POSITIONS: tuple[int, ...] = tuple(range(0, 103, 2))


def _col(percent: float, color: Color) -> str:
    return format_pixel(col_percent(percent), color)


def _row(percent: float, color: Color) -> str:
    return format_pixel(row_percent(percent), color)


class Kitt2000Params(GeneratorParams):
    hi_color: RGBColor = Field(default=RED, description="Head color")
    bg_color: RGBColor = Field(default=BLACK, description="Background color")
    width: int = Field(default=5, ge=2, description="Columns over which the tail fades out")


class Kitt2000Generator:
    """Sweep a head with a fading comet tail left and right across the board.

    The tail is the bleed from head to background over ``width`` steps,
    minus its first sample. Near each edge the tail is drawn between the
    edge and the head; elsewhere one tail sample is placed ``width``
    positions behind (and ahead of) the head and the configurator's
    interpolation draws the gradient in between.
    """

    name = "kitt2000"
    description = "Make the keyboard look vaguely like KITT from Knight Rider"
    Params = Kitt2000Params

    def build(self, params: Kitt2000Params, ctx: GeneratorContext) -> Animation:
        hi, bg = params.hi_color, params.bg_color
        tail = color_bleed(hi, bg, params.width)[1:]
        tail_reversed = tail[::-1]
        n = len(tail_reversed)
        positions = SCAN_POSITIONS

        def frame(i: int) -> list[str]:
            pixels = [_col(-2, bg)]

            lead = n - i
            if 0 <= lead < n:
                pixels.append(_col(0, tail_reversed[lead]))
            elif lead < 0:
                pixels.append(_col(0, bg))
                pixels.append(_col(positions[i - n], tail_reversed[0]))

            pixels.append(_col(positions[i], tail[0]))

            trail = len(positions) - i + 1
            if 0 <= trail < n:
                pixels.append(_col(100, tail_reversed[trail]))
            elif i + n < len(positions):
                pixels.append(_col(positions[i + n], tail_reversed[0]))
                pixels.append(_col(100, bg))

            pixels.append(_col(102, bg))
            return pixels

        order = [*range(len(positions)), *range(len(positions) - 2, 1, -1)]
        return Animation.from_frames(
            looping_settings(2, stretch=True, interp=True),
            (frame(i) for i in order),
        )


class BluewipeParams(GeneratorParams):
    hi_color: RGBColor = Field(default=(0, 26, 255), description="Wipe color")
    bg_color: RGBColor = Field(default=(93, 93, 93), description="Background color")


class BluewipeGenerator:
    """Sweep a lit row from top to bottom and back."""

    name = "bluewipe"
    description = "Wipe a blue row down the keyboard and back up"
    Params = BluewipeParams

    def build(self, params: BluewipeParams, ctx: GeneratorContext) -> Animation:
        hi, bg = params.hi_color, params.bg_color

        def frame(i: int) -> list[str]:
            return [_row(-2, bg), _row((i - 1) * 2, hi), _row(102, bg)]

        # One step of overflow past each edge
        order = [*range(-1, 52), *range(52, -2, -1)]
        return Animation.from_frames(
            looping_settings(3, stretch=True, interp=True),
            (frame(i) for i in order),
        )


__all__ = [
    "BluewipeGenerator",
    "BluewipeParams",
    "Kitt2000Generator",
    "Kitt2000Params",
    "SCAN_POSITIONS",
]
