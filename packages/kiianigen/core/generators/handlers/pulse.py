"""Pulse generators.

A pulse bleeds the whole keyboard through a cyclic list of colors. Each
frame paints two column targets just off either edge of the board with
the same color; the configurator's interpolation fills the keys between.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import Field

from kiianigen.core.animation.models import Animation
from kiianigen.core.animation.settings_builder import looping_settings
from kiianigen.core.colors.bleed import multi_color_bleed
from kiianigen.core.colors.models import BLACK, BLUE, GREEN, RED, WHITE, YELLOW, Color, RGBColor
from kiianigen.core.curves.interpolation import (
    InterpolationKind,
    get_interpolator,
    linear_interpolate,
)
from kiianigen.core.curves.protocols import InterpolationLaw
from kiianigen.core.generators.protocol import GeneratorContext, GeneratorParams
from kiianigen.core.pixels.formatter import format_pixel
from kiianigen.core.pixels.targets import col_percent

PULSE_FRAME_DELAY = 3
EMBER: Color = (255, 25, 0)


def edge_frame(color: Color) -> tuple[str, str]:
    """Frame lighting both off-board column edges with one color."""
    return (
        format_pixel(col_percent(-1), color),
        format_pixel(col_percent(101), color),
    )


def edge_animation(settings: str, colors: Iterable[Color]) -> Animation:
    """Animation with one edge frame per sampled color."""
    return Animation.from_frames(settings, (edge_frame(color) for color in colors))


def color_pulse(
    frames_per_color: float,
    colors: Sequence[Sequence[int]],
    interpolate: InterpolationLaw = linear_interpolate,
) -> Animation:
    """Pulse the entire keyboard through the given colors.

    Args:
        frames_per_color: Frames spent bleeding from one color to the next.
        colors: Two or more colors, visited cyclically.
        interpolate: Interpolation law for each transition.

    Returns:
        Animation with ``len(colors) * floor(frames_per_color)`` frames.
    """
    return edge_animation(
        looping_settings(PULSE_FRAME_DELAY, stretch=True, interp=True),
        multi_color_bleed(frames_per_color, colors, interpolate),
    )


class ColorPulseParams(GeneratorParams):
    frames_per_color: float = Field(default=240, ge=1, description="Frames per color transition")
    colors: list[RGBColor] = Field(
        default=[EMBER, BLACK], min_length=2, description="Colors to pulse through"
    )
    interpolation: InterpolationKind = Field(
        default=InterpolationKind.LINEAR, description="Interpolation law"
    )


class ColorPulseGenerator:
    """Pulse through any list of colors under a named interpolation law."""

    name = "colorPulse"
    description = "Pulse the keyboard through a list of colors"
    Params = ColorPulseParams

    def build(self, params: ColorPulseParams, ctx: GeneratorContext) -> Animation:
        interpolate = get_interpolator(params.interpolation, ctx.rng)
        return color_pulse(params.frames_per_color, params.colors, interpolate)


class RedPulseGenerator:
    name = "redPulse"
    description = "Pulse the entire keyboard red"
    Params = GeneratorParams

    def build(self, params: GeneratorParams, ctx: GeneratorContext) -> Animation:
        return color_pulse(240, [EMBER, BLACK])


class LinearPulseParams(GeneratorParams):
    hi_color: RGBColor = Field(default=EMBER, description="Bright color")
    lo_color: RGBColor = Field(default=BLACK, description="Dim color")


class LinearPulseGenerator:
    name = "linearPulse"
    description = "Pulse the entire keyboard between two colors, linearly"
    Params = LinearPulseParams

    def build(self, params: LinearPulseParams, ctx: GeneratorContext) -> Animation:
        return color_pulse(240, [params.hi_color, params.lo_color])


class BlueYellowPulseGenerator:
    name = "blueYellowPulse"
    description = "Pulse the entire keyboard blue to yellow"
    Params = GeneratorParams

    def build(self, params: GeneratorParams, ctx: GeneratorContext) -> Animation:
        return color_pulse(240, [BLUE, YELLOW])


class RgbPulseGenerator:
    name = "rgbPulse"
    description = "Pulse the entire keyboard red to green to blue"
    Params = GeneratorParams

    def build(self, params: GeneratorParams, ctx: GeneratorContext) -> Animation:
        return color_pulse(120, [RED, GREEN, BLUE])


class RgbZebraPulseGenerator:
    name = "rgbZebraPulse"
    description = "Pulse red to green to blue with white in between"
    Params = GeneratorParams

    def build(self, params: GeneratorParams, ctx: GeneratorContext) -> Animation:
        return color_pulse(120, [RED, WHITE, GREEN, WHITE, BLUE, WHITE])


__all__ = [
    "BlueYellowPulseGenerator",
    "ColorPulseGenerator",
    "ColorPulseParams",
    "LinearPulseGenerator",
    "LinearPulseParams",
    "RedPulseGenerator",
    "RgbPulseGenerator",
    "RgbZebraPulseGenerator",
    "color_pulse",
    "edge_animation",
    "edge_frame",
]
