"""Region fill generators.

These color the keyboard by region: keyed vs blank LEDs, or the key area
vs the base ring.
"""

from __future__ import annotations

from pydantic import Field

from kiianigen.core.animation.models import Animation
from kiianigen.core.animation.settings_builder import looping_settings
from kiianigen.core.colors.bleed import scale_color
from kiianigen.core.colors.models import BLUE, GREEN, RGBColor
from kiianigen.core.generators.protocol import GeneratorContext, GeneratorParams
from kiianigen.core.pixels.formatter import format_pixel
from kiianigen.core.pixels.targets import IdTarget

REGION_FRAME_DELAY = 5


class TopAndBottomParams(GeneratorParams):
    blank_color: RGBColor = Field(default=GREEN, description="Color of LEDs with no key")
    keyed_color: RGBColor = Field(default=BLUE, description="Color of LEDs under keys")


class TopAndBottomGenerator:
    """Single static frame: blank LEDs one color, keyed LEDs another."""

    name = "topAndBottom"
    description = "Color the base and the keys differently"
    Params = TopAndBottomParams

    def build(self, params: TopAndBottomParams, ctx: GeneratorContext) -> Animation:
        geometry = ctx.geometry
        frame = [format_pixel(IdTarget(id=i), params.blank_color) for i in geometry.blank_led_ids]
        frame += [format_pixel(IdTarget(id=i), params.keyed_color) for i in geometry.keyed_led_ids]
        return Animation.from_frames(looping_settings(REGION_FRAME_DELAY), [frame])


class TopAndBottom2Params(GeneratorParams):
    top_color: RGBColor = Field(default=GREEN, description="Key area color")
    base_color: RGBColor = Field(default=BLUE, description="Base ring color")


class TopAndBottom2Generator:
    """Solid key area with an intensity falloff rotating around the base.

    One frame per base LED; each frame rotates the ring one slot, and
    slot ``j`` of ``n`` shows the base color at ``j / n`` intensity.
    """

    name = "topAndBottom2"
    description = "Solid key area with a gradient rotating around the base"
    Params = TopAndBottom2Params

    def build(self, params: TopAndBottom2Params, ctx: GeneratorContext) -> Animation:
        top_ids = ctx.geometry.top_ids
        ring = list(ctx.geometry.base_ids)
        frames = []
        for _ in range(len(ring)):
            frame = [
                format_pixel(IdTarget(id=top_ids[0]), params.top_color),
                format_pixel(IdTarget(id=top_ids[-1]), params.top_color),
            ]
            ring.insert(0, ring.pop())
            frame += [
                format_pixel(IdTarget(id=led_id), scale_color(params.base_color, j / len(ring)))
                for j, led_id in enumerate(ring)
            ]
            frames.append(frame)
        return Animation.from_frames(looping_settings(REGION_FRAME_DELAY, interp=True), frames)


__all__ = [
    "TopAndBottom2Generator",
    "TopAndBottom2Params",
    "TopAndBottomGenerator",
    "TopAndBottomParams",
]
