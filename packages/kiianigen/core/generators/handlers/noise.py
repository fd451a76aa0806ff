"""Random generators.

These draw from the context's numpy generator, so they are reproducible
only when the run is seeded.
"""

from __future__ import annotations

from pydantic import Field

from kiianigen.core.animation.models import Animation
from kiianigen.core.animation.settings_builder import looping_settings
from kiianigen.core.colors.models import WHITE, RGBColor
from kiianigen.core.generators.protocol import GeneratorContext, GeneratorParams
from kiianigen.core.pixels.formatter import format_pixel
from kiianigen.core.pixels.targets import IdTarget, RowColTarget
from kiianigen.core.utils.math import round_half_up

NOISE_MAX_INTENSITY = 153
DODGY_BLINKS = 50
ESCAPE_TEST_FRAMES = 10
# Escape and Pause on the KType
ESCAPE_TEST_IDS = (1, 16)


class WhiteNoiseParams(GeneratorParams):
    max_frames: int = Field(default=20, ge=1, description="Number of frames")


class WhiteNoiseGenerator:
    """TV static: every LED gets an independent random gray each frame."""

    name = "whiteNoise"
    description = "Animate the entire keyboard with TV static"
    Params = WhiteNoiseParams

    def build(self, params: WhiteNoiseParams, ctx: GeneratorContext) -> Animation:
        led_ids = ctx.geometry.led_ids
        frames = []
        for _ in range(params.max_frames):
            intensities = ctx.rng.integers(0, NOISE_MAX_INTENSITY, size=len(led_ids))
            frames.append(
                [
                    format_pixel(IdTarget(id=led_id), (level, level, level))
                    for led_id, level in zip(led_ids, intensities.tolist())
                ]
            )
        return Animation.from_frames(looping_settings(1), frames)


class DodgyPixelParams(GeneratorParams):
    hi_color: RGBColor = Field(default=WHITE, description="Blink color")
    bg_color: RGBColor = Field(default=(25, 25, 25), description="Background color")


class DodgyPixelGenerator:
    """Fill the grid with a background, then blink random cells one at a time.

    The first frame sets every (row, col) cell; each blink is a frame
    lighting one cell followed by a frame restoring it.
    """

    name = "dodgyPixel"
    description = "Blink random keys"
    Params = DodgyPixelParams

    def build(self, params: DodgyPixelParams, ctx: GeneratorContext) -> Animation:
        max_row = ctx.geometry.max_row
        max_col = ctx.geometry.max_col
        background = [
            format_pixel(RowColTarget(row=row, col=col), params.bg_color)
            for row in range(max_row + 1)
            for col in range(max_col + 1)
        ]
        frames = [background]
        for _ in range(DODGY_BLINKS):
            cell = RowColTarget(
                row=round_half_up(ctx.rng.random() * max_row),
                col=round_half_up(ctx.rng.random() * max_col),
            )
            frames.append([format_pixel(cell, params.hi_color)])
            frames.append([format_pixel(cell, params.bg_color)])
        return Animation.from_frames(looping_settings(1), frames)


class EscapeTestGenerator:
    name = "escapeTest"
    description = "Flash random reds on the Escape and Pause keys"
    Params = GeneratorParams

    def build(self, params: GeneratorParams, ctx: GeneratorContext) -> Animation:
        frames = []
        for _ in range(ESCAPE_TEST_FRAMES):
            reds = ctx.rng.integers(0, 255, size=len(ESCAPE_TEST_IDS)).tolist()
            frames.append(
                [
                    format_pixel(IdTarget(id=led_id), (red, 0, 0))
                    for led_id, red in zip(ESCAPE_TEST_IDS, reds)
                ]
            )
        return Animation.from_frames(looping_settings(1), frames)


__all__ = [
    "DodgyPixelGenerator",
    "DodgyPixelParams",
    "EscapeTestGenerator",
    "WhiteNoiseGenerator",
    "WhiteNoiseParams",
]
