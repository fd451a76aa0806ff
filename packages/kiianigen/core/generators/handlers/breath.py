"""Breathing generators.

Breaths use the sine law so colors ease in and out. The number of frames
for one inhale follows from the breathing rate and the frame delay:
``steps_per_inhale = (seconds_per_breath * 100 / frame_delay) / 2``.

The region variants split the board into the key area ("top") and the
base ring, driving each with its own color cycle so they breathe in
complementary colors.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field

from kiianigen.core.animation.models import Animation
from kiianigen.core.animation.settings_builder import looping_settings
from kiianigen.core.colors.bleed import multi_color_bleed, scale_color
from kiianigen.core.colors.models import BLUE, GREEN, WHITE, RGBColor
from kiianigen.core.curves.interpolation import sine_interpolate
from kiianigen.core.generators.handlers.pulse import edge_animation
from kiianigen.core.generators.protocol import GeneratorContext, GeneratorParams
from kiianigen.core.pixels.formatter import format_pixel, sort_pixel_frame
from kiianigen.core.pixels.targets import IdTarget
from kiianigen.core.utils.math import round_half_up

BREATH_FRAME_DELAY = 3
BREATHS_PER_MINUTE = 12

# Slower ring variants: 6.4 s per breath at 10 ticks per frame, 32 frames per inhale
RING_FRAME_DELAY = 10
RING_SECONDS_PER_BREATH = 6.4

# Base ring of the KType, split at the front (94) and back (110) centres:
# the left side runs clockwise, the right side counter-clockwise
DART_LEFT_SIDE = (94, 95, 96, 97, 98, 99, 100, 101, 102, 103, 104, 105, 106, 107, 108, 109, 110)
DART_RIGHT_SIDE = (94, 93, 92, 91, 90, 89, 88, 119, 118, 117, 116, 115, 114, 113, 112, 111, 110)
DART_TAIL = 4
DART_ON_INTENSITY = 1
DART_OFF_INTENSITY = 0.05


def steps_per_inhale(seconds_per_breath: float, frame_delay: int) -> float:
    """Frames needed to bleed from one color to the next in half a breath.

    Example:
        >>> steps_per_inhale(6.4, 10)
        32.0
    """
    return (seconds_per_breath * 100 / frame_delay) / 2


def color_breathe(breaths_per_minute: float, colors: Sequence[Sequence[int]]) -> Animation:
    """Breathe the entire keyboard through the given colors.

    Args:
        breaths_per_minute: Breathing rate.
        colors: Two or more colors, visited cyclically.

    Returns:
        Animation using the sine law at a frame delay of 3.
    """
    steps = steps_per_inhale(60 / breaths_per_minute, BREATH_FRAME_DELAY)
    return edge_animation(
        looping_settings(BREATH_FRAME_DELAY, stretch=True, interp=True),
        multi_color_bleed(steps, colors, sine_interpolate),
    )


def _id_pixel(led_id: int, color: Sequence[int]) -> str:
    return format_pixel(IdTarget(id=led_id), color)


class ColorBreatheParams(GeneratorParams):
    breaths_per_minute: float = Field(
        default=BREATHS_PER_MINUTE, gt=0, le=1000, description="Breathing rate"
    )
    colors: list[RGBColor] = Field(
        default=[GREEN, BLUE], min_length=2, description="Colors to breathe through"
    )


class ColorBreatheGenerator:
    """Breathe through any list of colors at any rate."""

    name = "colorBreathe"
    description = "Breathe the keyboard through a list of colors"
    Params = ColorBreatheParams

    def build(self, params: ColorBreatheParams, ctx: GeneratorContext) -> Animation:
        return color_breathe(params.breaths_per_minute, params.colors)


class MacSleepBreathParams(GeneratorParams):
    hi_color: RGBColor = Field(default=WHITE, description="Inhale color")
    lo_color: RGBColor = Field(default=(1, 1, 1), description="Exhale color")


class MacSleepBreathGenerator:
    """Slow white breath, like a sleeping laptop's status light."""

    name = "macSleepBreath"
    description = "Breathe the entire keyboard like a sleeping Mac"
    Params = MacSleepBreathParams

    def build(self, params: MacSleepBreathParams, ctx: GeneratorContext) -> Animation:
        return color_breathe(BREATHS_PER_MINUTE, [params.hi_color, params.lo_color])


class BlueGreenBreathGenerator:
    name = "blueGreenBreath"
    description = "Breathe the entire keyboard green to blue"
    Params = GeneratorParams

    def build(self, params: GeneratorParams, ctx: GeneratorContext) -> Animation:
        return color_breathe(BREATHS_PER_MINUTE, [GREEN, BLUE])


class TwoColorParams(GeneratorParams):
    color1: RGBColor = Field(default=GREEN, description="Key area starting color")
    color2: RGBColor = Field(default=BLUE, description="Base ring starting color")


class BaseTopBreathGenerator:
    """Key area and base ring breathe in swapped colors.

    Only the first and last id of each region are set; the configurator
    interpolates the LEDs between them.
    """

    name = "baseTopBreath"
    description = "Breathe the key area and the base in alternating colors"
    Params = TwoColorParams

    def build(self, params: TwoColorParams, ctx: GeneratorContext) -> Animation:
        seconds_per_breath = round_half_up(60 / BREATHS_PER_MINUTE)
        steps = steps_per_inhale(seconds_per_breath, BREATH_FRAME_DELAY)
        top_colors = multi_color_bleed(steps, [params.color1, params.color2], sine_interpolate)
        bot_colors = multi_color_bleed(steps, [params.color2, params.color1], sine_interpolate)

        top_ids = ctx.geometry.top_ids
        base_ids = ctx.geometry.base_ids
        frames = [
            (
                _id_pixel(top_ids[0], top),
                _id_pixel(top_ids[-1], top),
                _id_pixel(base_ids[0], bot),
                _id_pixel(base_ids[-1], bot),
            )
            for top, bot in zip(top_colors, bot_colors)
        ]
        return Animation.from_frames(
            looping_settings(BREATH_FRAME_DELAY, stretch=True, interp=True), frames
        )


class BlueGreenBaseTopBreathSpinGenerator:
    """Top breath with a spinning intensity falloff around the base ring.

    Every frame the ring ids rotate one slot; slot ``j`` of ``n`` shows
    the base color at ``j / n`` intensity.
    """

    name = "blueGreenBaseTopBreathSpin"
    description = "Breathe the key area while a gradient spins around the base"
    Params = TwoColorParams

    def build(self, params: TwoColorParams, ctx: GeneratorContext) -> Animation:
        steps = steps_per_inhale(RING_SECONDS_PER_BREATH, RING_FRAME_DELAY)
        top_colors = multi_color_bleed(steps, [params.color1, params.color2], sine_interpolate)
        bot_colors = multi_color_bleed(steps, [params.color2, params.color1], sine_interpolate)

        top_ids = ctx.geometry.top_ids
        ring = list(ctx.geometry.base_ids)
        frames = []
        for top, bot in zip(top_colors, bot_colors):
            frame = [_id_pixel(top_ids[0], top), _id_pixel(top_ids[-1], top)]
            ring.insert(0, ring.pop())
            for j, led_id in enumerate(ring):
                frame.append(_id_pixel(led_id, scale_color(bot, j / len(ring))))
            frames.append(frame)

        return Animation.from_frames(
            looping_settings(RING_FRAME_DELAY, stretch=True, interp=True), frames
        )


class BlueGreenBaseTopBreathDartGenerator:
    """Top breath with two mirrored darts chasing around the base ring.

    Both ring halves start at the front centre and meet at the back. The
    last few slots of each half are lit at full intensity, the rest are
    dimmed, and both halves shift one slot per frame. Each frame is
    sorted by LED id.
    """

    name = "blueGreenBaseTopBreathDart"
    description = "Breathe the key area while two darts run around the base"
    Params = TwoColorParams

    def build(self, params: TwoColorParams, ctx: GeneratorContext) -> Animation:
        steps = steps_per_inhale(RING_SECONDS_PER_BREATH, RING_FRAME_DELAY)
        top_colors = multi_color_bleed(steps, [params.color1, params.color2], sine_interpolate)
        bot_colors = multi_color_bleed(steps, [params.color2, params.color1], sine_interpolate)

        top_ids = ctx.geometry.top_ids
        left = list(DART_LEFT_SIDE)
        right = list(DART_RIGHT_SIDE)
        # Centre LEDs are shared by both halves and only painted once
        shared = {DART_LEFT_SIDE[0], DART_LEFT_SIDE[-1]}
        frames = []
        for top, bot in zip(top_colors, bot_colors):
            frame = [_id_pixel(top_ids[0], top), _id_pixel(top_ids[-1], top)]
            for j, (left_id, right_id) in enumerate(zip(left, right)):
                on = j > len(left) - DART_TAIL
                color = scale_color(bot, DART_ON_INTENSITY if on else DART_OFF_INTENSITY)
                frame.append(_id_pixel(left_id, color))
                if left_id not in shared:
                    frame.append(_id_pixel(right_id, color))
            frames.append(sort_pixel_frame(frame))

            left.append(left.pop(0))
            right.append(right.pop(0))

        return Animation.from_frames(
            looping_settings(RING_FRAME_DELAY, stretch=True, interp=True), frames
        )


__all__ = [
    "BaseTopBreathGenerator",
    "BlueGreenBaseTopBreathDartGenerator",
    "BlueGreenBaseTopBreathSpinGenerator",
    "BlueGreenBreathGenerator",
    "ColorBreatheGenerator",
    "ColorBreatheParams",
    "MacSleepBreathGenerator",
    "MacSleepBreathParams",
    "TwoColorParams",
    "color_breathe",
    "steps_per_inhale",
]
