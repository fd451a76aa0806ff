"""Color bleed engines.

A bleed is a discretized gradient between two colors. ``color_bleed``
produces one gradient; ``multi_color_bleed`` chains gradients over a
cyclic list of colors so the last color flows back into the first.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
import math

from kiianigen.core.colors.models import Color
from kiianigen.core.curves.interpolation import linear_interpolate
from kiianigen.core.curves.protocols import InterpolationLaw
from kiianigen.core.utils.math import clamp, round_half_up


def norm_color(value: float) -> int:
    """Round a channel value half-up and clamp it to [0, 255].

    Example:
        >>> norm_color(127.5)
        128
        >>> norm_color(300)
        255
    """
    return clamp(round_half_up(value), 0, 255)


def scale_color(color: Sequence[float], factor: float) -> Color:
    """Scale every channel of a color by an intensity factor.

    Example:
        >>> scale_color((0, 0, 255), 0.5)
        (0, 0, 128)
    """
    r, g, b = color
    return (norm_color(r * factor), norm_color(g * factor), norm_color(b * factor))


def iter_gradient(
    orig_color: Sequence[int],
    dest_color: Sequence[int],
    steps: float,
    interpolate: InterpolationLaw = linear_interpolate,
) -> Iterator[Color]:
    """Yield every sample of the gradient from orig_color to dest_color.

    Samples are taken at step 0, 1, ... up to ``floor(steps)``; a fractional
    ``steps`` is used as-is as the interpolation total, so the last sample
    stops just short of dest_color.

    Args:
        orig_color: Color at step 0.
        dest_color: Color at step ``steps``.
        steps: Total step count (> 0).
        interpolate: Interpolation law applied to every channel.

    Yields:
        Colors with rounded, clamped channels.
    """
    for s in range(math.floor(steps) + 1):
        yield tuple(  # type: ignore[misc]
            norm_color(interpolate(s, steps, orig, dest))
            for orig, dest in zip(orig_color, dest_color)
        )


def color_bleed(
    orig_color: Sequence[int],
    dest_color: Sequence[int],
    steps: float | None = None,
    step: int | None = None,
    interpolate: InterpolationLaw = linear_interpolate,
) -> list[Color] | Color:
    """Compute the bleed between two colors.

    If ``steps`` is missing or below 2, the bleed is forced to 2 steps and
    only the middle sample is returned, i.e. the average of the two colors.

    Args:
        orig_color: The color from which to bleed.
        dest_color: The color to which to bleed.
        steps: Number of steps over which the color bleeds (minimum 2:
               origin, average, destination).
        step: If given, return only the sample at this step.
        interpolate: Interpolation law (linear by default).

    Returns:
        The full gradient (``floor(steps) + 1`` colors), or a single color
        when ``step`` is given or ``steps`` is below 2.

    Example:
        >>> color_bleed((0, 0, 0), (255, 255, 255))
        (128, 128, 128)
        >>> color_bleed((0, 0, 0), (20, 40, 60), 2)
        [(0, 0, 0), (10, 20, 30), (20, 40, 60)]
    """
    if steps is None or steps < 2:
        steps = 2
        step = 1

    colors = list(iter_gradient(orig_color, dest_color, steps, interpolate))
    if step is not None:
        return colors[step]
    return colors


def multi_color_bleed(
    steps_per_color: float,
    colors: Sequence[Sequence[int]],
    interpolate: InterpolationLaw = linear_interpolate,
) -> Iterator[Color]:
    """Lazily bleed through a cyclic list of colors.

    Each color bleeds into the next and the last bleeds back into the
    first. The first sample of every segment after the first is skipped
    (it repeats the previous segment's last sample) and the final sample
    is dropped (it repeats ``colors[0]``), so the output loops cleanly.

    Args:
        steps_per_color: Steps used to get from one color to the next (>= 1).
        colors: Two or more colors.
        interpolate: Interpolation law applied to every channel.

    Yields:
        ``len(colors) * floor(steps_per_color)`` colors, starting at colors[0].

    Raises:
        ValueError: If fewer than two colors or fewer than one step are given.

    Example:
        >>> list(multi_color_bleed(2, [(0, 0, 0), (20, 20, 20)]))
        [(0, 0, 0), (10, 10, 10), (20, 20, 20), (10, 10, 10)]
    """
    if len(colors) < 2:
        raise ValueError(f"multi_color_bleed needs at least 2 colors, got {len(colors)}")
    if steps_per_color < 1:
        raise ValueError(f"steps_per_color must be >= 1, got {steps_per_color}")

    # Validation above must run eagerly, before the first next()
    return _iter_multi_color_bleed(steps_per_color, colors, interpolate)


def _iter_multi_color_bleed(
    steps_per_color: float,
    colors: Sequence[Sequence[int]],
    interpolate: InterpolationLaw,
) -> Iterator[Color]:
    pending: Color | None = None
    for i, orig in enumerate(colors):
        dest = colors[(i + 1) % len(colors)]
        fade = iter_gradient(orig, dest, steps_per_color, interpolate)
        if i > 0:
            next(fade)
        for color in fade:
            if pending is not None:
                yield pending
            pending = color


__all__ = [
    "color_bleed",
    "iter_gradient",
    "multi_color_bleed",
    "norm_color",
    "scale_color",
]
