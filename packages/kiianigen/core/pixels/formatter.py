"""Pixel command wire format.

A pixel command reads ``P[<addr>](<r>,<g>,<b>)``, where ``<addr>`` joins
the target's row, column and id fields with commas, e.g.
``P[c:-2%](0,0,255)``, ``P[r:0,c:3](25,25,25)`` or ``P[16](255,0,0)``.
A frame is the comma-joined list of its pixel commands.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import re

from kiianigen.core.pixels.targets import IdTarget, PercentTarget, RowColTarget
from kiianigen.core.utils.math import format_number

_ID_PATTERN = re.compile(r"^P\[(\d+)\]")


def format_pixel(
    target: RowColTarget | PercentTarget | IdTarget,
    color: Sequence[float],
) -> str:
    """Render one pixel command.

    Missing color channels default to 0.

    Args:
        target: Where the color goes.
        color: (r, g, b); shorter sequences are padded with zeros.

    Returns:
        Wire-format pixel command.

    Example:
        >>> format_pixel(RowColTarget(row=0, col="-2%"), (0, 0, 255))
        'P[r:0,c:-2%](0,0,255)'
        >>> format_pixel(IdTarget(id=16), (255,))
        'P[16](255,0,0)'
    """
    channels = [format_number(c) if c else "0" for c in list(color)[:3]]
    channels.extend("0" for _ in range(3 - len(channels)))
    return f"P[{','.join(target.address())}]({','.join(channels)})"


def join_frame(commands: Iterable[str]) -> str:
    """Join pixel commands into the comma-separated frame text."""
    return ",".join(commands)


def pixel_id(command: str) -> int:
    """Extract the LED id from an id-addressed pixel command.

    Raises:
        ValueError: If the command is not addressed by id.
    """
    match = _ID_PATTERN.match(command)
    if match is None:
        raise ValueError(f"Pixel command is not addressed by id: {command!r}")
    return int(match.group(1))


def sort_pixel_frame(commands: Iterable[str]) -> list[str]:
    """Order id-addressed pixel commands by ascending LED id.

    The sort is stable, so commands for the same id keep their relative
    order (and the last one still wins).
    """
    return sorted(commands, key=pixel_id)


__all__ = [
    "format_pixel",
    "join_frame",
    "pixel_id",
    "sort_pixel_frame",
]
