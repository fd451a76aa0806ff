"""Helper for building configurator animation settings strings.

Settings are a comma+space separated list of flags and ``key:value``
pairs, e.g. ``framedelay:3, framestretch, loop, replace:all, pfunc:interp``.
"""

from __future__ import annotations

from typing import Any


class AnimationSettingsBuilder:
    """Fluent builder for animation settings strings.

    Example:
        >>> b = AnimationSettingsBuilder()
        >>> s = b.frame_delay(3).frame_stretch().loop().replace("all").pfunc("interp").build()
        >>> s
        'framedelay:3, framestretch, loop, replace:all, pfunc:interp'
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def add(self, key: str, value: Any) -> AnimationSettingsBuilder:
        """Add a key:value pair.

        Args:
            key: Setting name (e.g., 'framedelay').
            value: Setting value.

        Returns:
            Self for chaining.
        """
        self._parts.append(f"{key}:{value}")
        return self

    def flag(self, name: str) -> AnimationSettingsBuilder:
        """Add a bare flag such as 'loop'."""
        self._parts.append(name)
        return self

    def frame_delay(self, delay: int) -> AnimationSettingsBuilder:
        """Add the frame delay (in configurator ticks between frames)."""
        return self.add("framedelay", delay)

    def frame_stretch(self) -> AnimationSettingsBuilder:
        return self.flag("framestretch")

    def loop(self) -> AnimationSettingsBuilder:
        return self.flag("loop")

    def replace(self, mode: str = "all") -> AnimationSettingsBuilder:
        """Add the replace mode (how the animation combines with others)."""
        return self.add("replace", mode)

    def pfunc(self, func: str = "interp") -> AnimationSettingsBuilder:
        """Add the per-frame pixel function ('interp' blends between frames)."""
        return self.add("pfunc", func)

    def build(self) -> str:
        """Build the final settings string.

        Returns:
            Comma+space separated settings.
        """
        return ", ".join(self._parts)


def looping_settings(frame_delay: int, stretch: bool = False, interp: bool = False) -> str:
    """Build the settings string shared by every generator.

    Looping animations always replace all other output; stretch and
    interpolation are optional.

    Example:
        >>> looping_settings(1)
        'framedelay:1, loop, replace:all'
        >>> looping_settings(2, stretch=True, interp=True)
        'framedelay:2, framestretch, loop, replace:all, pfunc:interp'
    """
    builder = AnimationSettingsBuilder().frame_delay(frame_delay)
    if stretch:
        builder.frame_stretch()
    builder.loop().replace("all")
    if interp:
        builder.pfunc("interp")
    return builder.build()


__all__ = [
    "AnimationSettingsBuilder",
    "looping_settings",
]
