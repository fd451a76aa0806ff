"""Animation model."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from kiianigen.core.pixels.formatter import join_frame


class Animation(BaseModel):
    """A finished animation: settings plus ordered frames.

    Each frame is an ordered tuple of pixel command strings. Within a
    frame, a later command for the same target overrides an earlier one.

    Attributes:
        settings: Configurator settings string (frame delay, loop, etc.).
        type: Always "animation".
        frames: Ordered frames of pixel commands.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    settings: str = Field(description="Configurator settings string")
    type: Literal["animation"] = "animation"
    frames: tuple[tuple[str, ...], ...] = Field(description="Ordered frames of pixel commands")

    @classmethod
    def from_frames(cls, settings: str, frames: Iterable[Iterable[str]]) -> Animation:
        """Build an animation from any iterable of frames."""
        return cls(settings=settings, frames=tuple(tuple(frame) for frame in frames))

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    def to_config(self) -> dict[str, Any]:
        """Serialize to the configurator document form.

        Returns:
            ``{"settings": ..., "type": "animation", "frames": ["<cmd>,<cmd>", ...]}``
        """
        return {
            "settings": self.settings,
            "type": self.type,
            "frames": [join_frame(frame) for frame in self.frames],
        }


__all__ = ["Animation"]
