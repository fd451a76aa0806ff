"""Animation model and settings strings."""

from kiianigen.core.animation.models import Animation
from kiianigen.core.animation.settings_builder import (
    AnimationSettingsBuilder,
    looping_settings,
)

__all__ = [
    "Animation",
    "AnimationSettingsBuilder",
    "looping_settings",
]
