"""Shared utilities for kiianigen."""

from kiianigen.core.utils.formatting import sanitize_animation_name
from kiianigen.core.utils.json import read_json, write_json
from kiianigen.core.utils.math import clamp, format_number, lerp, round_half_up

__all__ = [
    "clamp",
    "format_number",
    "lerp",
    "read_json",
    "round_half_up",
    "sanitize_animation_name",
    "write_json",
]
