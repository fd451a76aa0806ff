"""Keyboard geometry, documents and trigger keys."""

from kiianigen.core.keyboard.document import (
    load_keyboard_config,
    load_pixel_map,
    merge_animations,
    output_filename,
    stamp_header,
    write_keyboard_config,
)
from kiianigen.core.keyboard.geometry import (
    BASE_LED_IDS,
    DEFAULT_LED_IDS,
    TOP_LED_IDS,
    KeyboardGeometry,
    build_geometry,
)
from kiianigen.core.keyboard.triggers import (
    MAPPING_HEADER,
    assign_trigger_keys,
    find_trigger_keys,
)

__all__ = [
    "BASE_LED_IDS",
    "DEFAULT_LED_IDS",
    "KeyboardGeometry",
    "MAPPING_HEADER",
    "TOP_LED_IDS",
    "assign_trigger_keys",
    "build_geometry",
    "find_trigger_keys",
    "load_keyboard_config",
    "load_pixel_map",
    "merge_animations",
    "output_filename",
    "stamp_header",
    "write_keyboard_config",
]
