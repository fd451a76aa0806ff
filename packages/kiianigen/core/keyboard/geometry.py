"""Keyboard geometry facts shared read-only by every generator."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# LED ids on the KType: 1-87 light the keys, 88-119 ring the base
TOP_LED_IDS: tuple[int, ...] = tuple(range(1, 88))
BASE_LED_IDS: tuple[int, ...] = tuple(range(88, 120))
DEFAULT_LED_IDS: tuple[int, ...] = tuple(range(1, 120))


class KeyboardGeometry(BaseModel):
    """Read-only geometry of one keyboard.

    Attributes:
        max_row: Highest LED row index.
        max_col: Highest LED column index.
        led_ids: Every LED id, in document order.
        keyed_led_ids: LEDs that sit under a key (descriptor carries a scan code).
        blank_led_ids: Decorative LEDs with no key.
        top_ids: Id range of the key area.
        base_ids: Id range of the base ring, in ring order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_row: int = Field(default=0, ge=0, description="Highest LED row index")
    max_col: int = Field(default=0, ge=0, description="Highest LED column index")
    led_ids: tuple[int, ...] = Field(default=DEFAULT_LED_IDS, description="All LED ids")
    keyed_led_ids: tuple[int, ...] = Field(default=(), description="LEDs under keys")
    blank_led_ids: tuple[int, ...] = Field(default=(), description="LEDs with no key")
    top_ids: tuple[int, ...] = Field(
        default=TOP_LED_IDS, min_length=1, description="Key area LED ids"
    )
    base_ids: tuple[int, ...] = Field(
        default=BASE_LED_IDS, min_length=1, description="Base ring LED ids"
    )


def build_geometry(config_doc: dict[str, Any], kll_doc: dict[str, Any]) -> KeyboardGeometry:
    """Derive geometry from the configurator documents.

    Args:
        config_doc: Parsed keyboard configuration (reads ``leds``).
        kll_doc: Parsed KLL document (reads ``PixelIds`` Row/Col).

    Returns:
        KeyboardGeometry for the run. LED ids fall back to 1-119 when the
        document lists no LEDs.
    """
    leds = config_doc.get("leds") or []
    keyed = tuple(led["id"] for led in leds if led.get("scanCode"))
    blank = tuple(led["id"] for led in leds if not led.get("scanCode"))
    led_ids = tuple(led["id"] for led in leds) or DEFAULT_LED_IDS

    max_row = 0
    max_col = 0
    for pixel in (kll_doc.get("PixelIds") or {}).values():
        max_row = max(max_row, int(pixel["Row"]))
        max_col = max(max_col, int(pixel["Col"]))

    logger.debug(
        "Geometry: %d LEDs (%d keyed, %d blank), max row %d, max col %d",
        len(led_ids),
        len(keyed),
        len(blank),
        max_row,
        max_col,
    )
    return KeyboardGeometry(
        max_row=max_row,
        max_col=max_col,
        led_ids=led_ids,
        keyed_led_ids=keyed,
        blank_led_ids=blank,
    )


__all__ = [
    "BASE_LED_IDS",
    "DEFAULT_LED_IDS",
    "KeyboardGeometry",
    "TOP_LED_IDS",
    "build_geometry",
]
