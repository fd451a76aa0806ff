"""Keyboard configuration document I/O.

The configurator dumps a keyboard configuration (``KType-Standard.json``)
and a KLL pixel map (``kll.json``). Generated animations are merged into
the configuration, its header is stamped, and the result is written to a
new timestamped file.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
import logging
from pathlib import Path
from typing import Any

from kiianigen.core.animation.models import Animation
from kiianigen.core.utils.json import read_json, write_json

logger = logging.getLogger(__name__)


def load_keyboard_config(path: str | Path) -> dict[str, Any]:
    """Read the keyboard configuration document.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON.
    """
    doc = read_json(path)
    logger.debug("Loaded keyboard configuration %s", path)
    return doc


def load_pixel_map(path: str | Path) -> dict[str, Any]:
    """Read the KLL pixel map document."""
    return read_json(path)


def merge_animations(doc: dict[str, Any], animations: Mapping[str, Animation]) -> dict[str, Any]:
    """Add or replace animations in the document, in place.

    Returns:
        The document's animation mapping.
    """
    existing = doc.setdefault("animations", {})
    if existing is None:
        existing = doc["animations"] = {}
    for name, animation in animations.items():
        if name in existing:
            logger.info("Replacing animation '%s'", name)
        existing[name] = animation.to_config()
    return existing


def stamp_header(
    doc: dict[str, Any],
    generator: str,
    mapping_text: Sequence[str],
    author: str,
    now: datetime,
) -> dict[str, Any]:
    """Stamp author, date, variant and layout into the document header.

    Example:
        >>> doc = {"header": {"Layout": "KType"}}
        >>> header = stamp_header(doc, "kitt2000", [], "me", datetime(2026, 3, 1))
        >>> header["Layout"], header["Variant"], header["Date"]
        ('KType + Kiianigen Kitt2000', 'kiianigen_animations_kitt2000', '2026-03-01')
    """
    header = doc.get("header") or {}
    doc["header"] = header
    label = f"Kiianigen {generator[:1].upper()}{generator[1:]}"
    layout = header.get("Layout")

    header["Author"] = f"{author} {now:%Y}"
    header["Date"] = f"{now:%Y-%m-%d}"
    header["Variant"] = f"kiianigen_animations_{generator}"
    header["Layout"] = f"{layout} + {label}" if layout else label
    header["KiianigenKeyMap"] = list(mapping_text)
    return header


def output_filename(generator: str, now: datetime) -> str:
    """Timestamped output file name.

    Example:
        >>> output_filename("all", datetime(2026, 3, 1, 9, 5, 7))
        'KType-20260301-090507-all.json'
    """
    return f"KType-{now:%Y%m%d-%H%M%S}-{generator}.json"


def write_keyboard_config(
    doc: dict[str, Any],
    output_dir: str | Path,
    generator: str,
    now: datetime,
) -> Path:
    """Write the document to ``<output_dir>/KType-<timestamp>-<generator>.json``.

    The output directory is created when missing.

    Returns:
        Path of the written file.
    """
    path = Path(output_dir) / output_filename(generator, now)
    write_json(path, doc, indent=4)
    logger.info("Wrote keyboard configuration %s", path)
    return path


__all__ = [
    "load_keyboard_config",
    "load_pixel_map",
    "merge_animations",
    "output_filename",
    "stamp_header",
    "write_keyboard_config",
]
