"""Bind animations to trigger keys.

On the trigger layer, each bound key starts its own animation and stops
all the others. The key's own binding on that layer is cleared so
triggering an animation sends no keystroke.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from kiianigen.core.config.models import TriggerConfig

logger = logging.getLogger(__name__)

MAPPING_HEADER = "Animations are mapped to the following keys:"


def _base_key(entry: dict[str, Any]) -> str | None:
    return entry.get("layers", {}).get("0", {}).get("key")


def find_trigger_keys(matrix: Sequence[dict[str, Any]], pool: str) -> list[dict[str, Any]]:
    """Matrix entries usable as triggers, in pool order.

    Args:
        matrix: Keyboard matrix entries.
        pool: Ordered key labels, one character each.

    Returns:
        Entries whose layer-0 key is a pool label, ordered by the pool.
        Labels missing from the matrix are skipped.
    """
    by_label: dict[str, dict[str, Any]] = {}
    for entry in matrix:
        key = _base_key(entry)
        if key is not None and len(key) == 1 and key in pool:
            by_label[key] = entry
    return [by_label[label] for label in pool if label in by_label]


def _trigger_actions(animation_names: Sequence[str], own: str) -> list[dict[str, str]]:
    actions = []
    for name in animation_names:
        verb = "start" if name == own else "stop"
        actions.append(
            {
                "type": "animation",
                "label": f"{verb} '{name}' animation",
                "action": f"A[{name}]({verb})",
            }
        )
    return actions


def assign_trigger_keys(
    doc: dict[str, Any],
    animation_names: Sequence[str],
    trigger: TriggerConfig | None = None,
) -> list[str]:
    """Rewrite trigger keys in the document's matrix, in place.

    The i-th animation is bound to the i-th available trigger key.

    Args:
        doc: Keyboard configuration document.
        animation_names: Every animation in the document, in order.
        trigger: Trigger layer and key pool.

    Returns:
        Mapping text: a header line followed by ``"<key>: <animation>"`` lines.
    """
    trigger = trigger or TriggerConfig()
    keys = find_trigger_keys(doc.get("matrix", []), trigger.keys)
    mapping = [MAPPING_HEADER]

    for i, name in enumerate(animation_names):
        if i >= len(keys):
            logger.warning("No trigger key left for animation '%s'; it stays unbound", name)
            continue

        entry = keys[i]
        entry["layers"][trigger.layer] = {"key": "#:None", "label": "NONE"}
        entry["triggers"] = {trigger.layer: _trigger_actions(animation_names, name)}
        mapping.append(f"{_base_key(entry)}: {name}")

    return mapping


__all__ = [
    "MAPPING_HEADER",
    "assign_trigger_keys",
    "find_trigger_keys",
]
