"""Unit tests for trigger key assignment."""

from __future__ import annotations

import logging

from kiianigen.core.config.models import TriggerConfig
from kiianigen.core.keyboard.triggers import (
    MAPPING_HEADER,
    assign_trigger_keys,
    find_trigger_keys,
)


def _key(entry):
    return entry["layers"]["0"]["key"]


class TestFindTriggerKeys:
    """Tests for trigger key discovery."""

    def test_pool_order(self, small_doc) -> None:
        keys = find_trigger_keys(small_doc["matrix"], "QWERTY")
        assert [_key(entry) for entry in keys] == ["Q", "W", "E"]

    def test_multi_character_labels_ignored(self, small_doc) -> None:
        keys = find_trigger_keys(small_doc["matrix"], "QW")
        assert [_key(entry) for entry in keys] == ["Q", "W"]

    def test_fixture_keyboard(self, keyboard_doc) -> None:
        keys = find_trigger_keys(keyboard_doc["matrix"], TriggerConfig().keys)
        assert "".join(_key(entry) for entry in keys) == "QWERTYASDFZXC"

    def test_entries_without_layers(self) -> None:
        assert find_trigger_keys([{"code": "0x01"}], "Q") == []


class TestAssignTriggerKeys:
    """Tests for assign_trigger_keys."""

    def test_mapping_text(self, small_doc) -> None:
        mapping = assign_trigger_keys(small_doc, ["a", "b"])
        assert mapping == [MAPPING_HEADER, "Q: a", "W: b"]

    def test_bound_key_rewritten(self, small_doc) -> None:
        assign_trigger_keys(small_doc, ["a", "b"])
        q = small_doc["matrix"][2]
        assert q["layers"]["1"] == {"key": "#:None", "label": "NONE"}
        assert q["triggers"] == {
            "1": [
                {"type": "animation", "label": "start 'a' animation", "action": "A[a](start)"},
                {"type": "animation", "label": "stop 'b' animation", "action": "A[b](stop)"},
            ]
        }

    def test_each_key_starts_its_own(self, small_doc) -> None:
        assign_trigger_keys(small_doc, ["a", "b"])
        w = small_doc["matrix"][1]
        actions = [t["action"] for t in w["triggers"]["1"]]
        assert actions == ["A[a](stop)", "A[b](start)"]

    def test_unbound_keys_untouched(self, small_doc) -> None:
        assign_trigger_keys(small_doc, ["a"])
        assert "triggers" not in small_doc["matrix"][1]
        assert "triggers" not in small_doc["matrix"][4]
        assert small_doc["matrix"][0]["layers"] == {"0": {"key": "Esc", "label": "Esc"}}

    def test_overflow_warns(self, small_doc, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            mapping = assign_trigger_keys(small_doc, ["a", "b", "c", "d"])
        assert mapping == [MAPPING_HEADER, "Q: a", "W: b", "E: c"]
        assert "'d'" in caplog.text
        assert len(small_doc["matrix"][3]["triggers"]["1"]) == 4

    def test_custom_layer_and_pool(self, small_doc) -> None:
        mapping = assign_trigger_keys(small_doc, ["a"], TriggerConfig(layer="2", keys="E"))
        assert mapping == [MAPPING_HEADER, "E: a"]
        assert small_doc["matrix"][3]["layers"]["2"]["key"] == "#:None"
        assert "1" not in small_doc["matrix"][3]["layers"]

    def test_no_animations(self, small_doc) -> None:
        assert assign_trigger_keys(small_doc, []) == [MAPPING_HEADER]
