"""Tests for JSON utility functions."""

from __future__ import annotations

import pytest

from kiianigen.core.utils.json import read_json, write_json


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file path."""
    return tmp_path / "test.json"


def test_write_and_read_json(temp_json_file):
    """Test writing and reading JSON files."""
    data = {
        "settings": "framedelay:1, loop, replace:all",
        "type": "animation",
        "frames": ["P[1](0,0,0),P[2](1,1,1)"],
        "nested": {"key": [1, 2, 3]},
    }

    write_json(temp_json_file, data)

    assert read_json(temp_json_file) == data


def test_write_json_creates_parent_dirs(tmp_path):
    """Test that write_json creates parent directories."""
    nested_path = tmp_path / "json_out" / "nested" / "test.json"

    assert not nested_path.parent.exists()

    written = write_json(nested_path, {"test": "value"})

    assert written == nested_path
    assert read_json(nested_path) == {"test": "value"}


def test_write_json_indents_four_spaces(temp_json_file):
    """Output is indented with four spaces."""
    write_json(str(temp_json_file), {"header": {"Layout": "Standard"}})

    text = temp_json_file.read_text(encoding="utf-8")
    assert '\n    "header": {\n        "Layout": "Standard"' in text


def test_write_json_keeps_non_ascii(temp_json_file):
    """Non-ASCII text is written as-is."""
    write_json(temp_json_file, {"Author": "Jürgen"})

    assert "Jürgen" in temp_json_file.read_text(encoding="utf-8")


def test_read_json_missing_file(tmp_path):
    """Reading a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_json(tmp_path / "missing.json")


def test_read_json_invalid(temp_json_file):
    """Invalid JSON raises ValueError."""
    temp_json_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        read_json(temp_json_file)
