"""Shared pytest fixtures for kiianigen tests."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
import shutil

import numpy as np
import pytest

from kiianigen.core.generators.handlers import load_builtin_generators
from kiianigen.core.generators.protocol import GeneratorContext
from kiianigen.core.generators.registry import GeneratorRegistry
from kiianigen.core.keyboard.geometry import KeyboardGeometry, build_geometry

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def source_dir(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy of the configurator dump, safe to modify."""
    dest = tmp_path / "KType-Standard"
    shutil.copytree(fixtures_dir / "KType-Standard", dest)
    return dest


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def keyboard_doc(fixtures_dir: Path) -> dict:
    """Parsed keyboard configuration document."""
    with (fixtures_dir / "KType-Standard" / "KType-Standard.json").open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def kll_doc(fixtures_dir: Path) -> dict:
    """Parsed KLL pixel map."""
    with (fixtures_dir / "KType-Standard" / "kll.json").open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def small_doc() -> dict:
    """Minimal keyboard document with four trigger candidates."""
    doc = {
        "header": {"Layout": "Standard", "Author": "Input Club"},
        "matrix": [
            {"code": "0x01", "layers": {"0": {"key": "Esc", "label": "Esc"}}},
            {"code": "0x02", "layers": {"0": {"key": "W", "label": "W"}}},
            {"code": "0x03", "layers": {"0": {"key": "Q", "label": "Q"}}},
            {"code": "0x04", "layers": {"0": {"key": "E", "label": "E"}}},
            {"code": "0x05", "layers": {"0": {"key": "QW", "label": "QW"}}},
        ],
        "leds": [
            {"id": 1, "scanCode": "0x01"},
            {"id": 2, "scanCode": "0x02"},
            {"id": 3},
        ],
    }
    return copy.deepcopy(doc)


# ============================================================================
# Generation Fixtures
# ============================================================================


@pytest.fixture
def geometry(keyboard_doc: dict, kll_doc: dict) -> KeyboardGeometry:
    """Geometry of the fixture keyboard."""
    return build_geometry(keyboard_doc, kll_doc)


@pytest.fixture
def ctx(geometry: KeyboardGeometry) -> GeneratorContext:
    """Seeded generation context."""
    return GeneratorContext(geometry=geometry, rng=np.random.default_rng(1234))


@pytest.fixture
def registry() -> GeneratorRegistry:
    """Registry with every built-in generator."""
    return load_builtin_generators()
