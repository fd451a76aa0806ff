"""Tests for name formatting helpers."""

from __future__ import annotations

import pytest

from kiianigen.core.utils.formatting import sanitize_animation_name


@pytest.mark.parametrize(
    ("display_name", "expected"),
    [
        ("KARR 1.0", "KARR_10"),
        ("KITT 2000", "KITT_2000"),
        ("Turquoise Hexagon Sun", "Turquoise_Hexagon_Sun"),
        ("Iced  \t Cooly", "Iced_Cooly"),
        ("rgb-pulse!", "rgbpulse"),
        ("Café Glow", "Caf_Glow"),
        ("already_clean", "already_clean"),
    ],
)
def test_sanitize_animation_name(display_name: str, expected: str) -> None:
    """Whitespace runs become underscores, other non-word characters go."""
    assert sanitize_animation_name(display_name) == expected
