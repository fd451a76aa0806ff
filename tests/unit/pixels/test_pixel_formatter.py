"""Tests for pixel targets and the pixel command formatter."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError
import pytest

from kiianigen.core.pixels import (
    IdTarget,
    PercentTarget,
    PixelTarget,
    RowColTarget,
    col_percent,
    format_pixel,
    join_frame,
    pixel_id,
    row_percent,
    sort_pixel_frame,
)


class TestFormatPixel:
    """Tests for format_pixel."""

    def test_row_col_with_percentage(self) -> None:
        assert format_pixel(RowColTarget(row=0, col="-2%"), (0, 0, 255)) == "P[r:0,c:-2%](0,0,255)"

    def test_row_col_cell(self) -> None:
        assert format_pixel(RowColTarget(row=2, col=5), (25, 25, 25)) == "P[r:2,c:5](25,25,25)"

    def test_id(self) -> None:
        assert format_pixel(IdTarget(id=16), (255, 0, 0)) == "P[16](255,0,0)"

    def test_column_percent(self) -> None:
        assert format_pixel(PercentTarget(axis="col", percent=-2), (0, 0, 0)) == "P[c:-2%](0,0,0)"

    def test_row_percent(self) -> None:
        assert format_pixel(row_percent(102), (93, 93, 93)) == "P[r:102%](93,93,93)"

    def test_fractional_percent(self) -> None:
        assert format_pixel(col_percent(2.5), (1, 2, 3)) == "P[c:2.5%](1,2,3)"

    def test_missing_channels_default_to_zero(self) -> None:
        assert format_pixel(IdTarget(id=3), (7,)) == "P[3](7,0,0)"
        assert format_pixel(IdTarget(id=3), ()) == "P[3](0,0,0)"


class TestPixelTargets:
    """Tests for the pixel target models."""

    def test_targets_are_frozen(self) -> None:
        target = IdTarget(id=1)
        with pytest.raises(ValidationError):
            target.id = 2

    def test_negative_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IdTarget(id=-1)

    def test_unknown_axis_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PercentTarget(axis="diagonal", percent=10)

    def test_target_from_tagged_dict(self) -> None:
        """The kind field selects the addressing mode."""
        target = TypeAdapter(PixelTarget).validate_python(
            {"kind": "percent", "axis": "row", "percent": 50}
        )
        assert isinstance(target, PercentTarget)
        assert format_pixel(target, [1, 2, 3]) == "P[r:50%](1,2,3)"

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(PixelTarget).validate_python({"kind": "grid", "id": 4})


class TestFrames:
    """Tests for frame helpers."""

    def test_join_frame(self) -> None:
        frame = join_frame(["P[1](0,0,0)", format_pixel(IdTarget(id=2), (1, 1, 1))])
        assert frame == "P[1](0,0,0),P[2](1,1,1)"

    def test_pixel_id(self) -> None:
        assert pixel_id("P[110](0,0,255)") == 110

    def test_pixel_id_rejects_row_col(self) -> None:
        with pytest.raises(ValueError, match="not addressed by id"):
            pixel_id("P[r:0,c:1](0,0,0)")

    def test_sort_by_numeric_id(self) -> None:
        frame = ["P[110](1,1,1)", "P[87](2,2,2)", "P[1](3,3,3)", "P[94](4,4,4)"]
        assert sort_pixel_frame(frame) == [
            "P[1](3,3,3)",
            "P[87](2,2,2)",
            "P[94](4,4,4)",
            "P[110](1,1,1)",
        ]

    def test_sort_is_stable(self) -> None:
        frame = ["P[5](1,0,0)", "P[2](0,0,0)", "P[5](2,0,0)"]
        assert sort_pixel_frame(frame) == ["P[2](0,0,0)", "P[5](1,0,0)", "P[5](2,0,0)"]
