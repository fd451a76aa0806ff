"""Pixel addressing modes.

A pixel command addresses LEDs in exactly one of three ways:

- ``RowColTarget``: a (row, column) cell; either coordinate may be an int
  or a percentage string such as ``"-2%"``.
- ``PercentTarget``: a one-dimensional position along the row or the
  column axis, expressed in percent.
- ``IdTarget``: an absolute LED id.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from kiianigen.core.utils.math import format_number

Coordinate = int | str


def _render_coordinate(value: Coordinate) -> str:
    if isinstance(value, str):
        return value
    return format_number(value)


class RowColTarget(BaseModel):
    """A single (row, column) cell of the LED grid."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["rowcol"] = "rowcol"
    row: Coordinate = Field(description="Row index or percentage string")
    col: Coordinate = Field(description="Column index or percentage string")

    def address(self) -> list[str]:
        return [f"r:{_render_coordinate(self.row)}", f"c:{_render_coordinate(self.col)}"]


class PercentTarget(BaseModel):
    """A position along one axis, in percent (values outside 0-100 fall off the board)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["percent"] = "percent"
    axis: Literal["row", "col"] = Field(description="Axis the percentage runs along")
    percent: float = Field(description="Position along the axis in percent")

    def address(self) -> list[str]:
        prefix = "r" if self.axis == "row" else "c"
        return [f"{prefix}:{format_number(self.percent)}%"]


class IdTarget(BaseModel):
    """An LED addressed by its absolute id."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["id"] = "id"
    id: int = Field(ge=0, description="Absolute LED id")

    def address(self) -> list[str]:
        return [str(self.id)]


PixelTarget = Annotated[
    RowColTarget | PercentTarget | IdTarget,
    Field(discriminator="kind"),
]


def col_percent(percent: float) -> PercentTarget:
    """Shorthand for a column-percentage target."""
    return PercentTarget(axis="col", percent=percent)


def row_percent(percent: float) -> PercentTarget:
    """Shorthand for a row-percentage target."""
    return PercentTarget(axis="row", percent=percent)


__all__ = [
    "IdTarget",
    "PercentTarget",
    "PixelTarget",
    "RowColTarget",
    "col_percent",
    "row_percent",
]
