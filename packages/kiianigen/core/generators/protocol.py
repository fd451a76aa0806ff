"""Generator protocol and context models.

Defines the Generator protocol every catalog entry implements, the
GeneratorContext that carries run-wide dependencies, and the mapping of
positional batch parameters onto a generator's Params model.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, Protocol, runtime_checkable

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kiianigen.core.animation.models import Animation
from kiianigen.core.errors import GeneratorParamsError
from kiianigen.core.keyboard.geometry import KeyboardGeometry


class GeneratorContext(BaseModel):
    """Context provided to generators.

    Attributes:
        geometry: Keyboard geometry for the run.
        rng: Random generator for noise and random interpolation. Seed it
             for reproducible output.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    geometry: KeyboardGeometry = Field(default_factory=KeyboardGeometry)
    rng: np.random.Generator = Field(default_factory=np.random.default_rng)

    @classmethod
    def seeded(cls, geometry: KeyboardGeometry, seed: int | None = None) -> GeneratorContext:
        """Build a context whose random generator uses the given seed."""
        return cls(geometry=geometry, rng=np.random.default_rng(seed))


class GeneratorParams(BaseModel):
    """Base class for generator parameter models.

    Field order is the positional order used by batch configurations.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)


@runtime_checkable
class Generator(Protocol):
    """Protocol for animation generators.

    Each generator is one named catalog entry. It turns validated
    parameters plus the run context into a finished Animation and never
    touches files or shared state.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    Params: ClassVar[type[GeneratorParams]]

    def build(self, params: Any, ctx: GeneratorContext) -> Animation:
        """Build the animation.

        Args:
            params: Instance of the generator's Params model.
            ctx: Generation context.

        Returns:
            The finished Animation.
        """
        ...


def parse_params(generator: Generator, params: Sequence[Any] | None = None) -> GeneratorParams:
    """Map positional parameters onto a generator's Params model.

    A ``None`` entry keeps that field's default.

    Args:
        generator: Generator whose Params model to fill.
        params: Positional values in field order.

    Returns:
        Validated Params instance.

    Raises:
        GeneratorParamsError: If there are too many values or one fails
            validation.
    """
    params = list(params or [])
    fields = list(generator.Params.model_fields)
    if len(params) > len(fields):
        raise GeneratorParamsError(
            generator.name,
            f"expected at most {len(fields)} parameter(s) ({', '.join(fields) or 'none'}), "
            f"got {len(params)}",
        )

    values = {field: value for field, value in zip(fields, params) if value is not None}
    try:
        return generator.Params.model_validate(values)
    except ValidationError as e:
        raise GeneratorParamsError(generator.name, str(e)) from e


__all__ = [
    "Generator",
    "GeneratorContext",
    "GeneratorParams",
    "parse_params",
]
