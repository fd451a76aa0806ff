"""Generator registry.

Maps catalog names to Generator instances and runs them with
positional parameters.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from kiianigen.core.animation.models import Animation
from kiianigen.core.errors import UnknownGeneratorError
from kiianigen.core.generators.protocol import Generator, GeneratorContext, parse_params

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Registry for Generator instances.

    Names enumerate in registration order, which is also the order the
    ``all`` run adds animations to the keyboard configuration.

    Example:
        >>> registry = GeneratorRegistry()
        >>> registry.register(RedPulseGenerator())
        >>> animation = registry.generate("redPulse", ctx)
    """

    def __init__(self) -> None:
        self._generators: dict[str, Generator] = {}

    def register(self, generator: Generator) -> None:
        """Register a generator under its name.

        Args:
            generator: Generator implementation to register.
        """
        name = generator.name
        if name in self._generators:
            logger.warning(
                "Overwriting generator '%s' (old=%s, new=%s)",
                name,
                type(self._generators[name]).__name__,
                type(generator).__name__,
            )
        self._generators[name] = generator
        logger.debug("Registered generator '%s' (%s)", name, type(generator).__name__)

    def get(self, name: str) -> Generator | None:
        """Get a generator by name.

        Returns:
            Generator if registered, None otherwise.
        """
        return self._generators.get(name)

    def require(self, name: str) -> Generator:
        """Get a generator by name, failing loudly.

        Raises:
            UnknownGeneratorError: If the name is not registered.
        """
        generator = self._generators.get(name)
        if generator is None:
            raise UnknownGeneratorError(name, self.names)
        return generator

    def generate(
        self,
        name: str,
        ctx: GeneratorContext,
        params: Sequence[Any] | None = None,
    ) -> Animation:
        """Run a generator with positional parameters.

        Args:
            name: Generator name.
            ctx: Generation context.
            params: Positional parameters; defaults are used when omitted.

        Returns:
            The generated Animation.

        Raises:
            UnknownGeneratorError: If the name is not registered.
            GeneratorParamsError: If the parameters do not fit the generator.
        """
        generator = self.require(name)
        parsed = parse_params(generator, params)
        animation = generator.build(parsed, ctx)
        logger.debug("Generated '%s': %d frames", name, animation.frame_count)
        return animation

    @property
    def names(self) -> list[str]:
        """Registered generator names, in registration order."""
        return list(self._generators)

    def __contains__(self, name: object) -> bool:
        return name in self._generators

    def __len__(self) -> int:
        return len(self._generators)


__all__ = [
    "GeneratorRegistry",
]
