"""Batch generation from a declarative BatchConfig."""

from __future__ import annotations

from kiianigen.core.animation.models import Animation
from kiianigen.core.config.models import BatchConfig
from kiianigen.core.errors import GeneratorParamsError
from kiianigen.core.generators.protocol import GeneratorContext
from kiianigen.core.generators.registry import GeneratorRegistry
from kiianigen.core.utils.formatting import sanitize_animation_name
from kiianigen.core.utils.logging import get_logger


def generate_from_conf(
    batch: BatchConfig,
    registry: GeneratorRegistry,
    ctx: GeneratorContext,
) -> dict[str, Animation]:
    """Generate every active animation of a batch.

    Args:
        batch: Validated batch configuration.
        registry: Generators to run.
        ctx: Generation context shared by the whole batch.

    Returns:
        Animations keyed by sanitized display name, in activeAnimations order.

    Raises:
        UnknownGeneratorError: If an animation names an unregistered generator.
        GeneratorParamsError: If an animation's params do not fit its generator.
    """
    animations: dict[str, Animation] = {}
    for display_name in batch.active_animations:
        entry = batch.animations[display_name]
        name = sanitize_animation_name(display_name)
        log = get_logger(__name__, animation=name, generator=entry.generator)
        try:
            animation = registry.generate(entry.generator, ctx, entry.params)
        except GeneratorParamsError as e:
            raise GeneratorParamsError(
                entry.generator, f"animation '{display_name}': {e.reason}"
            ) from e

        if name in animations:
            log.warning("Animation name '%s' produced twice; keeping the last", name)
        animations[name] = animation
        log.info("Generated '%s' with %s", name, entry.generator)

    return animations


__all__ = ["generate_from_conf"]
