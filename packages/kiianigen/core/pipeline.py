"""Generation pipeline: documents in, regenerated keyboard configuration out."""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from kiianigen.core.animation.models import Animation
from kiianigen.core.config.loader import load_batch_config
from kiianigen.core.config.models import AppConfig
from kiianigen.core.generators.batch import generate_from_conf
from kiianigen.core.generators.handlers import load_builtin_generators
from kiianigen.core.generators.protocol import GeneratorContext
from kiianigen.core.generators.registry import GeneratorRegistry
from kiianigen.core.keyboard.document import (
    load_keyboard_config,
    load_pixel_map,
    merge_animations,
    stamp_header,
    write_keyboard_config,
)
from kiianigen.core.keyboard.geometry import build_geometry
from kiianigen.core.keyboard.triggers import assign_trigger_keys

logger = logging.getLogger(__name__)

RUN_ALL = "all"
RUN_CONF = "conf"


class GenerationResult(BaseModel):
    """Outcome of one generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_path: Path = Field(description="Written keyboard configuration")
    generated: list[str] = Field(description="Animations generated by this run")
    key_mapping: list[str] = Field(description="Trigger key mapping text")


def is_known_generator(generator: str, registry: GeneratorRegistry) -> bool:
    """True for a registered generator name, 'all' or 'conf'."""
    return generator in registry or generator in (RUN_ALL, RUN_CONF)


def build_animations(
    generator: str,
    registry: GeneratorRegistry,
    ctx: GeneratorContext,
    config: AppConfig,
) -> dict[str, Animation]:
    """Run one generator, every generator ('all') or the batch file ('conf')."""
    if generator == RUN_ALL:
        return {name: registry.generate(name, ctx) for name in registry.names}
    if generator == RUN_CONF:
        batch = load_batch_config(config.batch_config_path)
        return generate_from_conf(batch, registry, ctx)
    return {generator: registry.generate(generator, ctx)}


def run_generation(
    generator: str,
    source_dir: str | Path | None = None,
    config: AppConfig | None = None,
    now: datetime | None = None,
    registry: GeneratorRegistry | None = None,
) -> GenerationResult | None:
    """Generate animations and write a new keyboard configuration.

    Args:
        generator: Generator name, 'all' or 'conf'.
        source_dir: Directory holding the configurator dump; defaults to
                    ``config.source_dir``.
        config: Application config (defaults when None).
        now: Timestamp for the header and file name (current time when None).
        registry: Generators to use (built-ins when None).

    Returns:
        GenerationResult, or None when the generator name is unknown and
        nothing was written.

    Raises:
        FileNotFoundError: If an input document is missing.
        ValueError: If an input document cannot be parsed.
        GeneratorParamsError: If batch parameters do not fit a generator.
    """
    config = config or AppConfig()
    registry = registry or load_builtin_generators()

    if not is_known_generator(generator, registry):
        logger.warning("Unknown generator '%s'; nothing written", generator)
        return None

    src = Path(source_dir if source_dir is not None else config.source_dir)
    doc = load_keyboard_config(src / config.keyboard_file)
    kll = load_pixel_map(src / config.pixel_map_file)
    geometry = build_geometry(doc, kll)
    ctx = GeneratorContext.seeded(geometry, config.random_seed)

    animations = build_animations(generator, registry, ctx, config)
    all_names = list(merge_animations(doc, animations))
    logger.info("Generated %d animation(s); document now has %d", len(animations), len(all_names))

    key_mapping = assign_trigger_keys(doc, all_names, config.trigger)

    now = now or datetime.now()
    stamp_header(doc, generator, key_mapping, config.author, now)
    output_path = write_keyboard_config(doc, config.output_dir, generator, now)

    return GenerationResult(
        output_path=output_path,
        generated=list(animations),
        key_mapping=key_mapping,
    )


__all__ = [
    "GenerationResult",
    "RUN_ALL",
    "RUN_CONF",
    "build_animations",
    "is_known_generator",
    "run_generation",
]
