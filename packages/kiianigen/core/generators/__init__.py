"""Animation generator catalog."""

from kiianigen.core.generators.batch import generate_from_conf
from kiianigen.core.generators.handlers import load_builtin_generators
from kiianigen.core.generators.protocol import (
    Generator,
    GeneratorContext,
    GeneratorParams,
    parse_params,
)
from kiianigen.core.generators.registry import GeneratorRegistry

__all__ = [
    "Generator",
    "GeneratorContext",
    "GeneratorParams",
    "GeneratorRegistry",
    "generate_from_conf",
    "load_builtin_generators",
    "parse_params",
]
