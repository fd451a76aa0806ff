"""Command-line interface for kiianigen.

Usage: ``kiianigen <generator|all|conf> [<source dir>]``
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from kiianigen.core.config.loader import load_app_config
from kiianigen.core.errors import KiianigenError
from kiianigen.core.generators.handlers import load_builtin_generators
from kiianigen.core.pipeline import RUN_ALL, RUN_CONF, is_known_generator, run_generation
from kiianigen.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="kiianigen",
        description="Generate keyboard lighting animations for the kiibohd configurator",
    )
    p.add_argument(
        "generator",
        nargs="?",
        default="",
        help=f"Generator name, '{RUN_ALL}' for every generator, or '{RUN_CONF}' for the batch file",
    )
    p.add_argument(
        "source_dir",
        nargs="?",
        default=None,
        help="Directory dumped by the configurator (default: ../KType-Standard)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code (0 for success or an unknown generator, 1 for failure)
    """
    args = build_arg_parser().parse_args(argv)
    generator = args.generator.strip()
    source_dir = args.source_dir.strip() if args.source_dir else None

    try:
        config = load_app_config()
    except ValueError as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )

    registry = load_builtin_generators()
    if not is_known_generator(generator, registry):
        console.print(f"[yellow]Unknown generator: {generator!r}[/yellow]")
        console.print(
            f"Either specify '{RUN_ALL}', '{RUN_CONF}', or use one of the following generators:"
        )
        for name in registry.names:
            console.print(f"\t{name}")
        return 0

    try:
        result = run_generation(generator, source_dir, config=config, registry=registry)
    except (OSError, ValueError, KiianigenError) as e:
        logger.error("Generation failed: %s", e)
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    if result is None:
        return 0

    console.print(f"\n[bold]{result.key_mapping[0]}[/bold]")
    for line in result.key_mapping[1:]:
        console.print(f"\t{line}")
    console.print(f"\n[green]New config json has been saved to file:[/green] {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
