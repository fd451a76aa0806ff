"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from kiianigen.core.config.models import DEMO_CONF, AppConfig, BatchConfig
from kiianigen.core.utils.json import read_json, write_json

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("kiianiconf.json")
        'json'
        >>> detect_format("kiianiconf.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Format is auto-detected from the file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
                # safe_load returns None for empty files
                return content if content is not None else {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file. When None, the first existing
              default path (kiianigen.json, kiianigen.yaml, kiianigen.yml)
              is used.

    Returns:
        Validated AppConfig; all defaults when no file exists.

    Raises:
        ValidationError: If config is invalid
    """
    candidates = [Path(path)] if path is not None else AppConfig.default_paths()
    for candidate in candidates:
        if candidate.exists():
            logger.debug("Loading app config from %s", candidate)
            return AppConfig.model_validate(load_config(candidate))

    logger.debug("No app config found, using defaults")
    return AppConfig()


def save_config(path: str | Path, data: dict[str, Any]) -> Path:
    """Write a configuration dictionary as JSON or YAML by extension."""
    path = Path(path)
    if detect_format(path) == "json":
        return write_json(path, data, indent=4)

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    return path


def load_batch_config(path: str | Path) -> BatchConfig:
    """Load the batch file, writing the demo batch there first if it is missing.

    Args:
        path: Batch file path (.json, .yaml, or .yml)

    Returns:
        Validated BatchConfig

    Raises:
        ValidationError: If the batch is invalid
    """
    path = Path(path)
    if not path.exists():
        logger.info("Batch file %s not found, writing the demo batch", path)
        save_config(path, copy.deepcopy(DEMO_CONF))
    return BatchConfig.model_validate(load_config(path))


__all__ = [
    "detect_format",
    "load_app_config",
    "load_batch_config",
    "load_config",
    "save_config",
]
