"""Configuration models for kiianigen."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    filename: str | None = Field(default=None, description="Log file; stdout when unset")
    structured: bool = Field(default=False, description="Emit one JSON object per record")


class TriggerConfig(BaseModel):
    """Where animation start/stop triggers are bound.

    Each generated animation takes the next key of ``keys`` (in pool
    order) that exists in the keyboard matrix.
    """

    model_config = ConfigDict(extra="forbid")

    layer: str = Field(default="1", description="Layer the trigger bindings live on")
    keys: str = Field(
        default="QWERTYUIOPASDFGHJKLZXCVBNM",
        min_length=1,
        description="Ordered pool of layer-0 key labels to use as triggers",
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    source_dir: str = Field(
        default="../KType-Standard", description="Directory dumped by the configurator"
    )
    keyboard_file: str = Field(
        default="KType-Standard.json", description="Keyboard configuration file in source_dir"
    )
    pixel_map_file: str = Field(default="kll.json", description="KLL pixel map file in source_dir")
    output_dir: str = Field(default="json_out", description="Directory for generated files")
    batch_config_path: str = Field(
        default="kiianiconf.json", description="Batch file used by the 'conf' run"
    )
    trigger: TriggerConfig = TriggerConfig()
    author: str = Field(default="kiianigen", description="Author stamped into the header")
    random_seed: int | None = Field(
        default=None, description="Seed for random generators; unseeded when unset"
    )

    @classmethod
    def default_paths(cls) -> list[Path]:
        """Candidate config files, checked in order."""
        return [Path("kiianigen.json"), Path("kiianigen.yaml"), Path("kiianigen.yml")]


class AnimationSpec(BaseModel):
    """One named animation instance in a batch file."""

    model_config = ConfigDict(extra="forbid")

    generator: str = Field(description="Catalog generator name")
    params: list[Any] | None = Field(
        default=None, description="Positional parameters; null entries keep defaults"
    )


class BatchConfig(BaseModel):
    """Declarative batch of animations.

    Attributes:
        animations: Animation specs keyed by display name.
        active_animations: Display names to generate, in order.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    animations: dict[str, AnimationSpec] = Field(default_factory=dict)
    active_animations: list[str] = Field(default_factory=list, alias="activeAnimations")

    @model_validator(mode="after")
    def _check_active_names(self) -> BatchConfig:
        missing = [name for name in self.active_animations if name not in self.animations]
        if missing:
            raise ValueError(f"activeAnimations not defined in animations: {', '.join(missing)}")
        return self


# Written to the batch path when the 'conf' run finds no batch file
DEMO_CONF: dict[str, Any] = {
    "animations": {
        "KARR 1.0": {"generator": "kitt2000", "params": [[255, 102, 0]]},
        "KITT 2000": {"generator": "kitt2000", "params": []},
        "White Noise": {"generator": "whiteNoise"},
        "Turquoise Hexagon Sun": {
            "generator": "baseTopBreath",
            "params": [[0, 255, 0], [0, 0, 255]],
        },
        "Iced Cooly": {"generator": "dodgyPixel", "params": [[204, 204, 204], [0, 0, 255]]},
    },
    "activeAnimations": [
        "KARR 1.0",
        "KITT 2000",
        "Turquoise Hexagon Sun",
        "Iced Cooly",
        "White Noise",
    ],
}


__all__ = [
    "AnimationSpec",
    "AppConfig",
    "BatchConfig",
    "DEMO_CONF",
    "LoggingConfig",
    "TriggerConfig",
]
