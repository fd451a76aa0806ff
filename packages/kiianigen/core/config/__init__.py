"""Configuration management for kiianigen."""

from kiianigen.core.config.loader import (
    detect_format,
    load_app_config,
    load_batch_config,
    load_config,
    save_config,
)
from kiianigen.core.config.models import (
    DEMO_CONF,
    AnimationSpec,
    AppConfig,
    BatchConfig,
    LoggingConfig,
    TriggerConfig,
)

__all__ = [
    # Loaders
    "detect_format",
    "load_app_config",
    "load_batch_config",
    "load_config",
    "save_config",
    # Models
    "AnimationSpec",
    "AppConfig",
    "BatchConfig",
    "DEMO_CONF",
    "LoggingConfig",
    "TriggerConfig",
]
