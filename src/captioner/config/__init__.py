"""Configuration module for captioner."""

from captioner.config.captioner_config import (
    OUTPUT_FORMAT_ENV,
    CaptionerConfig,
    default_output_format,
)
from captioner.config.config_loader import (
    load_configs_from_yaml,
    load_configs_from_yaml_safe,
)

__all__ = [
    "OUTPUT_FORMAT_ENV",
    "CaptionerConfig",
    "default_output_format",
    "load_configs_from_yaml",
    "load_configs_from_yaml_safe",
]
