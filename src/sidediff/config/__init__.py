"""Configuration loading, schema, and defaults."""

from sidediff.config.loader import ConfigError, load_config
from sidediff.config.schema import LayoutConfig, ParserConfig, SidediffConfig, ThemeConfig

__all__ = [
    "ConfigError",
    "LayoutConfig",
    "ParserConfig",
    "SidediffConfig",
    "ThemeConfig",
    "load_config",
]
