"""Load and merge configuration from .sidediff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from sidediff.config.defaults import CONFIG_FILENAME
from sidediff.config.schema import (
    ALIGN_MODES,
    LayoutConfig,
    ParserConfig,
    SidediffConfig,
    ThemeConfig,
)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in raw.items() if k in valid_fields})


def _merge_env_overrides(cfg: SidediffConfig) -> None:
    """Apply SIDEDIFF_* environment variable overrides."""
    if val := os.environ.get("SIDEDIFF_WIDTH"):
        try:
            cfg.layout.width = int(val)
        except ValueError:
            pass
    if val := os.environ.get("SIDEDIFF_ALIGN"):
        if val in ALIGN_MODES:
            cfg.parser.align = val  # type: ignore[assignment]


def _validate(cfg: SidediffConfig) -> None:
    if cfg.parser.align not in ALIGN_MODES:
        raise ConfigError(f"parser.align must be one of {', '.join(ALIGN_MODES)}, got {cfg.parser.align!r}")
    layout = cfg.layout
    if layout.width is not None and (not isinstance(layout.width, int) or layout.width <= 0):
        raise ConfigError(f"layout.width must be a positive integer, got {layout.width!r}")
    for name in ("line_number_width", "min_line_width"):
        value = getattr(layout, name)
        if not isinstance(value, int) or value < 1:
            raise ConfigError(f"layout.{name} must be a positive integer, got {value!r}")


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> SidediffConfig:
    """Load, validate, and return a SidediffConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = SidediffConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = SidediffConfig(
                version=raw.get("version", "1.0"),
                layout=_build_section(raw, LayoutConfig, "layout"),
                theme=_build_section(raw, ThemeConfig, "theme"),
                parser=_build_section(raw, ParserConfig, "parser"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
